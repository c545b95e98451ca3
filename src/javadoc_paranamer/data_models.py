"""Data models for Javadoc parameter-name lookups."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple

from javadoc_paranamer.config.constants import JAVADOC
from javadoc_paranamer import type_names


CONSTRUCTOR_MARKERS = ('<init>', 'new')


class CallableKind(Enum):
    """Kinds of members whose parameter names can be looked up."""
    METHOD = "method"
    CONSTRUCTOR = "constructor"


class OnMissing(Enum):
    """What a lookup does when names cannot be found."""
    RAISE = "raise"
    RETURN_EMPTY = "return_empty"


@dataclass(frozen=True)
class CallableDescriptor:
    """Describes one method or constructor overload.

    Attributes:
        kind: Method or constructor
        declaring_type_name: Fully-qualified name of the declaring type
        simple_name: Method name; empty for constructors
        parameter_type_names: Declared parameter types, in order. Simple,
            qualified, nested (``$``) and JVM array spellings are accepted.
    """
    kind: CallableKind
    declaring_type_name: str
    simple_name: str = ""
    parameter_type_names: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any sequence but keep the descriptor hashable
        object.__setattr__(self, 'parameter_type_names', tuple(self.parameter_type_names))

    @classmethod
    def method(cls, declaring_type_name: str, name: str,
               parameter_type_names: Sequence[str] = ()) -> "CallableDescriptor":
        return cls(CallableKind.METHOD, declaring_type_name, name, tuple(parameter_type_names))

    @classmethod
    def constructor(cls, declaring_type_name: str,
                    parameter_type_names: Sequence[str] = ()) -> "CallableDescriptor":
        return cls(CallableKind.CONSTRUCTOR, declaring_type_name, "", tuple(parameter_type_names))

    @classmethod
    def parse(cls, text: str) -> "CallableDescriptor":
        """Parse ``pkg.Type#member(T1,T2)`` into a descriptor.

        A member of ``<init>`` or ``new`` denotes a constructor.

        Args:
            text: Signature text, e.g. ``com.example.Foo#process(String,int)``

        Returns:
            CallableDescriptor for the signature

        Raises:
            ValueError: If the text is not a member signature
        """
        text = text.strip()
        type_name, hash_sign, member = text.partition('#')
        if not hash_sign or not type_name or '(' not in member or not member.endswith(')'):
            raise ValueError(f"Expected 'pkg.Type#member(T1,T2)', got {text!r}")

        name, _, parameters = member[:-1].partition('(')
        name = name.strip()
        if not name:
            raise ValueError(f"Missing member name in {text!r}")
        parameter_types = tuple(type_names.split_top_level(parameters))
        if any(not parameter for parameter in parameter_types):
            raise ValueError(f"Empty parameter type in {text!r}")

        if name in CONSTRUCTOR_MARKERS:
            return cls.constructor(type_name.strip(), parameter_types)
        return cls.method(type_name.strip(), name, parameter_types)

    @property
    def declaring_simple_name(self) -> str:
        return type_names.simple_name(self.declaring_type_name)

    @property
    def arity(self) -> int:
        return len(self.parameter_type_names)

    def describe(self) -> str:
        """Human-readable form used in errors and log lines."""
        member = self.declaring_simple_name if self.kind is CallableKind.CONSTRUCTOR else self.simple_name
        return f"{self.declaring_type_name}#{member}({', '.join(self.parameter_type_names)})"

    def __str__(self) -> str:
        return self.describe()


@dataclass
class ParanamerConfig:
    """Settings shared by the documentation providers and the orchestrator.

    Attributes:
        sentinel_filename: Index file whose presence marks a Javadoc root
        page_suffix: File suffix of a type's documentation page
        array_marker: Marker appended to array type paths before the suffix
        encoding: Encoding of documentation pages
        http_timeout: Timeout in seconds for URL roots (None waits indefinitely)
        http_headers: Extra headers sent with every HTTP request
    """
    sentinel_filename: str = JAVADOC.SENTINEL_FILENAME
    page_suffix: str = JAVADOC.PAGE_SUFFIX
    array_marker: str = JAVADOC.ARRAY_MARKER
    encoding: str = JAVADOC.ENCODING
    http_timeout: Optional[float] = None
    http_headers: Dict[str, str] = field(default_factory=dict)
