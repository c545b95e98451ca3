"""Parameter-name extraction from Javadoc HTML pages.

Every member documented in the detail section of a Javadoc page is marked by
an anchor whose identifier spells the member's erased signature. The anchor
is followed by a signature block rendering each parameter as a type and a
name. The spelling differs between generator versions:

==========  ===========================================  ==========================
Generator   Member anchor                                Signature block
==========  ===========================================  ==========================
JDK 6/7     ``<a name="process(java.lang.String, int)">``  next ``<pre>``
JDK 8       ``<a name="process-java.lang.String-int-">``   next ``<pre>``
JDK 9-16    ``<a id="process(java.lang.String,int)">``     next ``<pre>``
JDK 17+     ``<section id="process(java.lang.String,int)">``  ``div.member-signature``
==========  ===========================================  ==========================

Constructors are anchored under the type's simple name up to JDK 10 and
under ``<init>`` afterwards. JDK 8 spells array parameters ``int:A``.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging
import re

from bs4 import BeautifulSoup
from bs4.element import Tag
from javalang import tokenizer as java_tokenizer

from javadoc_paranamer.data_models import CallableDescriptor, CallableKind
from javadoc_paranamer.errors import ExtractionFailedError, SignatureNotFoundError
from javadoc_paranamer.type_names import normalize_type_name, normalize_type_names, split_top_level

logger = logging.getLogger(__name__)

_PAREN_ANCHOR = re.compile(r'^(?P<name><init>|[\w$]+)\((?P<params>[^()]*)\)$')
_DASH_ANCHOR = re.compile(r'^(?P<name>[\w$]+)-(?P<params>[\w$.:-]*)-$')

_SIGNATURE_CLASSES = {'member-signature', 'signature', 'methodSignature'}

# Characters Javadoc uses to keep signatures on one line or allow breaks
_INVISIBLE = str.maketrans({"\xa0": " ", "\u200b": None, "\ufeff": None})
_WHITESPACE = re.compile(r'\s+')


@dataclass(frozen=True)
class MemberAnchor:
    """A member anchor found on a documentation page.

    Attributes:
        name: Member name as anchored (``<init>`` or the type name for constructors)
        parameter_types: Erased parameter types as spelled by the generator
        anchor: Raw anchor identifier
        element: Element carrying the anchor
    """
    name: str
    parameter_types: Tuple[str, ...]
    anchor: str
    element: Tag

    def describe(self) -> str:
        return f"{self.name}({', '.join(self.parameter_types)})"


@dataclass(frozen=True)
class DeclaredParameter:
    """One parameter of a rendered signature."""
    type_text: str
    name: str


def parse_member_anchor(anchor: str) -> Optional[Tuple[str, Tuple[str, ...]]]:
    """Parse a member anchor identifier.

    Args:
        anchor: Value of an ``id`` or ``name`` attribute

    Returns:
        ``(name, parameter_types)`` or None when the anchor is not a member anchor
    """
    anchor = anchor.strip()
    match = _PAREN_ANCHOR.match(anchor)
    if match:
        return match.group('name'), tuple(split_top_level(match.group('params')))

    match = _DASH_ANCHOR.match(anchor)
    if match:
        params = match.group('params')
        return match.group('name'), tuple(params.split('-')) if params else ()

    return None


def _parameter_types_match(wanted: Sequence[str], documented: Sequence[str]) -> bool:
    """Compare parameter type sequences position by position.

    A package-qualified descriptor type must match the documented type
    including its package; an unqualified one matches on the simple name.
    """
    if len(wanted) != len(documented):
        return False
    for wanted_type, documented_type in zip(wanted, documented):
        qualified = '.' in normalize_type_name(wanted_type, qualified=True)
        if normalize_type_name(wanted_type, qualified) != normalize_type_name(documented_type, qualified):
            return False
    return True


def _is_signature_block(tag) -> bool:
    if not isinstance(tag, Tag):
        return False
    if tag.name == 'pre':
        return True
    classes = tag.get('class') or []
    return any(css_class in _SIGNATURE_CLASSES for css_class in classes)


def _clean_text(text: str) -> str:
    return _WHITESPACE.sub(' ', text.translate(_INVISIBLE)).strip()


def _join_tokens(tokens) -> str:
    """Re-join Java tokens, keeping a space only between two words."""
    parts = []
    previous_is_word = False
    for token in tokens:
        is_word = token.value[:1].isalnum() or token.value[:1] in '_$'
        if parts and is_word and previous_is_word:
            parts.append(' ')
        parts.append(token.value)
        previous_is_word = is_word
    return ''.join(parts)


def _is_separator(token, value: str) -> bool:
    return isinstance(token, java_tokenizer.Separator) and token.value == value


def _strip_annotations_and_modifiers(tokens: list) -> list:
    """Drop ``@Annotation(...)`` and ``final`` from a parameter's tokens."""
    kept = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if isinstance(token, java_tokenizer.Annotation):
            i += 1
            # Qualified annotation name: Identifier ('.' Identifier)*
            if i < len(tokens) and isinstance(tokens[i], java_tokenizer.Identifier):
                i += 1
            while (i + 1 < len(tokens) and _is_separator(tokens[i], '.')
                   and isinstance(tokens[i + 1], java_tokenizer.Identifier)):
                i += 2
            if i < len(tokens) and _is_separator(tokens[i], '('):
                depth = 0
                while i < len(tokens):
                    if _is_separator(tokens[i], '('):
                        depth += 1
                    elif _is_separator(tokens[i], ')'):
                        depth -= 1
                        if depth == 0:
                            i += 1
                            break
                    i += 1
            continue
        if isinstance(token, java_tokenizer.Modifier) and token.value == 'final':
            i += 1
            continue
        kept.append(token)
        i += 1
    return kept


def parse_parameter(text: str) -> DeclaredParameter:
    """Split one rendered parameter, e.g. ``final Map<K, V> map``, into type and name.

    Raises:
        ExtractionFailedError: If the text has no name token or does not tokenize
    """
    # Varargs are arrays; a trailing '.' must only ever mean a qualified name
    text = text.replace('...', '[] ')
    try:
        tokens = list(java_tokenizer.tokenize(text))
    except java_tokenizer.LexerError as e:
        raise ExtractionFailedError(f"Cannot tokenize parameter {text!r}: {e}") from e

    tokens = _strip_annotations_and_modifiers(tokens)

    # C-style array declarator: String args[]
    dimensions = []
    while len(tokens) >= 3 and _is_separator(tokens[-1], ']') and _is_separator(tokens[-2], '['):
        dimensions.extend(tokens[-2:])
        tokens = tokens[:-2]

    if (len(tokens) < 2
            or not isinstance(tokens[-1], java_tokenizer.Identifier)
            or _is_separator(tokens[-2], '.')):
        raise ExtractionFailedError(f"No parameter name in {text!r}")

    return DeclaredParameter(type_text=_join_tokens(tokens[:-1] + dimensions), name=tokens[-1].value)


def parameter_list_text(signature: str, member_name: str) -> str:
    """Return the text between the parentheses following ``member_name``.

    Raises:
        ExtractionFailedError: If the name or a balanced parameter list is missing
    """
    match = re.search(r'(?<![\w$.])' + re.escape(member_name) + r'\s*\(', signature)
    if match is None:
        raise ExtractionFailedError(f"Signature does not declare {member_name}: {signature!r}")

    start = match.end()
    depth = 1
    for index in range(start, len(signature)):
        char = signature[index]
        if char == '(':
            depth += 1
        elif char == ')':
            depth -= 1
            if depth == 0:
                return signature[start:index]

    raise ExtractionFailedError(f"Unbalanced parameter list in {signature!r}")


class SignatureExtractor:
    """Extracts a callable's parameter names from a Javadoc page.

    Overloads are told apart by exact parameter type sequence. Types are
    compared without package qualification first; qualification is only
    used to separate overloads whose simple type names coincide.
    """

    def __init__(self, html_parser: str = "html.parser"):
        """Initialize the extractor.

        Args:
            html_parser: BeautifulSoup tree builder to use
        """
        self.html_parser = html_parser

    def find_member_anchors(self, soup: BeautifulSoup) -> List[MemberAnchor]:
        """Collect the distinct member anchors of a parsed page, in page order."""
        anchors = []
        seen = set()
        for element in soup.find_all(lambda tag: tag.has_attr('id') or (tag.name == 'a' and tag.has_attr('name'))):
            for attribute in ('id', 'name'):
                value = element.get(attribute)
                if not value:
                    continue
                parsed = parse_member_anchor(value)
                if parsed is None:
                    continue
                name, parameter_types = parsed
                key = (name, tuple(normalize_type_names(parameter_types, qualified=True)))
                if key not in seen:
                    seen.add(key)
                    anchors.append(MemberAnchor(name, parameter_types, value, element))
                break
        return anchors

    def extract(self, page_text: str, descriptor: CallableDescriptor) -> List[str]:
        """Extract the parameter names of one callable.

        Args:
            page_text: Decoded documentation page of the declaring type
            descriptor: Callable to look up

        Returns:
            Parameter names in declaration order, one per parameter type

        Raises:
            SignatureNotFoundError: If no declaration matches name and parameter types
            ExtractionFailedError: If the matched declaration has no readable names
        """
        soup = BeautifulSoup(page_text, self.html_parser)
        anchors = self.find_member_anchors(soup)
        anchor = self.select_anchor(anchors, descriptor)
        logger.debug(f"Matched anchor {anchor.anchor!r} for {descriptor.describe()}")

        block = self.signature_block(anchor, anchors)
        if block is None:
            raise ExtractionFailedError(f"No signature block follows anchor {anchor.anchor!r}")

        signature = _clean_text(block.get_text())
        rendered_name = self._rendered_name(descriptor)
        parameters = [parse_parameter(part)
                      for part in split_top_level(parameter_list_text(signature, rendered_name))]

        if len(parameters) != descriptor.arity:
            raise ExtractionFailedError(
                f"Signature {signature!r} declares {len(parameters)} parameters, "
                f"expected {descriptor.arity} for {descriptor.describe()}"
            )

        names = [parameter.name for parameter in parameters]
        logger.debug(f"Extracted {names} from {signature!r}")
        return names

    def select_anchor(self, anchors: Sequence[MemberAnchor], descriptor: CallableDescriptor) -> MemberAnchor:
        """Pick the single anchor declaring the descriptor's overload.

        Raises:
            SignatureNotFoundError: If no anchor, or more than one, matches
        """
        candidate_names = self._anchor_names(descriptor)
        named = [anchor for anchor in anchors if anchor.name in candidate_names]
        if not named:
            raise SignatureNotFoundError(
                f"No declaration of {descriptor.describe()} on the page",
                suggestions=["Check the member name and that the page documents it (private members are omitted)"],
            )

        matches = [anchor for anchor in named
                   if _parameter_types_match(descriptor.parameter_type_names, anchor.parameter_types)]

        overloads = ', '.join(anchor.describe() for anchor in named)
        if not matches:
            raise SignatureNotFoundError(
                f"No overload of {descriptor.describe()} on the page; found {overloads}",
                suggestions=["Parameter types must match the documented erased types exactly"],
            )

        if len(matches) == 1:
            return matches[0]

        raise SignatureNotFoundError(
            f"Ambiguous overloads for {descriptor.describe()}: {overloads}",
            suggestions=["Use fully-qualified parameter type names"],
        )

    @staticmethod
    def signature_block(anchor: MemberAnchor, anchors: Sequence[MemberAnchor]) -> Optional[Tag]:
        """Return the signature block documenting ``anchor``.

        The search stops at the next member anchor, so a member without a
        signature block never borrows the block of the member after it.
        """
        if _is_signature_block(anchor.element):
            return anchor.element

        boundaries = {id(other.element) for other in anchors if other.element is not anchor.element}
        for element in anchor.element.next_elements:
            if not isinstance(element, Tag):
                continue
            if id(element) in boundaries:
                return None
            if _is_signature_block(element):
                return element
        return None

    @staticmethod
    def _anchor_names(descriptor: CallableDescriptor) -> Tuple[str, ...]:
        if descriptor.kind is CallableKind.CONSTRUCTOR:
            return ('<init>', descriptor.declaring_simple_name)
        return (descriptor.simple_name,)

    @staticmethod
    def _rendered_name(descriptor: CallableDescriptor) -> str:
        if descriptor.kind is CallableKind.CONSTRUCTOR:
            return descriptor.declaring_simple_name
        return descriptor.simple_name
