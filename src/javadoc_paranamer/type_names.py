"""Java type-name helpers shared by path resolution and signature matching.

Type names reach this package in several spellings: source form
(``java.util.Map<K, V>``), reflection form (``java.util.Map$Entry``,
``[Ljava.lang.String;``), Javadoc 8 anchor form (``java.lang.String:A``) and
varargs form (``java.lang.String...``). Everything that compares type names
goes through :func:`normalize_type_name` so both sides of a comparison are
spelled the same way.
"""

import re
from typing import List

_WHITESPACE = re.compile(r"\s+")

ARRAY_SUFFIX = "[]"

# JVM field descriptors for primitive array components
_PRIMITIVE_DESCRIPTORS = {
    'B': 'byte',
    'C': 'char',
    'D': 'double',
    'F': 'float',
    'I': 'int',
    'J': 'long',
    'S': 'short',
    'Z': 'boolean',
}


def split_top_level(text: str, separator: str = ',') -> List[str]:
    """Split text at separators that are not nested in <> or ().

    Args:
        text: Text to split, e.g. ``Map<K, V>, int``
        separator: Single separator character

    Returns:
        Stripped parts; an empty list for blank input
    """
    if not text.strip():
        return []

    parts = []
    depth = 0
    current = []
    for char in text:
        if char in '<(':
            depth += 1
        elif char in '>)':
            depth = max(0, depth - 1)
        if char == separator and depth == 0:
            parts.append(''.join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append(''.join(current).strip())
    return parts


def strip_type_arguments(text: str) -> str:
    """Remove generic type arguments, including nested ones."""
    result = []
    depth = 0
    for char in text:
        if char == '<':
            depth += 1
        elif char == '>':
            depth = max(0, depth - 1)
        elif depth == 0:
            result.append(char)
    return ''.join(result)


def to_source_type_name(type_name: str) -> str:
    """Convert a JVM array descriptor such as ``[[I`` to ``int[][]``.

    Names that are not array descriptors are returned unchanged.
    """
    if not type_name.startswith('['):
        return type_name

    dimensions = len(type_name) - len(type_name.lstrip('['))
    component = type_name[dimensions:]
    if component.startswith('L') and component.endswith(';'):
        component = component[1:-1]
    elif component in _PRIMITIVE_DESCRIPTORS:
        component = _PRIMITIVE_DESCRIPTORS[component]
    else:
        raise ValueError(f"Malformed array descriptor: {type_name!r}")
    return component + ARRAY_SUFFIX * dimensions


def split_array_dimensions(type_name: str):
    """Split ``T[][]`` into ``('T', 2)``."""
    dimensions = 0
    while type_name.endswith(ARRAY_SUFFIX):
        type_name = type_name[:-len(ARRAY_SUFFIX)]
        dimensions += 1
    return type_name, dimensions


def simple_name(type_name: str) -> str:
    """Return the unqualified name of a type, e.g. ``Entry`` for ``java.util.Map$Entry``."""
    return type_name.replace('$', '.').rsplit('.', 1)[-1]


def normalize_type_name(type_name: str, qualified: bool = False) -> str:
    """Normalize a type name for exact overload comparison.

    Args:
        type_name: Type name in any of the spellings listed in the module docstring
        qualified: Keep the package (and owner type) qualification

    Returns:
        Canonical spelling: no whitespace, no type arguments, ``[]`` for every
        array or varargs dimension, ``.`` as the nested-type separator
    """
    text = _WHITESPACE.sub('', to_source_type_name(type_name.strip()))
    text = strip_type_arguments(text)
    text = text.replace('...', ARRAY_SUFFIX).replace(':A', ARRAY_SUFFIX)
    base, dimensions = split_array_dimensions(text)
    base = base.replace('$', '.')
    if not qualified:
        base = simple_name(base)
    return base + ARRAY_SUFFIX * dimensions


def normalize_type_names(type_names, qualified: bool = False) -> List[str]:
    return [normalize_type_name(name, qualified=qualified) for name in type_names]
