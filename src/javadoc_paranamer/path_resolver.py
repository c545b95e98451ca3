"""Map Java type names to Javadoc page paths.

``com.example.Foo`` is documented at ``com/example/Foo.html``. Array types
resolve their component first and append the array marker before the page
suffix, so ``com.example.Foo[]`` maps to ``com/example/Foo[].html``.

Nested types are not supported. Javadoc documents ``Outer.Inner`` at
``Outer.Inner.html``, which cannot be told apart from a package segment
without loading the type, so both ``Outer$Inner`` and qualified names whose
owner segment starts with an upper-case letter are rejected.
"""

import logging

from javadoc_paranamer.config.constants import JAVADOC
from javadoc_paranamer.data_models import CallableDescriptor
from javadoc_paranamer.errors import UnsupportedTypeNameError
from javadoc_paranamer.type_names import ARRAY_SUFFIX, to_source_type_name

logger = logging.getLogger(__name__)


def canonical_name(type_name: str, array_marker: str = JAVADOC.ARRAY_MARKER) -> str:
    """Return the dotted canonical name used to build a page path.

    Args:
        type_name: Fully-qualified type name, optionally an array type
        array_marker: Marker appended once per array dimension

    Returns:
        Canonical name such as ``com.example.Foo[]``

    Raises:
        UnsupportedTypeNameError: For nested or malformed type names
    """
    try:
        type_name = to_source_type_name(type_name.strip())
    except ValueError as e:
        raise UnsupportedTypeNameError(str(e)) from e

    if type_name.endswith(ARRAY_SUFFIX):
        component = canonical_name(type_name[:-len(ARRAY_SUFFIX)], array_marker)
        return component + array_marker

    if '$' in type_name:
        raise UnsupportedTypeNameError(
            f"Nested type names are not supported: {type_name}",
            suggestions=["Look up members of the enclosing top-level type instead"],
        )

    segments = type_name.split('.')
    if any(not segment.strip() for segment in segments) or any(' ' in segment for segment in segments):
        raise UnsupportedTypeNameError(f"Malformed type name: {type_name!r}")

    if any(segment[0].isupper() for segment in segments[:-1]):
        raise UnsupportedTypeNameError(
            f"Nested type names are not supported: {type_name}",
            suggestions=["Look up members of the enclosing top-level type instead"],
        )

    return type_name


def resolve(type_name: str,
            page_suffix: str = JAVADOC.PAGE_SUFFIX,
            array_marker: str = JAVADOC.ARRAY_MARKER) -> str:
    """Resolve a type name to its documentation page path.

    Args:
        type_name: Fully-qualified type name
        page_suffix: Page file suffix
        array_marker: Array marker placed before the suffix

    Returns:
        Relative path using ``/`` separators
    """
    path = canonical_name(type_name, array_marker).replace('.', '/') + page_suffix
    logger.debug(f"Resolved {type_name} to {path}")
    return path


def resolve_for(descriptor: CallableDescriptor,
                page_suffix: str = JAVADOC.PAGE_SUFFIX,
                array_marker: str = JAVADOC.ARRAY_MARKER) -> str:
    """Resolve the documentation page of a callable's declaring type."""
    return resolve(descriptor.declaring_type_name, page_suffix, array_marker)
