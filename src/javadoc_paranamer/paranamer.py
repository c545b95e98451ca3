"""Lookup of parameter names from Javadoc.

Supports Javadoc in a zip archive (such as a ``-javadoc.jar``), in a
directory, or served from a remote URL. Typical use::

    with JavadocParanamer("commons-lang3-javadoc.jar") as paranamer:
        names = paranamer.lookup(
            CallableDescriptor.method("org.apache.commons.lang3.StringUtils", "abbreviate",
                                      ["java.lang.String", "int"]))
"""

from pathlib import Path
from typing import List, Optional, Union
import logging

from javadoc_paranamer.config.constants import APP
from javadoc_paranamer.data_models import CallableDescriptor, CallableKind, OnMissing, ParanamerConfig
from javadoc_paranamer.errors import (
    NAMES_NOT_FOUND_ERRORS,
    ParameterNamesNotFoundError,
    RootInvalidError,
    UnsupportedCallableKindError,
)
from javadoc_paranamer.extractors import SignatureExtractor
from javadoc_paranamer.path_resolver import resolve_for
from javadoc_paranamer.providers import (
    BaseJavadocProvider,
    DirectoryJavadocProvider,
    UrlJavadocProvider,
    ZipJavadocProvider,
)
from javadoc_paranamer.utils.file_reader import read_stream
from javadoc_paranamer.utils.logger import Logger

logger = logging.getLogger(__name__)

EMPTY_NAMES: List[str] = []

JavadocRoot = Union[str, Path, BaseJavadocProvider]


def create_provider(root: JavadocRoot, config: Optional[ParanamerConfig] = None) -> BaseJavadocProvider:
    """Select and construct the provider for a documentation root.

    Args:
        root: Base URL (``http://`` or ``https://``), directory, archive file,
            or an already constructed provider
        config: Shared settings

    Returns:
        Provider bound to the root

    Raises:
        RootInvalidError: If the root does not exist, is neither a file nor a
            directory, or is not a Javadoc root
    """
    if isinstance(root, BaseJavadocProvider):
        return root

    if isinstance(root, str) and root.lower().startswith(tuple(APP.url_schemes)):
        return UrlJavadocProvider(root, config)

    path = Path(root)
    if not path.exists():
        raise RootInvalidError(f"Does not exist: {path}")
    if path.is_dir():
        return DirectoryJavadocProvider(path, config)
    if path.is_file():
        return ZipJavadocProvider(path, config)
    raise RootInvalidError(f"Neither file nor directory: {path}")


class JavadocParanamer:
    """Looks up method and constructor parameter names in Javadoc pages."""

    def __init__(self, root: JavadocRoot, config: Optional[ParanamerConfig] = None,
                 extractor: Optional[SignatureExtractor] = None):
        """Initialize the paranamer.

        Args:
            root: Documentation root, see :func:`create_provider`
            config: Shared settings; defaults are used when omitted
            extractor: Signature extractor to use

        Raises:
            RootInvalidError: If the root is not a usable Javadoc root
        """
        self.config = config or ParanamerConfig()
        self.provider = create_provider(root, self.config)
        self.extractor = extractor or SignatureExtractor()

    def lookup(self, descriptor: CallableDescriptor, on_missing: OnMissing = OnMissing.RAISE) -> List[str]:
        """Look up the parameter names of a method or constructor.

        Args:
            descriptor: Callable to look up
            on_missing: Raise, or return an empty list, when names are not found

        Returns:
            Parameter names in declaration order

        Raises:
            UnsupportedCallableKindError: If descriptor is not a method or constructor
            ParameterNamesNotFoundError: If names are not found and on_missing is RAISE
        """
        if not isinstance(descriptor, CallableDescriptor) or not isinstance(descriptor.kind, CallableKind):
            raise UnsupportedCallableKindError(
                f"Expected a method or constructor descriptor, got {type(descriptor).__name__}: {descriptor!r}"
            )

        try:
            names = self._lookup(descriptor)
        except NAMES_NOT_FOUND_ERRORS as e:
            if on_missing is OnMissing.RAISE:
                raise ParameterNamesNotFoundError(descriptor.describe(), e) from e
            logger.debug(f"No names for {descriptor.describe()}: {e.message}")
            return list(EMPTY_NAMES)

        logger.info(f"Found names {names} for {Logger.format_descriptor(descriptor)}")
        return names

    def lookup_parameter_names(self, descriptor: CallableDescriptor, throw_if_missing: bool = True) -> List[str]:
        """Boolean form of :meth:`lookup`."""
        on_missing = OnMissing.RAISE if throw_if_missing else OnMissing.RETURN_EMPTY
        return self.lookup(descriptor, on_missing)

    def _lookup(self, descriptor: CallableDescriptor) -> List[str]:
        page = resolve_for(descriptor, self.config.page_suffix, self.config.array_marker)
        stream = self.provider.open_stream(page)
        content = read_stream(stream, self.config.encoding, source=f"{self.provider.location}/{page}")
        return self.extractor.extract(content, descriptor)

    def close(self) -> None:
        self.provider.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __repr__(self) -> str:
        return f"JavadocParanamer(provider={self.provider!r})"
