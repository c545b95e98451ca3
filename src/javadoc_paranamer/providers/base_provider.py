"""Base class for Javadoc content providers."""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional
import logging

from javadoc_paranamer.data_models import ParanamerConfig

logger = logging.getLogger(__name__)


class BaseJavadocProvider(ABC):
    """Abstract base class for locating raw Javadoc pages.

    A provider is bound to one documentation root (archive, directory or base
    URL). The root is validated once at construction and reused for every
    lookup; implementations raise
    :class:`~javadoc_paranamer.errors.RootInvalidError` when the root is not a
    Javadoc root.
    """

    def __init__(self, kind: str, location: str, config: Optional[ParanamerConfig] = None):
        """Initialize the base provider.

        Args:
            kind: Backend name (e.g., 'zip', 'directory', 'url')
            location: Printable location of the documentation root
            config: Shared settings; defaults are used when omitted
        """
        self.kind = kind
        self.location = location
        self.config = config or ParanamerConfig()
        logger.debug(f"Initializing {kind} provider for {location}")

    @property
    def sentinel_filename(self) -> str:
        return self.config.sentinel_filename

    @abstractmethod
    def open_stream(self, relative_path: str) -> BinaryIO:
        """Open the raw bytes of one documentation page.

        The caller owns the returned stream and must close it.

        Args:
            relative_path: Page path relative to the root, ``/``-separated

        Returns:
            Binary stream positioned at the start of the page

        Raises:
            ContentNotFoundError: If no page exists at the path
        """
        pass

    def close(self) -> None:
        """Release resources held for the root."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __str__(self) -> str:
        return f"{self.kind.capitalize()}JavadocProvider(location={self.location})"

    def __repr__(self) -> str:
        return self.__str__()
