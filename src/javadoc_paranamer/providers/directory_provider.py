"""Javadoc provider backed by a plain directory tree."""

from pathlib import Path
from typing import BinaryIO, Optional, Union
import logging

from javadoc_paranamer.data_models import ParanamerConfig
from javadoc_paranamer.errors import ContentNotFoundError, RootInvalidError
from javadoc_paranamer.providers.base_provider import BaseJavadocProvider

logger = logging.getLogger(__name__)


class DirectoryJavadocProvider(BaseJavadocProvider):
    """Reads pages from an unpacked Javadoc directory."""

    def __init__(self, directory: Union[str, Path], config: Optional[ParanamerConfig] = None):
        """Initialize the directory provider.

        Args:
            directory: Root directory of the Javadoc tree
            config: Shared settings

        Raises:
            RootInvalidError: If the directory or its sentinel file is missing
        """
        self.directory = Path(directory)
        super().__init__(kind="directory", location=str(self.directory), config=config)

        if not self.directory.is_dir():
            raise RootInvalidError(f"Not a directory: {self.directory}")

        if not (self.directory / self.sentinel_filename).is_file():
            raise RootInvalidError(
                f"{self.sentinel_filename} not found in {self.directory}",
                suggestions=[f"Point at the directory that contains {self.sentinel_filename}"],
            )

        logger.info(f"Using Javadoc directory {self.directory}")

    def open_stream(self, relative_path: str) -> BinaryIO:
        page = self.directory / relative_path
        try:
            return open(page, 'rb')
        except OSError as e:
            logger.debug(f"Cannot open {page}: {e}")
            raise ContentNotFoundError(f"No documentation page at {page}") from e
