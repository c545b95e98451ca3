"""Javadoc provider backed by a zip archive (e.g. a ``-javadoc.jar``)."""

from pathlib import Path
from typing import BinaryIO, List, Optional, Union
import io
import logging
import threading
import zipfile
import zlib

from javadoc_paranamer.data_models import ParanamerConfig
from javadoc_paranamer.errors import ContentNotFoundError, RootInvalidError
from javadoc_paranamer.providers.base_provider import BaseJavadocProvider

logger = logging.getLogger(__name__)


class ZipJavadocProvider(BaseJavadocProvider):
    """Reads pages from a Javadoc archive.

    Entry names are scanned once at construction. The documentation may sit
    under any prefix inside the archive, so an entry matches a relative path
    when its name equals the path or ends with ``/`` followed by the path.
    """

    def __init__(self, archive: Union[str, Path], config: Optional[ParanamerConfig] = None):
        """Initialize the archive provider.

        Args:
            archive: Path to the zip archive
            config: Shared settings

        Raises:
            RootInvalidError: If the file is not a zip archive or has no sentinel entry
        """
        self.archive = Path(archive)
        super().__init__(kind="zip", location=str(self.archive), config=config)
        self._lock = threading.Lock()

        try:
            self._zip = zipfile.ZipFile(self.archive)
        except (OSError, zipfile.BadZipFile) as e:
            raise RootInvalidError(f"Cannot open archive {self.archive}: {e}") from e

        self._names: List[str] = [info.filename for info in self._zip.infolist() if not info.is_dir()]
        if self._find(self.sentinel_filename) is None:
            self._zip.close()
            raise RootInvalidError(
                f"{self.archive} is not a Javadoc archive: no {self.sentinel_filename} entry",
                suggestions=["Use the -javadoc.jar artifact rather than the binary or sources jar"],
            )

        logger.info(f"Using Javadoc archive {self.archive} ({len(self._names)} entries)")

    def _find(self, relative_path: str) -> Optional[str]:
        suffix = '/' + relative_path
        for name in self._names:
            if name == relative_path or name.endswith(suffix):
                return name
        return None

    def open_stream(self, relative_path: str) -> BinaryIO:
        entry = self._find(relative_path)
        if entry is None:
            raise ContentNotFoundError(f"No entry ending with {relative_path} in {self.archive}")

        # Entries are read whole so corrupt data fails here rather than mid-decode
        with self._lock:
            try:
                with self._zip.open(entry) as member:
                    data = member.read()
            except (OSError, EOFError, zipfile.BadZipFile, zlib.error) as e:
                raise ContentNotFoundError(f"Corrupt entry {entry} in {self.archive}: {e}") from e

        return io.BytesIO(data)

    def close(self) -> None:
        with self._lock:
            self._zip.close()
