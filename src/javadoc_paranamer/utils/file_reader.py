"""Stream decoding for raw documentation pages."""

from contextlib import closing
from typing import BinaryIO
import logging

from javadoc_paranamer.config.constants import JAVADOC
from javadoc_paranamer.errors import ContentNotFoundError

logger = logging.getLogger(__name__)


def read_stream(stream: BinaryIO, encoding: str = JAVADOC.ENCODING, source: str = "<stream>") -> str:
    """Decode a page stream to text and close it.

    The stream is closed on every exit path. Lines are re-joined with ``\\n``
    whatever line endings the page used.

    Args:
        stream: Binary stream returned by a provider
        encoding: Page encoding (default: utf-8)
        source: Page location for messages

    Returns:
        Decoded text, one ``\\n``-terminated line per source line

    Raises:
        ContentNotFoundError: If the bytes cannot be read or decoded
    """
    with closing(stream):
        try:
            raw = stream.read()
        except OSError as e:
            raise ContentNotFoundError(f"Error reading {source}: {e}") from e

    try:
        text = raw.decode(encoding)
    except UnicodeDecodeError as e:
        logger.warning(f"Encoding error reading {source}: {e}")
        raise ContentNotFoundError(f"{source} is not valid {encoding}") from e

    content = ''.join(line + '\n' for line in text.splitlines())
    logger.debug(f"Read {len(content)} characters from {source}")
    return content
