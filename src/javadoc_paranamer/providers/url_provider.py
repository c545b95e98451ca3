"""Javadoc provider backed by an HTTP-served documentation tree."""

from typing import BinaryIO, Optional
import io
import logging

import requests

from javadoc_paranamer.data_models import ParanamerConfig
from javadoc_paranamer.errors import ContentNotFoundError, RootInvalidError
from javadoc_paranamer.providers.base_provider import BaseJavadocProvider

logger = logging.getLogger(__name__)


class UrlJavadocProvider(BaseJavadocProvider):
    """Fetches pages below a base URL.

    Can be used as a context manager to release the HTTP session:
        with UrlJavadocProvider("https://example.org/apidocs") as provider:
            stream = provider.open_stream("com/example/Foo.html")
    """

    def __init__(self, base_url: str, config: Optional[ParanamerConfig] = None,
                 session: Optional[requests.Session] = None):
        """Initialize the URL provider.

        The sentinel file is fetched once to check that the base URL serves
        Javadoc. Its content is decoded and discarded.

        Args:
            base_url: Base URL of the Javadoc tree
            config: Shared settings (timeout, headers, encoding)
            session: HTTP session to use; a new one is created when omitted

        Raises:
            RootInvalidError: If the sentinel file cannot be fetched
        """
        self.base_url = base_url.rstrip('/')
        super().__init__(kind="url", location=self.base_url, config=config)

        self.session = session or requests.Session()
        self.session.headers.update(self.config.http_headers)

        sentinel_url = f"{self.base_url}/{self.sentinel_filename}"
        try:
            response = self.session.get(sentinel_url, timeout=self.config.http_timeout)
            response.raise_for_status()
            response.content.decode(self.config.encoding)
        except (requests.RequestException, UnicodeDecodeError) as e:
            self.session.close()
            raise RootInvalidError(
                f"Cannot fetch {sentinel_url}: {e}",
                suggestions=["Check that the URL points at the root of a Javadoc site"],
            ) from e

        logger.info(f"Using Javadoc site {self.base_url}")

    def open_stream(self, relative_path: str) -> BinaryIO:
        """Fetch a page.

        The body is read completely before returning, so a connection that
        drops mid-body surfaces here as :class:`ContentNotFoundError`.
        """
        url = f"{self.base_url}/{relative_path}"
        try:
            response = self.session.get(url, timeout=self.config.http_timeout)
            if not response.ok:
                raise ContentNotFoundError(f"GET {url} returned HTTP {response.status_code}")
            body = response.content
        except requests.RequestException as e:
            raise ContentNotFoundError(f"Request for {url} failed: {e}") from e

        logger.debug(f"Fetched {len(body)} bytes from {url}")
        return io.BytesIO(body)

    def close(self) -> None:
        self.session.close()
