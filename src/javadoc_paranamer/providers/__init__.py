"""Javadoc content providers.

Each provider maps a page path relative to a documentation root to a raw
byte stream. All three share the contract of
:class:`~javadoc_paranamer.providers.base_provider.BaseJavadocProvider` and
differ only in how the root is validated and read.
"""

from .base_provider import BaseJavadocProvider
from .directory_provider import DirectoryJavadocProvider
from .url_provider import UrlJavadocProvider
from .zip_provider import ZipJavadocProvider

__all__ = [
    'BaseJavadocProvider',
    'DirectoryJavadocProvider',
    'UrlJavadocProvider',
    'ZipJavadocProvider',
]
