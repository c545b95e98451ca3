"""Constants for Javadoc parameter-name lookups."""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class JavadocConventions:
    """Layout conventions of generated Javadoc trees."""
    SENTINEL_FILENAME: str = "package-list"
    PAGE_SUFFIX: str = ".html"
    ARRAY_MARKER: str = "[]"
    ENCODING: str = "utf-8"


@dataclass(frozen=True)
class ApplicationDefaults:
    """Default configuration values."""
    CONFIG_FILE: str = "config/config.yaml"
    OUTPUT_FORMAT: str = "text"
    LOG_LEVEL: str = "WARNING"
    LOG_DIR: str = "logs"


@dataclass(frozen=True)
class ApplicationMetadata:
    """Application metadata and system constants."""
    NAME: str = "javadoc-paranamer"
    VERSION: str = "javadoc-paranamer 1.0.0"
    EXIT_SUCCESS: int = 0
    EXIT_FAILURE: int = 1

    @property
    def output_formats(self) -> List[str]:
        return ['text', 'json', 'yaml']

    @property
    def url_schemes(self) -> List[str]:
        """URL schemes served by the HTTP provider."""
        return ['http://', 'https://']


# Singleton instances for easy access
JAVADOC = JavadocConventions()
DEFAULTS = ApplicationDefaults()
APP = ApplicationMetadata()
