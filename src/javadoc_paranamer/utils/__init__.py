"""Utility modules for javadoc_paranamer."""

from .logger import Logger
from .file_reader import read_stream
from .config_loader import ConfigLoader

__all__ = [
    'Logger',
    'read_stream',
    'ConfigLoader',
]
