"""Configuration management module."""

from .constants import JAVADOC, DEFAULTS, APP
from .argument_parser import parse_arguments

__all__ = ['JAVADOC', 'DEFAULTS', 'APP', 'parse_arguments']
