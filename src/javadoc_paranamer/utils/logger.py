"""Logging setup for javadoc_paranamer.

Library modules only call ``logging.getLogger(__name__)``; nothing is
printed until an application configures the package logger through
:class:`Logger`, as the command-line tool does.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from javadoc_paranamer.config.constants import DEFAULTS

PACKAGE_LOGGER = "javadoc_paranamer"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


class Logger:
    """Configures the package logger once per process.

    Every module logger below ``javadoc_paranamer`` propagates to the
    configured handlers.
    """

    _instance: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls, name: str = PACKAGE_LOGGER,
                   level: str = "INFO",
                   log_to_file: bool = False,
                   log_dir: str = DEFAULTS.LOG_DIR) -> logging.Logger:
        """Get the package logger, configuring it on first use.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR)
            log_to_file: Also write a timestamped log file
            log_dir: Directory for log files

        Returns:
            Configured logger instance
        """
        if cls._instance is not None:
            return cls._instance

        logger = logging.getLogger(name)
        logger.setLevel(_level(level))
        logger.handlers.clear()
        for handler in cls._handlers(_level(level), log_to_file, log_dir):
            logger.addHandler(handler)

        cls._instance = logger
        return logger

    @classmethod
    def from_config(cls, logging_config: Dict[str, Any], level: Optional[str] = None) -> logging.Logger:
        """Configure the package logger from the ``logging`` section of the YAML config.

        Args:
            logging_config: Mapping with optional ``level``, ``log_to_file`` and ``log_dir``
            level: Level overriding the configured one
        """
        return cls.get_logger(
            level=level or logging_config.get('level', DEFAULTS.LOG_LEVEL),
            log_to_file=bool(logging_config.get('log_to_file', False)),
            log_dir=logging_config.get('log_dir', DEFAULTS.LOG_DIR),
        )

    @staticmethod
    def _handlers(level: int, log_to_file: bool, log_dir: str) -> List[logging.Handler]:
        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        # stdout is reserved for lookup results
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(formatter)
        handlers: List[logging.Handler] = [console]

        if log_to_file:
            directory = Path(log_dir)
            directory.mkdir(parents=True, exist_ok=True)
            log_file = directory / f"{PACKAGE_LOGGER}_{datetime.now():%Y%m%d_%H%M%S}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

        return handlers

    @classmethod
    def reset(cls):
        """Close the handlers and forget the configured logger."""
        if cls._instance is not None:
            for handler in list(cls._instance.handlers):
                handler.close()
            cls._instance.handlers.clear()
        cls._instance = None

    @classmethod
    def format_descriptor(cls, descriptor: Any, max_length: int = 120) -> str:
        """One-line summary of a callable descriptor for log messages."""
        if descriptor is None:
            return "<none>"
        describe = getattr(descriptor, "describe", None)
        text = describe() if callable(describe) else repr(descriptor)
        if len(text) > max_length:
            text = text[:max_length] + "..."

        parts = [text]
        kind = getattr(descriptor, "kind", None)
        if kind is not None:
            parts.append(f"kind={getattr(kind, 'value', kind)}")
        arity = getattr(descriptor, "arity", None)
        if arity is not None:
            parts.append(f"arity={arity}")
        return " | ".join(parts)
