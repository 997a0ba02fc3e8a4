"""Centralized Logging Management for the MatchEngine SDK

The package logger stays silent until an application opts in through
LoggingManager.configure().
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, Union

PACKAGE_LOGGER = "matchengine"


class ColoredFormatter(logging.Formatter):
    """Custom formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        log_message = super().format(record)
        return f"{self.COLORS.get(record.levelname, '')}{log_message}{self.COLORS['RESET']}"


class LoggingManager:
    """Logging configuration for the SDK's package logger."""

    _instance: Optional['LoggingManager'] = None
    _initialized: bool = False

    def __new__(cls) -> 'LoggingManager':
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize logging manager (only once)."""
        if self._initialized:
            return

        self.package_logger = logging.getLogger(PACKAGE_LOGGER)
        self.loggers: Dict[str, logging.Logger] = {}
        self.handlers: list = []
        self._initialized = True

    def configure(self, level: str = "INFO", log_file: Optional[Union[str, Path]] = None,
                  colored: bool = True):
        """Attach console (and optionally file) handlers to the package logger.

        Calling this again replaces the handlers added by the previous call.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional path of a rotating log file
            colored: Whether console output uses ANSI colors
        """
        numeric_level = self._to_level(level)
        self._remove_handlers()

        console_handler = logging.StreamHandler(sys.stderr)
        formatter_class = ColoredFormatter if colored else logging.Formatter
        console_handler.setFormatter(formatter_class(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%H:%M:%S'
        ))
        self._add_handler(console_handler)

        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=5 * 1024 * 1024,  # 5MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(name)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self._add_handler(file_handler)

        self.package_logger.setLevel(numeric_level)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a logger, cached by name.

        Args:
            name: Logger name (typically __name__ of the module)
        """
        manager = cls()
        if name not in manager.loggers:
            manager.loggers[name] = logging.getLogger(name)
        return manager.loggers[name]

    def set_log_level(self, level: str):
        """Set the level of the package logger.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        """
        self.package_logger.setLevel(self._to_level(level))

    @staticmethod
    def _to_level(level: str) -> int:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f'Invalid log level: {level}')
        return numeric_level

    def _add_handler(self, handler: logging.Handler):
        self.package_logger.addHandler(handler)
        self.handlers.append(handler)

    def _remove_handlers(self):
        for handler in self.handlers:
            self.package_logger.removeHandler(handler)
            handler.close()
        self.handlers = []
