"""Core modules for the MatchEngine SDK.

Configuration, error taxonomy and logging shared by every other package.
"""

from .config_manager import ClientConfig, ConfigManager, ConfigurationError
from .error_handler import ErrorHandler, ErrorKind, MatchEngineError
from .logging_manager import LoggingManager

__all__ = [
    "ClientConfig",
    "ConfigManager",
    "ConfigurationError",
    "ErrorHandler",
    "ErrorKind",
    "MatchEngineError",
    "LoggingManager"
]
