"""MatchEngine SDK - Python client for the MatchEngine booking platform

Register users, resources and venues, query availability and create or
cancel bookings with payment intents.
"""

import logging

__version__ = "0.1.0"
__author__ = "MatchEngine Team"
__description__ = "Python client for the MatchEngine booking platform"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from .client import MatchEngineClient  # noqa: E402
from .core.config_manager import ClientConfig, ConfigManager, ConfigurationError  # noqa: E402
from .core.error_handler import ErrorHandler, ErrorKind, MatchEngineError  # noqa: E402
from .core.logging_manager import LoggingManager  # noqa: E402
from .models import Booking, BookingStatus  # noqa: E402

__all__ = [
    "MatchEngineClient",
    "ClientConfig",
    "ConfigManager",
    "ConfigurationError",
    "ErrorHandler",
    "ErrorKind",
    "MatchEngineError",
    "LoggingManager",
    "Booking",
    "BookingStatus",
]
