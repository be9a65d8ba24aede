"""Foundation: configuration, faults and logging shared by the containers."""

from .config import FuncprogSettings, clear_settings_cache, get_settings
from .errors import ErrorCode, Fault, FaultException, classify_exception
from .logging import configure_logging, get_logger

__all__ = [
    "FuncprogSettings", "get_settings", "clear_settings_cache",
    "ErrorCode", "Fault", "FaultException", "classify_exception",
    "configure_logging", "get_logger",
]
