"""工具模組。"""

from . import reporting
from .error_handler import ErrorHandler
from .logger import get_logger

__all__ = ["reporting", "ErrorHandler", "get_logger"]
