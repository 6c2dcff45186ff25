"""資料模型模組。"""

from .check_report import NOT_AVAILABLE, Capacity, CheckReport
from .check_session import CheckSession
from .error_record import ErrorLevel, ProcessError
from .status_event import Stage, StatusEvent

__all__ = [
    "NOT_AVAILABLE",
    "Capacity",
    "CheckReport",
    "CheckSession",
    "ErrorLevel",
    "ProcessError",
    "Stage",
    "StatusEvent",
]
