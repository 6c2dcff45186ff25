"""錯誤收集與報告工具。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..models.error_record import ErrorLevel, ProcessError
from ..models.status_event import StatusEvent

EVENT_ERRORS: dict[StatusEvent, tuple[str, ErrorLevel, str]] = {
    StatusEvent.PATH_INCORRECT: ("E-PATH", ErrorLevel.FATAL, "找不到裝置路徑"),
    StatusEvent.NO_PERMISSION: ("E-PERM", ErrorLevel.FATAL, "沒有存取裝置的權限"),
    StatusEvent.NO_SPACE: ("E-SPACE", ErrorLevel.FATAL, "裝置空間不足"),
    StatusEvent.NO_CUI: ("E-CUI", ErrorLevel.FATAL, "找不到 f3write / f3read 指令"),
    StatusEvent.UNKNOWN_ERROR: ("E-UNKNOWN", ErrorLevel.FATAL, "f3 工具發生未知錯誤"),
    StatusEvent.STOPPED: ("W-STOP", ErrorLevel.RECOVERABLE, "檢測已中止"),
}


@dataclass
class ErrorHandler:
    """集中管理錯誤與警告。"""

    errors: List[ProcessError] = field(default_factory=list)

    def add(self, error: ProcessError) -> None:
        self.errors.append(error)

    def record_event(
        self,
        event: StatusEvent,
        *,
        device_path: Optional[str] = None,
        exit_code: Optional[int] = None,
    ) -> Optional[ProcessError]:
        if event not in EVENT_ERRORS:
            return None
        code, level, message = EVENT_ERRORS[event]
        error = ProcessError(
            code=code,
            level=level,
            message=message,
            device_path=device_path,
            exit_code=exit_code,
        )
        self.add(error)
        return error

    def clear(self) -> None:
        self.errors.clear()
