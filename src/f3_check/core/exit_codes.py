"""f3 工具結束碼分類。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..models import StatusEvent

EXIT_OK = 0
EXIT_NO_ARGUMENT_OR_SPACE = 1
EXIT_PATH_INCORRECT = 2
EXIT_NO_PERMISSION = 13
EXIT_TERMINATED = 15
EXIT_SIGTERM = 143
EXIT_COMMAND_NOT_FOUND = 127
EXIT_CANNOT_EXECUTE = 126

NO_SPACE_MARKER = "No space!"


@dataclass(frozen=True)
class ExitOutcome:
    exit_code: int
    events: tuple[StatusEvent, ...] = ()
    output: Optional[str] = None
    append: bool = False

    @property
    def should_continue(self) -> bool:
        return self.exit_code == EXIT_OK

    def apply(self, current_output: str) -> str:
        if self.output is None:
            return current_output
        if self.append:
            return current_output + self.output
        return self.output


def classify_exit(exit_code: int, stdout: str, stderr: str) -> ExitOutcome:
    """把結束碼對應為狀態事件與輸出緩衝的變更。

    寫入與讀取兩個階段共用同一套規則。
    """
    if exit_code == EXIT_OK:
        return ExitOutcome(exit_code, output="\n" + stdout, append=True)
    if exit_code == EXIT_NO_ARGUMENT_OR_SPACE:
        if NO_SPACE_MARKER in stdout:
            return ExitOutcome(exit_code, (StatusEvent.NO_SPACE,), output=stdout)
        return ExitOutcome(exit_code, output="")
    if exit_code == EXIT_PATH_INCORRECT:
        return ExitOutcome(exit_code, (StatusEvent.PATH_INCORRECT,))
    if exit_code == EXIT_NO_PERMISSION:
        # 13 also reports STOPPED, same as the terminated codes
        return ExitOutcome(exit_code, (StatusEvent.NO_PERMISSION, StatusEvent.STOPPED))
    if exit_code in (EXIT_TERMINATED, EXIT_SIGTERM):
        return ExitOutcome(exit_code, (StatusEvent.STOPPED,))
    if exit_code == EXIT_COMMAND_NOT_FOUND:
        return ExitOutcome(exit_code, (StatusEvent.NO_CUI,))
    return ExitOutcome(exit_code, (StatusEvent.UNKNOWN_ERROR,), output="Error:\n" + stderr)
