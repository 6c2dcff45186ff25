"""單次檢測的執行狀態。"""

from __future__ import annotations

from dataclasses import dataclass

from .status_event import Stage


@dataclass
class CheckSession:
    stage: Stage = Stage.IDLE
    device_path: str = ""
    output: str = ""
    progress: int = 0

    def reset(self, device_path: str) -> None:
        self.device_path = device_path
        self.output = ""
        self.progress = 0

    def enter_stage(self, stage: Stage) -> None:
        self.stage = stage
        if stage is not Stage.IDLE:
            self.progress = 0
