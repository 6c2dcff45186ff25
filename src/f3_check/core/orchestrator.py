"""Two-phase f3write / f3read check coordinator."""

from __future__ import annotations

import threading
from typing import Callable, Optional

from ..config import ConfigManager
from ..models import CheckReport, CheckSession, ProcessError, Stage, StatusEvent
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_logger
from .exit_codes import classify_exit
from .output_parser import extract_progress
from .poll_timer import PollTimer
from .reporter import build_report
from .tool_process import ToolProcess

StatusCallback = Callable[[StatusEvent], None]


class CheckOrchestrator:
    """依序執行 f3write 與 f3read，並將狀態變化通知訂閱者。

    計時器輪詢與子行程結束通知都在不同執行緒上觸發，所有狀態變更皆持有
    同一把 RLock；訂閱者的回呼也在鎖內同步呼叫，因此事件順序與狀態轉換一致。
    """

    def __init__(self, config: ConfigManager | None = None, logger=None) -> None:
        self.config = config or ConfigManager()
        self.logger = logger or get_logger(self.__class__.__name__)
        self._lock = threading.RLock()
        self._session = CheckSession()
        self._process: Optional[ToolProcess] = None
        self._timer: Optional[PollTimer] = None
        self._subscribers: list[StatusCallback] = []
        self._errors = ErrorHandler()
        self._idle = threading.Event()
        self._idle.set()

    def __enter__(self) -> "CheckOrchestrator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def subscribe(self, callback: StatusCallback) -> None:
        with self._lock:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: StatusCallback) -> None:
        with self._lock:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

    def start(self, device_path: str) -> None:
        with self._lock:
            while self._process is not None:
                self.stop()

            self._session.reset(device_path)
            self._errors.clear()
            self._set_stage(Stage.WRITING)
            self._launch("write")
            self._emit(StatusEvent.RUNNING)
            self._start_timer()

    def stop(self) -> None:
        """終止目前的子行程並等待結束；無逾時限制。"""
        with self._lock:
            process = self._process
            if process is None:
                return
            self.logger.info("正在中止 %s (pid=%s)", process.argv[0], process.pid)
            process.terminate()
            process.wait()
            self._handle_exit(process)

    def close(self) -> None:
        with self._lock:
            while self._process is not None:
                self.stop()
            self._stop_timer()

    def get_stage(self) -> Stage:
        with self._lock:
            return self._session.stage

    def get_progress(self) -> int:
        with self._lock:
            return self._session.progress

    def get_device_path(self) -> str:
        with self._lock:
            return self._session.device_path

    def get_output(self) -> str:
        with self._lock:
            return self._session.output

    def get_errors(self) -> list[ProcessError]:
        with self._lock:
            return list(self._errors.errors)

    def get_report(self) -> CheckReport:
        with self._lock:
            return build_report(self._session.output)

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        if not self._idle.wait(timeout):
            return False
        # events for the transition are emitted under the lock
        with self._lock:
            return self._session.stage is Stage.IDLE

    def _launch(self, tool: str) -> None:
        argv = [
            *self.config.tool_command(tool),
            str(self.config.get("tools.progress_flag", "--show-progress=1")),
            self._session.device_path,
        ]
        process = ToolProcess.launch(argv)
        if process.launched:
            self.logger.info("啟動 %s (pid=%s)", " ".join(argv), process.pid)
        else:
            self.logger.warning("無法啟動 %s: %s", argv[0], process.read_stderr())
        self._process = process
        process.watch(self._on_process_exit)

    def _on_process_exit(self, process: ToolProcess) -> None:
        with self._lock:
            self._handle_exit(process)

    def _handle_exit(self, process: ToolProcess) -> None:
        # Already handled by stop(), or replaced by a newer phase.
        if process is not self._process:
            return
        self._process = None
        self._stop_timer()

        exit_code = process.wait()
        outcome = classify_exit(
            exit_code,
            process.read_available(final=True),
            process.read_stderr(),
        )
        self._session.output = outcome.apply(self._session.output)

        if not outcome.should_continue:
            self.logger.warning(
                "%s 結束碼 %s (%s)",
                process.argv[0],
                exit_code,
                ", ".join(event.value for event in outcome.events) or "無事件",
            )
            self._set_stage(Stage.IDLE)
            for event in outcome.events:
                self._errors.record_event(
                    event,
                    device_path=self._session.device_path,
                    exit_code=exit_code,
                )
                self._emit(event)
            return

        if self._session.stage is Stage.WRITING:
            self._set_stage(Stage.READING)
            self._launch("read")
            self._emit(StatusEvent.STAGED)
            self._start_timer()
        else:
            self._set_stage(Stage.IDLE)
            self.logger.info("檢測完成: %s", self._session.device_path)
            self._emit(StatusEvent.FINISHED)

    def _on_timer_tick(self, timer: PollTimer) -> None:
        with self._lock:
            if timer is not self._timer or self._process is None:
                return
            chunk = self._process.read_available()
            if not chunk:
                return
            self._session.output += chunk
            percentage = extract_progress(chunk)
            if percentage is not None and percentage > self._session.progress:
                self._session.progress = percentage
                self._emit(StatusEvent.PROGRESSED)

    def _start_timer(self) -> None:
        self._stop_timer()
        interval_sec = float(self.config.get("polling.interval_sec", 1.5))
        timer = PollTimer(interval_sec, lambda: self._on_timer_tick(timer))
        self._timer = timer
        timer.start()

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _set_stage(self, stage: Stage) -> None:
        self._session.enter_stage(stage)
        if stage is Stage.IDLE:
            self._idle.set()
        else:
            self._idle.clear()

    def _emit(self, event: StatusEvent) -> None:
        for callback in list(self._subscribers):
            callback(event)
