"""固定間隔的輪詢計時器。"""

from __future__ import annotations

import threading
from typing import Callable


class PollTimer:
    def __init__(self, interval_sec: float, callback: Callable[[], None]) -> None:
        self._interval_sec = max(0.01, interval_sec)
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        # May be called from the callback itself, so no join here.
        self._stop_event.set()

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval_sec):
            self._callback()
