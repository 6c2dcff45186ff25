"""外部 f3 工具的子行程包裝。"""

from __future__ import annotations

import codecs
import queue
import subprocess
import threading
from typing import Callable, Optional, Sequence

from .exit_codes import EXIT_CANNOT_EXECUTE, EXIT_COMMAND_NOT_FOUND

_READ_SIZE = 4096


class ToolProcess:
    """持有單一子行程，以背景執行緒讀取 stdout/stderr。

    ``read_available()`` 只取出已讀到的資料，不會阻塞。
    啟動失敗時不拋出例外，而是以結束碼 127 (找不到指令) 或 126 表示。
    """

    def __init__(
        self,
        argv: Sequence[str],
        *,
        popen: Optional[subprocess.Popen] = None,
        exit_code: Optional[int] = None,
        launch_error: str = "",
    ) -> None:
        self.argv = list(argv)
        self._popen = popen
        self._preset_exit_code = exit_code
        self._launch_error = launch_error
        self._chunks: queue.Queue[bytes] = queue.Queue()
        self._stderr_parts: list[bytes] = []
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pumps: list[threading.Thread] = []
        if popen is not None:
            self._pumps = [
                threading.Thread(target=self._pump, args=(popen.stdout, self._chunks.put), daemon=True),
                threading.Thread(target=self._pump, args=(popen.stderr, self._stderr_parts.append), daemon=True),
            ]
            for pump in self._pumps:
                pump.start()

    @classmethod
    def launch(cls, argv: Sequence[str]) -> "ToolProcess":
        try:
            popen = subprocess.Popen(
                list(argv),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                bufsize=0,
            )
        except FileNotFoundError as exc:
            return cls(argv, exit_code=EXIT_COMMAND_NOT_FOUND, launch_error=str(exc))
        except OSError as exc:
            return cls(argv, exit_code=EXIT_CANNOT_EXECUTE, launch_error=str(exc))
        return cls(argv, popen=popen)

    @property
    def pid(self) -> Optional[int]:
        return self._popen.pid if self._popen is not None else None

    @property
    def launched(self) -> bool:
        return self._popen is not None

    @property
    def exit_code(self) -> Optional[int]:
        if self._popen is None:
            return self._preset_exit_code
        returncode = self._popen.poll()
        if returncode is None:
            return None
        if returncode < 0:
            # killed by signal N, reported the way a shell would (128 + N)
            return 128 - returncode
        return returncode

    def is_running(self) -> bool:
        return self._popen is not None and self._popen.poll() is None

    def terminate(self) -> None:
        if self.is_running():
            self._popen.terminate()

    def wait(self) -> int:
        if self._popen is not None:
            self._popen.wait()
            for pump in self._pumps:
                pump.join()
        code = self.exit_code
        return code if code is not None else 0

    def watch(self, callback: Callable[["ToolProcess"], None]) -> threading.Thread:
        def _run() -> None:
            self.wait()
            callback(self)

        watcher = threading.Thread(target=_run, daemon=True)
        watcher.start()
        return watcher

    def read_available(self, *, final: bool = False) -> str:
        data = bytearray()
        while True:
            try:
                data.extend(self._chunks.get_nowait())
            except queue.Empty:
                break
        return self._decoder.decode(bytes(data), final=final)

    def read_stderr(self) -> str:
        text = b"".join(self._stderr_parts).decode("utf-8", errors="replace")
        if self._launch_error:
            text = f"{self._launch_error}\n{text}" if text else self._launch_error
        return text

    @staticmethod
    def _pump(stream, sink: Callable[[bytes], None]) -> None:
        try:
            for data in iter(lambda: stream.read(_READ_SIZE), b""):
                sink(data)
        finally:
            stream.close()
