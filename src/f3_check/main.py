from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ConfigManager
from .core import CheckOrchestrator
from .models import StatusEvent
from .utils import reporting

_EVENT_MESSAGES = {
    StatusEvent.RUNNING: "階段: 寫入測試 (f3write)...",
    StatusEvent.STAGED: "階段: 讀取驗證 (f3read)...",
    StatusEvent.STOPPED: "檢測已中止",
    StatusEvent.FINISHED: "檢測完成",
    StatusEvent.PATH_INCORRECT: "錯誤: 裝置路徑不存在",
    StatusEvent.NO_PERMISSION: "錯誤: 沒有存取裝置的權限",
    StatusEvent.NO_SPACE: "錯誤: 裝置已無可用空間",
    StatusEvent.NO_CUI: "錯誤: 找不到 f3write / f3read，請先安裝 f3",
    StatusEvent.UNKNOWN_ERROR: "錯誤: f3 工具發生未知錯誤",
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    print(f"f3-check v{__version__}")
    if args.command is None:
        parser.print_help()
        return 2

    config = ConfigManager(Path(args.config) if args.config else None)
    errors = config.validate_config()
    if errors:
        for error in errors:
            print(f"設定錯誤: {error}")
        return 2

    return _run_check(args, config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="f3_check")
    parser.add_argument("--config", help="Path to config file", default=None)

    subparsers = parser.add_subparsers(dest="command")
    check = subparsers.add_parser("check", help="Run f3write then f3read on a device")
    check.add_argument("device", help="Mount point of the device under test")
    check.add_argument("--output", help="Folder to write summary.txt / report.json", default=None)

    return parser


def _run_check(args: argparse.Namespace, config: ConfigManager) -> int:
    orchestrator = CheckOrchestrator(config)

    def on_status(event: StatusEvent) -> None:
        if event is StatusEvent.PROGRESSED:
            print(f"進度: {orchestrator.get_progress()}%")
        else:
            print(_EVENT_MESSAGES.get(event, event.value))

    orchestrator.subscribe(on_status)
    try:
        orchestrator.start(args.device)
        while not orchestrator.wait_until_idle(0.5):
            pass
    except KeyboardInterrupt:
        print("正在中止檢測...")
        orchestrator.stop()
    finally:
        orchestrator.close()

    report = orchestrator.get_report()
    print(reporting.build_summary_text(report, args.device), end="")
    for error in orchestrator.get_errors():
        print(f"[{error.code}] {error.message} (exit code {error.exit_code})")

    if args.output:
        report_dir = reporting.ensure_report_dir(
            Path(args.output),
            str(config.get("report.directory", "REPORT")),
        )
        reporting.write_summary(report_dir, report, args.device)
        reporting.write_report_json(report_dir, report, args.device)
        print(f"Report written to: {report_dir}")

    return 0 if report.success else 1
