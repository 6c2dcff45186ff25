"""設定檔驗證邏輯。"""

from __future__ import annotations

from typing import Any


def _is_command(value: Any) -> bool:
    return (
        isinstance(value, list)
        and bool(value)
        and all(isinstance(item, str) and item.strip() for item in value)
    )


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    tools = config.get("tools", {})
    if not isinstance(tools, dict):
        add_error("tools", "必須是物件")
        tools = {}
    if not _is_command(tools.get("write_command")):
        add_error("tools.write_command", "必須是非空字串清單")
    if not _is_command(tools.get("read_command")):
        add_error("tools.read_command", "必須是非空字串清單")
    progress_flag = tools.get("progress_flag")
    if not isinstance(progress_flag, str) or not progress_flag.strip():
        add_error("tools.progress_flag", "必須是非空字串")

    polling = config.get("polling", {})
    interval_sec = polling.get("interval_sec") if isinstance(polling, dict) else None
    if isinstance(interval_sec, bool) or not isinstance(interval_sec, (int, float)) or interval_sec <= 0:
        add_error("polling.interval_sec", "必須是大於 0 的數值")

    report = config.get("report", {})
    directory = report.get("directory") if isinstance(report, dict) else None
    if not isinstance(directory, str) or not directory.strip():
        add_error("report.directory", "必須是非空字串")

    return errors
