"""檢測報告輸出工具。"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from ..models import CheckReport


def ensure_report_dir(output_root: Path, directory: str = "REPORT") -> Path:
    report_dir = output_root / directory
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def write_summary(report_dir: Path, report: CheckReport, device_path: str) -> Path:
    summary_path = report_dir / "summary.txt"
    summary_path.write_text(build_summary_text(report, device_path), encoding="utf-8")
    return summary_path


def write_report_json(report_dir: Path, report: CheckReport, device_path: str) -> Path:
    report_path = report_dir / "report.json"
    payload = {
        "run_time": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "device_path": device_path,
        **report.to_dict(),
    }
    with report_path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, ensure_ascii=False, indent=2)
    return report_path


def build_summary_text(report: CheckReport, device_path: str) -> str:
    lines = [
        "=== f3-check 檢測摘要 ===",
        f"執行時間: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        f"裝置路徑: {device_path}",
        f"結果: {'完成' if report.success else '未完成'}",
        "",
        "--- 容量 ---",
        f"宣稱可用空間: {report.reported_free.raw or '--'}",
        f"實際可用空間: {report.actual_free.raw or '--'}",
        f"遺失空間: {report.lost.raw or '--'}",
        f"可用比例: {format_ratio(report.availability)}",
        "",
        "--- 速度 ---",
        f"平均寫入速度: {report.write_speed}",
        f"平均讀取速度: {report.read_speed}",
    ]

    if report.success and report.availability < 1.0 and report.lost.value > 0:
        lines.extend(["", "警告: 偵測到資料遺失，裝置實際容量可能小於宣稱容量"])

    return "\n".join(lines) + "\n"


def format_ratio(value: float) -> str:
    return f"{value * 100:.2f}%"
