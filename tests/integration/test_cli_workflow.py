import json
import sys
from pathlib import Path

from f3_check.main import main


def _write_config(tmp_path: Path, write_body: str, read_body: str) -> Path:
    write_script = tmp_path / "f3write.py"
    read_script = tmp_path / "f3read.py"
    write_script.write_text(write_body, encoding="utf-8")
    read_script.write_text(read_body, encoding="utf-8")
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "tools": {
                    "write_command": [sys.executable, str(write_script)],
                    "read_command": [sys.executable, str(read_script)],
                },
                "polling": {"interval_sec": 0.1},
            }
        ),
        encoding="utf-8",
    )
    return config_path


def test_cli_check_writes_report(tmp_path: Path, capsys) -> None:
    config_path = _write_config(
        tmp_path,
        "print('Free space: 14.50 GB')\nprint('Average writing speed: 40.1 MB/s')\n",
        "print('Data OK: 14.30 GB (99.9%)')\nprint('Data LOST: 0.00 Byte (0.0%)')\n"
        "print('Average reading speed: 45.2 MB/s')\n",
    )
    output_dir = tmp_path / "out"

    exit_code = main(
        ["--config", str(config_path), "check", str(tmp_path / "usb"), "--output", str(output_dir)]
    )

    assert exit_code == 0
    captured = capsys.readouterr().out
    assert "檢測完成" in captured
    assert "平均讀取速度: 45.2 MB/s" in captured
    data = json.loads((output_dir / "REPORT" / "report.json").read_text(encoding="utf-8"))
    assert data["success"] is True
    assert (output_dir / "REPORT" / "summary.txt").exists()


def test_cli_check_reports_failure(tmp_path: Path, capsys) -> None:
    config_path = _write_config(tmp_path, "import sys\nsys.exit(2)\n", "")

    exit_code = main(["--config", str(config_path), "check", str(tmp_path / "missing")])

    assert exit_code == 1
    captured = capsys.readouterr().out
    assert "錯誤: 裝置路徑不存在" in captured
    assert "[E-PATH]" in captured


def test_cli_rejects_invalid_config(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"polling": {"interval_sec": -1}}), encoding="utf-8")

    exit_code = main(["--config", str(config_path), "check", str(tmp_path)])

    assert exit_code == 2
    assert "polling.interval_sec" in capsys.readouterr().out
