"""預設設定值。"""

DEFAULT_CONFIG = {
    "tools": {
        "write_command": ["f3write"],
        "read_command": ["f3read"],
        "progress_flag": "--show-progress=1",
    },
    "polling": {
        "interval_sec": 1.5,
    },
    "report": {
        "directory": "REPORT",
    },
}
