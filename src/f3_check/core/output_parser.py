"""f3 工具輸出文字的欄位與進度擷取。"""

from __future__ import annotations

from typing import Optional

PROGRESS_MARKER = "% --"
PROGRESS_PREFIX = "... "
ASIDE_MARKER = " ("


def extract_field(text: str, label: str) -> str:
    start = text.find(label)
    if start < 0:
        return ""
    value_start = start + len(label)
    end = text.find("\n", value_start)
    if end < 0:
        end = len(text)
    return text[value_start:end].strip()


def extract_progress(chunk: str) -> Optional[int]:
    """從一段新讀到的輸出中取出百分比。

    f3 以退格字元原地重繪進度列，例如 ``... 12.34% -- 10.5 MB/s``。
    只有在這段輸出完整包含進度列時才回傳數值。
    """
    text = chunk.replace("\b", "")
    marker = text.find(PROGRESS_MARKER)
    if marker < 0:
        return None
    # "... " must start at or before marker - 7
    prefix = text.rfind(PROGRESS_PREFIX, 0, max(0, marker - 7 + len(PROGRESS_PREFIX)))
    if prefix < 0:
        return None
    try:
        return int(float(text[prefix + len(PROGRESS_PREFIX) : marker].strip()))
    except (ValueError, OverflowError):
        return None


def strip_aside(value: str) -> str:
    index = value.find(ASIDE_MARKER)
    if index < 0:
        return value
    return value[:index]
