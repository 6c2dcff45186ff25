"""檢測流程狀態與通知事件。"""

from __future__ import annotations

from enum import Enum


class Stage(str, Enum):
    IDLE = "IDLE"
    WRITING = "WRITING"
    READING = "READING"


class StatusEvent(str, Enum):
    RUNNING = "RUNNING"
    STAGED = "STAGED"
    PROGRESSED = "PROGRESSED"
    STOPPED = "STOPPED"
    FINISHED = "FINISHED"
    PATH_INCORRECT = "PATH_INCORRECT"
    NO_PERMISSION = "NO_PERMISSION"
    NO_SPACE = "NO_SPACE"
    NO_CUI = "NO_CUI"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"

