"""核心流程模組。"""

from .capacity import grade_of, parse_capacity, parse_number, ratio
from .exit_codes import ExitOutcome, classify_exit
from .orchestrator import CheckOrchestrator
from .output_parser import extract_field, extract_progress, strip_aside
from .poll_timer import PollTimer
from .reporter import build_report
from .tool_process import ToolProcess

__all__ = [
    "CheckOrchestrator",
    "ExitOutcome",
    "PollTimer",
    "ToolProcess",
    "build_report",
    "classify_exit",
    "extract_field",
    "extract_progress",
    "grade_of",
    "parse_capacity",
    "parse_number",
    "ratio",
    "strip_aside",
]
