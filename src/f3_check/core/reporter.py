"""Reduce accumulated f3 output into a CheckReport."""

from __future__ import annotations

from ..models import NOT_AVAILABLE, CheckReport
from .capacity import parse_capacity, ratio
from .output_parser import extract_field, strip_aside

TAG_READ_SPEED = "Average reading speed:"
TAG_WRITE_SPEED = "Average writing speed:"
TAG_SPACE_FREE = "Free space:"
TAG_SPACE_OK = "Data OK:"
TAG_SPACE_LOST = "Data LOST:"


def build_report(output: str) -> CheckReport:
    if not output.strip():
        return CheckReport()

    reported_free = extract_field(output, TAG_SPACE_FREE)
    actual_free = strip_aside(extract_field(output, TAG_SPACE_OK))
    lost = strip_aside(extract_field(output, TAG_SPACE_LOST))

    return CheckReport(
        success=TAG_READ_SPEED in output,
        reported_free=parse_capacity(reported_free),
        actual_free=parse_capacity(actual_free),
        lost=parse_capacity(lost),
        availability=ratio(actual_free, reported_free),
        read_speed=extract_field(output, TAG_READ_SPEED) or NOT_AVAILABLE,
        write_speed=extract_field(output, TAG_WRITE_SPEED) or NOT_AVAILABLE,
    )
