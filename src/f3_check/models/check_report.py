"""檢測報告模型。"""

from __future__ import annotations

from dataclasses import dataclass, field

NOT_AVAILABLE = "(N/A)"


@dataclass(frozen=True)
class Capacity:
    raw: str = ""
    value: float = 0.0
    grade: int = 0

    def to_dict(self) -> dict[str, object]:
        return {"raw": self.raw, "value": self.value, "grade": self.grade}


@dataclass(frozen=True)
class CheckReport:
    """f3write / f3read 輸出彙整後的最終結果，建立後不可變更。"""

    success: bool = False
    reported_free: Capacity = field(default_factory=Capacity)
    actual_free: Capacity = field(default_factory=Capacity)
    lost: Capacity = field(default_factory=Capacity)
    availability: float = 0.0
    read_speed: str = NOT_AVAILABLE
    write_speed: str = NOT_AVAILABLE

    def to_dict(self) -> dict[str, object]:
        return {
            "success": self.success,
            "reported_free": self.reported_free.to_dict(),
            "actual_free": self.actual_free.to_dict(),
            "lost": self.lost.to_dict(),
            "availability": self.availability,
            "read_speed": self.read_speed,
            "write_speed": self.write_speed,
        }
