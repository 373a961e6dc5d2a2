# register/models.py
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List


@dataclass
class StudentRecord:
    name: str
    attendance: List[bool] = field(default_factory=list)

    @classmethod
    def blank(cls, day_count: int) -> "StudentRecord":
        return cls(name="", attendance=[False] * day_count)

    def to_dict(self) -> dict:
        return {"name": self.name, "attendance": list(self.attendance)}

    @classmethod
    def from_dict(cls, raw) -> "StudentRecord":
        """{name, attendance} 형태가 아니면 ValueError"""
        if not isinstance(raw, dict):
            raise ValueError(f"record must be an object, got {type(raw).__name__}")

        name = raw.get("name", "")
        attendance = raw.get("attendance")
        if name is None:
            name = ""
        if not isinstance(name, str):
            raise ValueError("record name must be a string")
        if not isinstance(attendance, list) or not all(isinstance(a, bool) for a in attendance):
            raise ValueError("record attendance must be a list of booleans")

        return cls(name=name, attendance=list(attendance))


@dataclass(frozen=True)
class Totals:
    total_days: int
    present: int
    absent: int
    percentage: float  # 0일이면 NaN


def compute_totals(attendance: List[bool], day_count: int) -> Totals:
    present = sum(1 for a in attendance if a)
    absent = day_count - present
    if day_count == 0:
        percentage = float("nan")
    else:
        # 0.005 경계는 올림 (3.125 -> 3.13)
        exact = Decimal(present * 100) / Decimal(day_count)
        percentage = float(exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
    return Totals(total_days=day_count, present=present, absent=absent, percentage=percentage)
