# register/filters.py
from datetime import date, timedelta
from typing import List

from .config import WEEKEND_WEEKDAYS


def is_weekend_day(d: date) -> bool:
    """금/토/일 여부"""
    return d.weekday() in WEEKEND_WEEKDAYS


def derive_weekend_days(start: date, end: date) -> List[date]:
    """
    start~end(포함) 사이의 금/토/일 날짜를 순서대로 반환.
    - start > end 이면 호출하지 말 것 (호출 측에서 DateRangeError 처리)
    """
    if start > end:
        raise ValueError(f"start {start} is after end {end}")

    days: List[date] = []
    d = start
    while d <= end:
        if is_weekend_day(d):
            days.append(d)
        d += timedelta(days=1)
    return days
