from __future__ import annotations

from datetime import date, timedelta

import pytest

from register.filters import derive_weekend_days, is_weekend_day
from register.utils import to_date_string


def brute_force(start: date, end: date):
    out = []
    for i in range((end - start).days + 1):
        d = start + timedelta(days=i)
        if d.isoweekday() in (5, 6, 7):
            out.append(d)
    return out


@pytest.mark.parametrize(
    "start,end",
    [
        (date(2024, 6, 28), date(2024, 7, 31)),
        (date(2024, 1, 1), date(2024, 12, 31)),
        (date(2024, 2, 26), date(2024, 3, 4)),  # 윤년 2월 말
        (date(2024, 7, 1), date(2024, 7, 4)),   # 월~목: 없음
        (date(2024, 7, 6), date(2024, 7, 6)),   # 하루
    ],
)
def test_matches_day_by_day_classification(start, end):
    days = derive_weekend_days(start, end)

    assert days == brute_force(start, end)
    assert all(is_weekend_day(d) for d in days)
    assert all(a < b for a, b in zip(days, days[1:]))
    if days:
        assert days[0] >= start
        assert days[-1] <= end


def test_example_range_starts_on_friday():
    days = derive_weekend_days(date(2024, 6, 28), date(2024, 7, 31))

    assert days[:4] == [date(2024, 6, 28), date(2024, 6, 29), date(2024, 6, 30), date(2024, 7, 5)]
    assert len(days) == 15
    assert [to_date_string(d) for d in days[:4]] == [
        "Fri Jun 28 2024", "Sat Jun 29 2024", "Sun Jun 30 2024", "Fri Jul 05 2024",
    ]


def test_weekday_only_range_is_empty():
    assert derive_weekend_days(date(2024, 7, 1), date(2024, 7, 4)) == []


def test_reversed_range_is_rejected():
    with pytest.raises(ValueError):
        derive_weekend_days(date(2024, 7, 31), date(2024, 6, 28))
