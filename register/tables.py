# register/tables.py
from datetime import date
from html import escape
from typing import Sequence

import pandas as pd

from .config import COL_NAME, COL_TOTAL_DAYS, COL_PRESENT, COL_ABSENT, COL_PERCENTAGE
from .models import StudentRecord, compute_totals
from .utils import to_date_string, format_percentage


def roster_frame(roster: Sequence[StudentRecord], days: Sequence[date]) -> pd.DataFrame:
    """화면 요약표: 이름 + 날짜별 출석(bool) + 합계 4컬럼 (퍼센트는 '%' 표시)"""
    labels = [to_date_string(d) for d in days]
    columns = [COL_NAME] + labels + [COL_TOTAL_DAYS, COL_PRESENT, COL_ABSENT, COL_PERCENTAGE]

    rows = []
    for r in roster:
        t = compute_totals(r.attendance, len(days))
        marks = [bool(r.attendance[i]) if i < len(r.attendance) else False for i in range(len(days))]
        rows.append([r.name] + marks + [t.total_days, t.present, t.absent, f"{format_percentage(t.percentage)}%"])

    return pd.DataFrame(rows, columns=columns)


def generate_register_html(roster: Sequence[StudentRecord], days: Sequence[date], title: str) -> str:
    """인쇄용 출석부 표 (출석 ✓, 짝수 행 음영)"""
    df = roster_frame(roster, days)
    day_labels = [to_date_string(d) for d in days]

    html = f"<h2 style='text-align:center; font-size:16pt;'>{escape(title)}</h2>"
    html += "<table class='register-table'><thead><tr>"
    html += f"<th style='width:16%;'>{COL_NAME}</th>"
    for label in day_labels:
        # 'Fri Jun 28 2024' -> 'Fri<br>Jun 28'
        dow, mon, dd, _ = label.split(" ")
        html += f"<th>{dow}<br>{mon} {dd}</th>"
    for c in (COL_TOTAL_DAYS, COL_PRESENT, COL_ABSENT, COL_PERCENTAGE):
        html += f"<th class='total-col'>{c}</th>"
    html += "</tr></thead><tbody>"

    for i, (_, row) in enumerate(df.iterrows()):
        stripe = "stripe" if i % 2 == 0 else ""
        html += f"<tr class='{stripe}'><td class='name-cell'>{escape(str(row[COL_NAME]))}</td>"
        for label in day_labels:
            html += f"<td>{'✓' if row[label] else ''}</td>"
        html += (
            f"<td>{row[COL_TOTAL_DAYS]}</td><td>{row[COL_PRESENT]}</td>"
            f"<td>{row[COL_ABSENT]}</td><td>{row[COL_PERCENTAGE]}</td></tr>"
        )

    if df.empty:
        html += f"<tr><td colspan='{len(day_labels) + 5}'>No students</td></tr>"

    return html + "</tbody></table>"
