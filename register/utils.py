# register/utils.py
import math
import unicodedata
from datetime import date, datetime

from .config import DAY_NAMES, MONTH_NAMES


def today_local() -> date:
    return datetime.now().date()


def to_date_string(d: date) -> str:
    """'Fri Jun 28 2024' 형식 (로케일과 무관하게 영어 표기)"""
    return f"{DAY_NAMES[d.weekday()]} {MONTH_NAMES[d.month - 1]} {d.day:02d} {d.year}"


def format_percentage(value: float) -> str:
    """소수점 2자리 고정. 값이 없으면(0일) 'NaN'"""
    if value is None or math.isnan(value):
        return "NaN"
    return f"{value:.2f}"


def decode_text(data) -> str:
    """bytes -> str (UTF-8, BOM 제거). str은 그대로"""
    if isinstance(data, bytes):
        return data.decode("utf-8-sig")
    return data


def collation_key(name: str):
    """
    로케일 설정과 무관한 이름 정렬 키.
    악센트/대소문자 무시 비교 -> 같으면 소문자 먼저 ('alice' < 'Alice' < 'Bob' < 'Émile')
    """
    decomposed = unicodedata.normalize("NFD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name.casefold(), name.swapcase()
