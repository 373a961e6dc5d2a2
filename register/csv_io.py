# register/csv_io.py
import csv
import io
import logging
from datetime import date
from typing import List, Sequence

from .config import COL_NAME, TOTALS_COLUMNS, PRESENT, ABSENT
from .exceptions import CSVParseError, InvalidFormatError, InconsistentRowLengthError
from .models import StudentRecord, compute_totals
from .utils import to_date_string, format_percentage, decode_text

logger = logging.getLogger(__name__)


def build_header(days: Sequence[date]) -> List[str]:
    return [COL_NAME] + [to_date_string(d) for d in days] + TOTALS_COLUMNS


def build_row(record: StudentRecord, day_count: int) -> List[str]:
    marks = [
        PRESENT if (i < len(record.attendance) and record.attendance[i]) else ABSENT
        for i in range(day_count)
    ]
    t = compute_totals(record.attendance, day_count)
    return [record.name] + marks + [
        str(t.total_days), str(t.present), str(t.absent), format_percentage(t.percentage)
    ]


def encode_csv(roster: Sequence[StudentRecord], days: Sequence[date]) -> str:
    """
    출석부 -> CSV 텍스트.
    필드는 쉼표로만 이어 붙인다 (따옴표/이스케이프 없음). 이름에 쉼표가 있으면 깨진다.
    """
    lines = [",".join(build_header(days))]
    for record in roster:
        lines.append(",".join(build_row(record, len(days))))
    return "\n".join(lines) + "\n"


def parse_rows(data) -> List[List[str]]:
    """CSV 텍스트(bytes 가능) -> 행 목록. 빈 줄은 건너뛴다."""
    try:
        text = decode_text(data)
        reader = csv.reader(io.StringIO(text, newline=""), strict=True)
        return [row for row in reader if row]
    except (csv.Error, UnicodeDecodeError) as e:
        raise CSVParseError() from e


def header_fits(header: List[str], day_count: int) -> bool:
    """'Name' + 날짜 N개, 또는 내보내기 형식(뒤에 합계 4컬럼)"""
    if not header or header[0] != COL_NAME:
        return False
    if len(header) == day_count + 1:
        return True
    return (
        len(header) == day_count + 1 + len(TOTALS_COLUMNS)
        and header[day_count + 1:] == TOTALS_COLUMNS
    )


def decode_csv(data, expected_day_count: int) -> List[StudentRecord]:
    """
    CSV -> 학생 기록 목록. 검증 순서:
    1) 파싱 실패 -> CSVParseError
    2) 헤더 모양 -> InvalidFormatError
    3) 행 길이 != 헤더 길이 -> InconsistentRowLengthError
    합계 컬럼 값은 무시 (출석 값에서 다시 계산)
    """
    rows = parse_rows(data)
    if not rows:
        raise InvalidFormatError()

    header, body = rows[0], rows[1:]
    if not header_fits(header, expected_day_count):
        logger.info("CSV header rejected: %d columns for %d days", len(header), expected_day_count)
        raise InvalidFormatError()

    for line_no, row in enumerate(body, start=2):
        if len(row) != len(header):
            logger.info("CSV row %d has %d fields, header has %d", line_no, len(row), len(header))
            raise InconsistentRowLengthError()

    return [
        StudentRecord(
            name=row[0],
            attendance=[row[i + 1] == PRESENT for i in range(expected_day_count)],
        )
        for row in body
    ]
