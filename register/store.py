# register/store.py
import logging
from datetime import date
from typing import List, Optional, Sequence, Tuple

from .config import DEFAULT_START, DEFAULT_END, STORAGE_KEY, RESIZE_PAD, RESIZE_FORBID
from .csv_io import encode_csv, decode_csv
from .exceptions import DateRangeError
from .filters import derive_weekend_days
from .models import StudentRecord, Totals, compute_totals
from .storage import load_roster, save_roster
from .utils import collation_key

logger = logging.getLogger(__name__)


# --- [1. 출석부 변경 함수 (순수 함수)] ---
def add_student(roster: List[StudentRecord], day_count: int) -> Tuple[List[StudentRecord], int]:
    """빈 이름 + 전부 결석인 학생을 끝에 추가. 정렬하지 않는다."""
    new_roster = roster + [StudentRecord.blank(day_count)]
    return new_roster, len(new_roster) - 1


def set_name(roster: List[StudentRecord], index: int, value: str) -> None:
    roster[index].name = value


def commit_name_edit(roster: Sequence[StudentRecord]) -> List[StudentRecord]:
    """이름 편집이 끝났을 때만 이름순(악센트·대소문자 무시 비교) 안정 정렬"""
    return sorted(roster, key=lambda r: collation_key(r.name))


def toggle_attendance(roster: List[StudentRecord], student_index: int, day_index: int) -> None:
    record = roster[student_index]
    if not 0 <= day_index < len(record.attendance):
        raise IndexError(f"day index {day_index} out of range for {len(record.attendance)} days")
    record.attendance[day_index] = not record.attendance[day_index]


def delete_student(roster: Sequence[StudentRecord], index: int) -> List[StudentRecord]:
    if not 0 <= index < len(roster):
        raise IndexError(f"student index {index} out of range")
    return [r for i, r in enumerate(roster) if i != index]


def resize_attendance(roster: List[StudentRecord], day_count: int) -> None:
    """날짜 수가 바뀌면 뒤쪽을 False로 채우거나 잘라낸다"""
    for record in roster:
        current = len(record.attendance)
        if current < day_count:
            record.attendance.extend([False] * (day_count - current))
        elif current > day_count:
            del record.attendance[day_count:]


# --- [2. 저장소 객체] ---
class AttendanceStore:
    """
    출석부 상태(학생 목록 + 날짜 범위)를 보관하고, 변경할 때마다 backend에 저장한다.

    - backend: get(key) / set(key, value) 를 가진 key-value 저장소
    - resize_policy:
        * "pad": 범위가 바뀌면 기존 출석 배열을 새 날짜 수에 맞춰 채우거나 자른다
        * "forbid": 학생이 있으면 범위 변경을 DateRangeError로 거절
    """

    def __init__(self, backend, start: date = DEFAULT_START, end: date = DEFAULT_END,
                 resize_policy: str = RESIZE_PAD, key: str = STORAGE_KEY):
        if resize_policy not in (RESIZE_PAD, RESIZE_FORBID):
            raise ValueError(f"unknown resize policy: {resize_policy}")
        if start > end:
            raise DateRangeError()

        self.backend = backend
        self.key = key
        self.resize_policy = resize_policy
        self._start = start
        self._end = end
        self._days = derive_weekend_days(start, end)
        self._roster: List[StudentRecord] = []
        self.new_index: Optional[int] = None
        # 행 순서나 날짜 수가 바뀔 때마다 증가 (이전 화면의 행 번호는 무효)
        self.generation = 0

    # 상태 조회
    @property
    def start(self) -> date:
        return self._start

    @property
    def end(self) -> date:
        return self._end

    @property
    def days(self) -> List[date]:
        return list(self._days)

    @property
    def day_count(self) -> int:
        return len(self._days)

    @property
    def roster(self) -> List[StudentRecord]:
        return self._roster

    # 저장/복원
    def load(self) -> "AttendanceStore":
        self._roster = load_roster(self.backend, self.key)
        resize_attendance(self._roster, self.day_count)
        logger.info("Loaded %d students", len(self._roster))
        return self

    def save(self) -> bool:
        return save_roster(self.backend, self._roster, self.key)

    # 날짜 범위
    def set_range(self, start: date, end: date) -> List[date]:
        """
        범위를 바꾸고 새 날짜 목록을 반환.
        start > end 이면 DateRangeError, 이전 날짜 목록은 그대로 유지.
        """
        if start > end:
            raise DateRangeError()
        if (start, end) == (self._start, self._end):
            return self.days
        if self.resize_policy == RESIZE_FORBID and self._roster:
            raise DateRangeError("Date range cannot change while students are registered.")

        self._start, self._end = start, end
        before = self.day_count
        self._days = derive_weekend_days(start, end)
        resize_attendance(self._roster, self.day_count)
        if self.day_count != before:
            self.generation += 1
        self.save()
        return self.days

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    # 학생 변경
    def add_student(self) -> int:
        self._roster, self.new_index = add_student(self._roster, self.day_count)
        self.save()
        return self.new_index

    def set_name(self, index: int, value: str) -> None:
        set_name(self._roster, index, value)
        self.save()

    def commit_name_edit(self) -> None:
        self._roster = commit_name_edit(self._roster)
        self.new_index = None
        self.generation += 1
        self.save()

    def toggle_attendance(self, student_index: int, day_index: int) -> None:
        toggle_attendance(self._roster, student_index, day_index)
        self.save()

    def delete_student(self, index: int) -> None:
        self._roster = delete_student(self._roster, index)
        self.new_index = None
        self.generation += 1
        self.save()

    def totals(self, index: int) -> Totals:
        return compute_totals(self._roster[index].attendance, self.day_count)

    def replace_roster(self, records: List[StudentRecord]) -> None:
        """통째로 교체 (병합 없음, 마지막 쓰기가 이긴다)"""
        self._roster = list(records)
        resize_attendance(self._roster, self.day_count)
        self.new_index = None
        self.generation += 1
        self.save()

    # CSV
    def export_csv(self) -> str:
        return encode_csv(self._roster, self._days)

    def import_csv(self, data) -> int:
        """검증 실패 시 CSVImportError 계열 예외, 기존 출석부는 그대로"""
        records = decode_csv(data, self.day_count)
        self.replace_roster(records)
        logger.info("Imported %d students from CSV", len(records))
        return len(records)
