# register/storage.py
import json
import logging
import os
from typing import Dict, List, Optional

from .config import STORAGE_KEY, STORAGE_FILE
from .exceptions import PersistenceReadError
from .models import StudentRecord

logger = logging.getLogger(__name__)


class MemoryBackend:
    """테스트/임시용 key-value 저장소"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.items.get(key)

    def set(self, key: str, value: str) -> None:
        self.items[key] = value


class JsonFileBackend:
    """
    JSON 파일 하나에 {key: 문자열} 을 보관하는 key-value 저장소.
    브라우저 localStorage와 같은 역할 (마지막으로 성공한 쓰기가 남는다).
    """

    def __init__(self, filepath: str = STORAGE_FILE):
        self.filepath = filepath

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.filepath):
            return {}
        with open(self.filepath, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.filepath} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except (OSError, ValueError):
            logger.warning("Overwriting unreadable storage file %s", self.filepath)
            data = {}
        data[key] = value

        folder = os.path.dirname(self.filepath)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)

        tmp_path = f"{self.filepath}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=4)
        os.replace(tmp_path, self.filepath)


def decode_roster(raw: Optional[str]) -> List[StudentRecord]:
    if raw is None:
        return []
    try:
        data = json.loads(raw)
        if data is None:
            return []
        if not isinstance(data, list):
            raise ValueError("stored roster must be a list")
        return [StudentRecord.from_dict(item) for item in data]
    except ValueError as e:
        raise PersistenceReadError(str(e)) from e


def load_roster(backend, key: str = STORAGE_KEY) -> List[StudentRecord]:
    """저장된 출석부 복원. 없거나 깨졌으면 빈 목록 (시작을 막지 않는다)"""
    try:
        return decode_roster(backend.get(key))
    except (PersistenceReadError, OSError, ValueError):
        logger.warning("Stored attendance data unreadable, starting empty", exc_info=True)
        return []


def save_roster(backend, roster: List[StudentRecord], key: str = STORAGE_KEY) -> bool:
    try:
        backend.set(key, json.dumps([r.to_dict() for r in roster], ensure_ascii=False))
        return True
    except (OSError, TypeError, ValueError):
        logger.exception("Failed to save attendance data")
        return False
