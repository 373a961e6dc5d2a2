# register/exceptions.py
from .config import (
    MSG_DATE_RANGE, MSG_INVALID_FORMAT, MSG_INCONSISTENT_ROW, MSG_PARSE_ERROR
)


class RegisterError(Exception):
    """출석부 오류 공통 부모. message는 화면 상태 메시지로 그대로 쓴다."""

    default_message = "Error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class DateRangeError(RegisterError):
    default_message = MSG_DATE_RANGE


class CSVImportError(RegisterError):
    """CSV 가져오기 오류 공통 부모"""


class InvalidFormatError(CSVImportError):
    default_message = MSG_INVALID_FORMAT


class InconsistentRowLengthError(CSVImportError):
    default_message = MSG_INCONSISTENT_ROW


class CSVParseError(CSVImportError):
    default_message = MSG_PARSE_ERROR


class RemoteAuthError(RegisterError):
    default_message = "Remote drive is not signed in."


class RemoteFileNotFoundError(RegisterError):
    default_message = "Remote attendance file not found."


class PersistenceReadError(RegisterError):
    default_message = "Stored attendance data is unreadable."
