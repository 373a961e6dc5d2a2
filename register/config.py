# register/config.py
import os
from datetime import date

PAGE_TITLE = "Attendance Register"

# 로컬 저장소 (브라우저 localStorage 대응)
STORAGE_KEY = "attendanceData"
STORAGE_FILE = os.environ.get("ATTENDANCE_STORAGE_FILE", ".attendance_register.json")

LOG_LEVEL = os.environ.get("ATTENDANCE_LOG_LEVEL", "INFO").upper()

DEFAULT_START = date(2024, 6, 28)
DEFAULT_END = date(2024, 7, 31)

# date.weekday(): 월=0 ... 일=6
WEEKEND_WEEKDAYS = {4, 5, 6}  # 금, 토, 일

DAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

# CSV 컬럼
COL_NAME = "Name"
COL_TOTAL_DAYS = "Total Days"
COL_PRESENT = "Days Present"
COL_ABSENT = "Days Absent"
COL_PERCENTAGE = "Percentage"
TOTALS_COLUMNS = [COL_TOTAL_DAYS, COL_PRESENT, COL_ABSENT, COL_PERCENTAGE]

PRESENT = "Present"
ABSENT = "Absent"

# 상태 메시지
MSG_IMPORT_OK = "Import successful!"
MSG_INVALID_FORMAT = "Error: Invalid CSV format."
MSG_INCONSISTENT_ROW = "Error: Inconsistent row length."
MSG_PARSE_ERROR = "Error: Unable to parse CSV."
MSG_DATE_RANGE = "Start date must be before end date."

RESIZE_PAD = "pad"
RESIZE_FORBID = "forbid"

# 원격 백업 (Google Drive)
REMOTE_FILE_NAME = "attendance.csv"
REMOTE_MIME_TYPE = "text/csv"
SCOPE = [
    "https://www.googleapis.com/auth/drive.file",
]
DRIVE_FILES_URL = "https://www.googleapis.com/drive/v3/files"
DRIVE_UPLOAD_URL = "https://www.googleapis.com/upload/drive/v3/files"
