# register/remote.py
import logging
from typing import Optional

import gspread
from google.oauth2.service_account import Credentials

from .config import (
    SCOPE, REMOTE_FILE_NAME, REMOTE_MIME_TYPE,
    DRIVE_FILES_URL, DRIVE_UPLOAD_URL
)
from .exceptions import RemoteAuthError, RemoteFileNotFoundError

logger = logging.getLogger(__name__)


class DriveBackup:
    """
    Google Drive 원격 백업 (attendance.csv 한 개).
    - client: gspread.authorize() 로 만든 인증된 클라이언트 (None이면 로그아웃 상태)
    - Drive 요청은 client.http_client 로 보낸다 (실패 시 gspread.exceptions.APIError)
    """

    def __init__(self, client=None, file_name: str = REMOTE_FILE_NAME, account_email: str = ""):
        self.client = client
        self.file_name = file_name
        # 서비스 계정 이메일. 파일은 사용자 Drive가 아니라 이 계정의 Drive에 저장된다
        self.account_email = account_email

    @classmethod
    def from_service_account_info(cls, info: dict, file_name: str = REMOTE_FILE_NAME) -> "DriveBackup":
        creds = Credentials.from_service_account_info(info, scopes=SCOPE)
        return cls(gspread.authorize(creds), file_name, creds.service_account_email)

    def is_authenticated(self) -> bool:
        return self.client is not None

    def storage_note(self) -> str:
        owner = self.account_email or "the app's service account"
        return f"{self.file_name} is stored in the Drive of {owner}, not in your personal Drive."

    def sign_out(self) -> None:
        self.client = None
        self.account_email = ""

    def _http(self):
        if self.client is None:
            logger.warning("Remote drive used while signed out")
            raise RemoteAuthError()
        return self.client.http_client

    def find_file_id(self) -> Optional[str]:
        """이름이 같은 파일이 여러 개면 첫 번째"""
        res = self._http().request(
            "get",
            DRIVE_FILES_URL,
            params={
                "q": f"name = '{self.file_name}' and trashed = false",
                "fields": "files(id, name)",
                "spaces": "drive",
            },
        )
        files = res.json().get("files", [])
        return files[0]["id"] if files else None

    def upload(self, data: bytes) -> str:
        """CSV 업로드. 같은 이름 파일이 있으면 내용 교체, 없으면 새로 만든다. 파일 ID 반환"""
        http = self._http()
        file_id = self.find_file_id()

        if file_id is None:
            res = http.request(
                "post",
                DRIVE_FILES_URL,
                json={"name": self.file_name, "mimeType": REMOTE_MIME_TYPE},
            )
            file_id = res.json()["id"]

        http.request(
            "patch",
            f"{DRIVE_UPLOAD_URL}/{file_id}",
            params={"uploadType": "media"},
            data=data,
            headers={"Content-Type": REMOTE_MIME_TYPE},
        )
        logger.info("Uploaded %s (%d bytes) to drive file %s", self.file_name, len(data), file_id)
        return file_id

    def download(self) -> bytes:
        file_id = self.find_file_id()
        if file_id is None:
            raise RemoteFileNotFoundError()

        res = self._http().request("get", f"{DRIVE_FILES_URL}/{file_id}", params={"alt": "media"})
        logger.info("Downloaded %s from drive file %s", self.file_name, file_id)
        return res.content
