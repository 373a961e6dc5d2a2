from __future__ import annotations

import pytest

from register.exceptions import RemoteAuthError, RemoteFileNotFoundError
from register.remote import DriveBackup


class FakeResponse:
    def __init__(self, json_data=None, content=b""):
        self._json = json_data or {}
        self.content = content

    def json(self):
        return self._json


class FakeHTTPClient:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, endpoint, params=None, data=None, json=None, files=None, headers=None):
        self.calls.append({
            "method": method,
            "endpoint": endpoint,
            "params": params,
            "data": data,
            "json": json,
            "headers": headers,
        })
        return self.responses.pop(0)


class FakeClient:
    def __init__(self, responses):
        self.http_client = FakeHTTPClient(responses)


def test_signed_out_upload_and_download_fail():
    drive = DriveBackup()

    assert drive.is_authenticated() is False
    with pytest.raises(RemoteAuthError):
        drive.upload(b"Name\n")
    with pytest.raises(RemoteAuthError):
        drive.download()


def test_sign_out_drops_client():
    drive = DriveBackup(FakeClient([]), account_email="register@proj.iam.gserviceaccount.com")
    assert drive.is_authenticated() is True

    drive.sign_out()

    assert drive.is_authenticated() is False
    assert drive.account_email == ""


def test_storage_note_names_service_account_drive():
    drive = DriveBackup(FakeClient([]), account_email="register@proj.iam.gserviceaccount.com")

    note = drive.storage_note()

    assert "attendance.csv" in note
    assert "register@proj.iam.gserviceaccount.com" in note
    assert "not in your personal Drive" in note


def test_storage_note_when_signed_out():
    assert "the app's service account" in DriveBackup().storage_note()


def test_upload_creates_file_when_missing():
    client = FakeClient([
        FakeResponse({"files": []}),
        FakeResponse({"id": "new-id"}),
        FakeResponse({}),
    ])

    file_id = DriveBackup(client).upload(b"Name\nAlice\n")

    calls = client.http_client.calls
    assert file_id == "new-id"
    assert calls[0]["method"] == "get"
    assert "name = 'attendance.csv'" in calls[0]["params"]["q"]
    assert calls[1]["method"] == "post"
    assert calls[1]["json"] == {"name": "attendance.csv", "mimeType": "text/csv"}
    assert calls[2]["method"] == "patch"
    assert calls[2]["endpoint"].endswith("/new-id")
    assert calls[2]["data"] == b"Name\nAlice\n"
    assert calls[2]["headers"] == {"Content-Type": "text/csv"}


def test_upload_replaces_first_matching_file():
    client = FakeClient([
        FakeResponse({"files": [{"id": "a"}, {"id": "b"}]}),
        FakeResponse({}),
    ])

    assert DriveBackup(client).upload(b"x") == "a"
    assert [c["method"] for c in client.http_client.calls] == ["get", "patch"]


def test_download_fetches_media_of_first_match():
    client = FakeClient([
        FakeResponse({"files": [{"id": "a"}]}),
        FakeResponse(content=b"Name,d1\nAlice,Present\n"),
    ])

    data = DriveBackup(client).download()

    assert data == b"Name,d1\nAlice,Present\n"
    assert client.http_client.calls[1]["endpoint"].endswith("/files/a")
    assert client.http_client.calls[1]["params"] == {"alt": "media"}


def test_download_without_file_raises():
    client = FakeClient([FakeResponse({"files": []})])

    with pytest.raises(RemoteFileNotFoundError):
        DriveBackup(client).download()
