from __future__ import annotations

import json

from register.models import StudentRecord
from register.storage import JsonFileBackend, MemoryBackend, load_roster, save_roster


def test_json_file_backend_round_trip(tmp_path):
    path = tmp_path / "state" / "register.json"
    backend = JsonFileBackend(str(path))

    assert backend.get("attendanceData") is None

    backend.set("attendanceData", "[]")
    backend.set("other", "x")

    reopened = JsonFileBackend(str(path))
    assert reopened.get("attendanceData") == "[]"
    assert reopened.get("other") == "x"


def test_save_and_load_roster(tmp_path):
    backend = JsonFileBackend(str(tmp_path / "register.json"))
    roster = [StudentRecord("지민", [True, False]), StudentRecord("", [])]

    assert save_roster(backend, roster) is True
    assert load_roster(backend) == roster


def test_persisted_shape_is_list_of_objects():
    backend = MemoryBackend()

    save_roster(backend, [StudentRecord("Mina", [True])])

    assert json.loads(backend.get("attendanceData")) == [{"name": "Mina", "attendance": [True]}]


def test_missing_entry_loads_empty():
    assert load_roster(MemoryBackend()) == []


def test_null_entry_loads_empty():
    assert load_roster(MemoryBackend({"attendanceData": "null"})) == []


def test_corrupt_file_loads_empty_and_is_overwritten(tmp_path):
    path = tmp_path / "register.json"
    path.write_text("{broken", encoding="utf-8")
    backend = JsonFileBackend(str(path))

    assert load_roster(backend) == []

    save_roster(backend, [StudentRecord("Mina", [False])])

    assert load_roster(backend) == [StudentRecord("Mina", [False])]


def test_save_failure_reports_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    backend = JsonFileBackend(str(blocker / "register.json"))

    assert save_roster(backend, []) is False
