# tests/test_upload_vehicles_cli.py
import json

from services.firestore_loader import UploadStats
from tools import upload_vehicles as cli

class ClosingStore:
    closed = False

    def close(self):
        self.closed = True

def test_run_uploads_and_closes(tmp_path, monkeypatch):
    data = tmp_path / "vehicles.json"
    data.write_text(json.dumps([{"brand": "Toyota", "models": []}]), encoding="utf-8")
    store = ClosingStore()
    seen = {}

    monkeypatch.setattr(cli, "init_firestore", lambda creds, project: store)

    def fake_upload(db, vehicles):
        seen["brands"] = [v.brand for v in vehicles]
        return UploadStats(brands=1)

    monkeypatch.setattr(cli, "upload_vehicles", fake_upload)

    args = cli.parse_args(["--data", str(data), "--credentials", "key.json"])
    assert cli.run(args) == 0
    assert seen["brands"] == ["Toyota"]
    assert store.closed

def test_run_fails_on_bad_data_without_connecting(tmp_path, monkeypatch):
    called = []
    monkeypatch.setattr(cli, "init_firestore", lambda *a: called.append(a))
    args = cli.parse_args(["--data", str(tmp_path / "missing.json")])
    assert cli.run(args) == 1
    assert called == []

def test_run_fails_on_write_error(tmp_path, monkeypatch):
    data = tmp_path / "vehicles.json"
    data.write_text("[]", encoding="utf-8")
    store = ClosingStore()
    monkeypatch.setattr(cli, "init_firestore", lambda creds, project: store)

    def boom(db, vehicles):
        raise RuntimeError("permission denied")

    monkeypatch.setattr(cli, "upload_vehicles", boom)
    assert cli.run(cli.parse_args(["--data", str(data)])) == 1
    assert store.closed
