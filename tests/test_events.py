import json

from embedlab.obs.events import record_event

def test_record_event_appends_jsonl(tmp_path):
    log_file = tmp_path / "logs" / "events.jsonl"
    record_event("search", {"query": "شبكات"}, log_file=str(log_file))
    record_event("http", {"path": "/info"}, log_file=str(log_file))
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert [json.loads(ln)["kind"] for ln in lines] == ["search", "http"]
    assert json.loads(lines[0])["payload"] == {"query": "شبكات"}

def test_record_event_disabled_without_target(tmp_path, monkeypatch):
    from embedlab.core.config import settings
    monkeypatch.setattr(settings, "events_log", None)
    record_event("noop", {})
    assert list(tmp_path.iterdir()) == []
