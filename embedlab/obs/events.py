"""
Lightweight event sink -> JSONL at settings.events_log (disabled when unset).
"""
from __future__ import annotations
from pathlib import Path
import json
import time
from typing import Any, Dict

from ..core.config import settings

def record_event(kind: str, payload: Dict[str, Any], log_file: str | None = None) -> None:
    target = log_file or settings.events_log
    if not target:
        return
    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    rec = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()),
        "kind": kind,
        "payload": payload,
    }
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")
