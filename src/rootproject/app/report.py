from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from rootproject import __version__
from rootproject.app.configure import ConfigurationResult


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def write_configuration_report(result: ConfigurationResult, out_path: Path) -> Path:
    out_path = Path(out_path)
    payload = {
        "app": {"name": "rootproject", "version": __version__},
        "created_at": _utc_now_iso(),
        "configuration": result.to_dict(),
    }
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return out_path
