from __future__ import annotations

import json
from pathlib import Path

from rootproject.descriptor.errors import DescriptorError
from rootproject.descriptor.types import RootDescriptor
from rootproject.descriptor.validate import validate_descriptor_basic, validate_descriptor_schema

DESCRIPTOR_FILENAME = "build.json"


def descriptor_path(project_dir: str | Path) -> Path:
    p = Path(project_dir)
    return p if p.suffix.lower() == ".json" else p / DESCRIPTOR_FILENAME


def read_descriptor(path: str | Path) -> RootDescriptor:
    in_path = descriptor_path(path)
    if not in_path.exists():
        raise FileNotFoundError(in_path)

    # Accept UTF-8 with BOM (common on Windows editors).
    try:
        data = json.loads(in_path.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as exc:
        raise DescriptorError(f"{in_path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    validate_descriptor_basic(data)
    validate_descriptor_schema(data)
    return RootDescriptor.from_dict(data)


def write_descriptor(path: str | Path, descriptor: RootDescriptor) -> Path:
    out_path = descriptor_path(path)
    data = descriptor.to_dict()
    validate_descriptor_basic(data)
    validate_descriptor_schema(data)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return out_path
