from __future__ import annotations

from pathlib import Path

from rootproject.descriptor.io import descriptor_path, write_descriptor
from rootproject.descriptor.types import default_descriptor


def write_descriptor_example(project_dir: str | Path | None = None, *, force: bool = False) -> Path:
    """
    Write the stock Android root descriptor into `project_dir` (default: cwd).
    """
    root = Path(project_dir) if project_dir else Path.cwd()
    target = descriptor_path(root)
    if target.exists() and not force:
        raise FileExistsError(target)
    name = root.resolve().name or "android"
    return write_descriptor(target, default_descriptor(name))
