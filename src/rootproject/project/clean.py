from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from rootproject.app.errors import CleanError
from rootproject.project.types import BuildLayout

logger = logging.getLogger(__name__)


def _is_within(child: Path, parent: Path) -> bool:
    try:
        child.relative_to(parent)
    except ValueError:
        return False
    return True


def clean_output(target: str | Path, *, protect: str | Path | None = None) -> bool:
    """
    Delete `target` and everything below it.

    Returns True if something was removed, False if it was already absent.
    A symlink is unlinked without touching what it points to. `protect`
    (usually the root project directory) must not be the target or live
    inside it.
    """
    path = Path(os.path.abspath(target))
    if path == Path(path.anchor):
        raise CleanError(f"refusing to delete filesystem root: {path}", details={"path": str(path)})
    if protect is not None:
        guarded = Path(os.path.abspath(protect))
        if _is_within(guarded, path):
            raise CleanError(
                f"refusing to delete {path}: it contains the project directory {guarded}",
                details={"path": str(path), "project_dir": str(guarded)},
            )

    if not os.path.lexists(path):
        logger.info("Nothing to clean: %s does not exist", path)
        return False

    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink()
        else:
            shutil.rmtree(path)
    except FileNotFoundError:
        # Already gone.
        return False
    except OSError as exc:
        raise CleanError(f"failed to delete {path}: {exc}", details={"path": str(path)}) from exc

    logger.info("Deleted %s", path)
    return True


def clean_layout(layout: BuildLayout) -> bool:
    """The `clean` action: remove the root output directory."""
    return clean_output(layout.root.output_directory, protect=layout.root.project_dir)
