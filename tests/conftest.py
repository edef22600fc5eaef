from __future__ import annotations

import logging
from pathlib import Path

import pytest

from rootproject.descriptor.io import write_descriptor
from rootproject.descriptor.types import default_descriptor


@pytest.fixture(autouse=True)
def _env_isolation(monkeypatch):
    """Keep host overrides out and drop handlers bound to captured streams."""
    monkeypatch.delenv("ROOTPROJECT_BUILD_DIR", raising=False)
    monkeypatch.delenv("ROOTPROJECT_LOG_LEVEL", raising=False)
    yield
    logger = logging.getLogger("rootproject")
    for h in list(logger.handlers):
        logger.removeHandler(h)


@pytest.fixture
def android_dir(tmp_path) -> Path:
    """<tmp>/flutter_app/android with the stock build.json."""
    project = tmp_path / "flutter_app" / "android"
    project.mkdir(parents=True)
    write_descriptor(project, default_descriptor("android"))
    return project
