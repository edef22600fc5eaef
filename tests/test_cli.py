from __future__ import annotations

import json
import logging

from rootproject import __version__
from rootproject.cli import main
from rootproject.descriptor.io import read_descriptor, write_descriptor
from rootproject.descriptor.types import ANDROID_LIBRARY_PLUGIN
from rootproject.util.logging import configure_logging


def test_about(capsys):
    assert main(["about"]) == 0
    assert capsys.readouterr().out.strip() == f"rootproject {__version__}"


def test_init_writes_descriptor_once(tmp_path, capsys):
    project = tmp_path / "android"
    assert main(["init", "--dir", str(project)]) == 0
    assert read_descriptor(project).subprojects == ("app",)
    assert main(["init", "--dir", str(project)]) == 2
    assert main(["init", "--dir", str(project), "--force"]) == 0


def test_configure_prints_layout(android_dir, tmp_path, capsys):
    assert main(["configure", "--dir", str(android_dir)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["layout"]["root"]["output_directory"] == str(tmp_path / "build")


def test_configure_report(android_dir, tmp_path, capsys):
    report = tmp_path / "report.json"
    assert main(["configure", "--dir", str(android_dir), "--report", str(report)]) == 0
    assert report.exists()


def test_clean_twice(android_dir, tmp_path):
    out = tmp_path / "build" / "app"
    out.mkdir(parents=True)
    (out / "app.apk").write_bytes(b"apk")
    assert main(["clean", "--dir", str(android_dir)]) == 0
    assert not (tmp_path / "build").exists()
    assert main(["clean", "--dir", str(android_dir)]) == 0
    assert android_dir.is_dir()


def test_precheck_exit_codes(android_dir, capsys):
    assert main(["precheck", "--dir", str(android_dir)]) == 0
    d = read_descriptor(android_dir).with_plugin_version(ANDROID_LIBRARY_PLUGIN, "7.4.2")
    write_descriptor(android_dir, d)
    assert main(["precheck", "--dir", str(android_dir)]) == 1
    assert "AGP_VERSION_MISMATCH" in capsys.readouterr().out
    assert main(["configure", "--dir", str(android_dir)]) == 2


def test_missing_descriptor_is_fatal(tmp_path):
    assert main(["configure", "--dir", str(tmp_path)]) == 2


def test_configure_logging_is_idempotent(monkeypatch):
    monkeypatch.setenv("ROOTPROJECT_LOG_LEVEL", "warning")
    logger = configure_logging()
    configure_logging()
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert configure_logging("nonsense").level == logging.INFO


def test_clean_failure_exit_status(android_dir, tmp_path, monkeypatch):
    (tmp_path / "build" / "app").mkdir(parents=True)

    def _denied(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr("rootproject.project.clean.shutil.rmtree", _denied)
    assert main(["clean", "--dir", str(android_dir)]) == 2
    assert (tmp_path / "build" / "app").is_dir()
