from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from rootproject.app.errors import ConfigurationError
from rootproject.app.precheck import PrecheckIssue, precheck_descriptor, summarize_issues
from rootproject.descriptor.io import descriptor_path, read_descriptor
from rootproject.descriptor.types import RootDescriptor
from rootproject.project.evaluation import evaluation_order
from rootproject.project.layout import resolve_layout
from rootproject.project.types import BuildLayout

logger = logging.getLogger(__name__)

BUILD_DIR_ENV = "ROOTPROJECT_BUILD_DIR"


@dataclass(frozen=True, slots=True)
class ConfigurationResult:
    descriptor: RootDescriptor
    layout: BuildLayout
    order: tuple[str, ...]
    issues: tuple[PrecheckIssue, ...]
    build_dir: str

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.descriptor.name,
            "build_dir": self.build_dir,
            "layout": self.layout.to_dict(),
            "evaluation_order": list(self.order),
            "plugins": [p.to_dict() for p in self.descriptor.plugins],
            "repositories": [
                {"name": r.name, "url": r.effective_url()} for r in self.descriptor.repositories
            ],
            "issues": [i.to_dict() for i in self.issues],
        }


def effective_build_dir(descriptor: RootDescriptor, override: str | None = None) -> str:
    if override:
        return override
    env = os.environ.get(BUILD_DIR_ENV, "").strip()
    if env:
        return env
    return descriptor.build_dir


def _format_errors(issues: list[PrecheckIssue]) -> str:
    lines = [f"  [{i.code}] {i.message}" for i in issues if i.severity == "ERROR"]
    return "Configuration aborted:\n" + "\n".join(lines)


def configure(
    project_dir: str | Path,
    descriptor: RootDescriptor | None = None,
    *,
    build_dir: str | None = None,
) -> ConfigurationResult:
    """
    Run the configuration phase once for the root project at `project_dir`.

    Loads `<project_dir>/build.json` unless `descriptor` is given. Any
    precheck ERROR aborts with a ConfigurationError; there is no partial result.
    """
    root_dir = Path(project_dir)
    if descriptor is None:
        descriptor = read_descriptor(descriptor_path(root_dir))
        logger.debug("Loaded descriptor %s", descriptor_path(root_dir))

    issues = precheck_descriptor(descriptor)
    n_err, n_warn, _ = summarize_issues(issues)
    for issue in issues:
        if issue.severity == "WARN":
            logger.warning("[%s] %s", issue.code, issue.message)
    if n_err:
        raise ConfigurationError(
            _format_errors(issues),
            code="CONFIG_PRECHECK",
            details={"issues": [i.to_dict() for i in issues]},
        )

    base = effective_build_dir(descriptor, build_dir)
    layout = resolve_layout(
        root_dir,
        base,
        descriptor.subprojects,
        root_name=descriptor.name,
    )
    order = evaluation_order(descriptor.subprojects, descriptor.evaluation_depends_on)
    logger.info(
        "Configured '%s': output=%s subprojects=%d warnings=%d",
        descriptor.name,
        layout.root.output_directory,
        len(layout.subprojects),
        n_warn,
    )
    return ConfigurationResult(
        descriptor=descriptor,
        layout=layout,
        order=tuple(order),
        issues=tuple(issues),
        build_dir=base,
    )
