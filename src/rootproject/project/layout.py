from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from rootproject.app.errors import ConfigurationError
from rootproject.project.types import BuildLayout, ProjectNode

logger = logging.getLogger(__name__)

ROOT_PROJECT_PATH = ":"


def subproject_name_problem(name: str) -> str | None:
    """
    Return why `name` cannot be used as a subproject output folder, or None.
    """
    if not isinstance(name, str) or not name.strip():
        return "subproject name must be a non-empty string"
    if name != name.strip():
        return f"subproject name {name!r} has surrounding whitespace"
    if name in (".", ".."):
        return f"subproject name {name!r} is reserved"
    if any(ch in name for ch in ("/", "\\", ":", "\x00")):
        return f"subproject name {name!r} must not contain '/', '\\\\', ':' or NUL"
    return None


def project_path(name: str) -> str:
    return f"{ROOT_PROJECT_PATH}{name}"


def resolve_root_output(project_dir: str | Path, build_dir: str) -> Path:
    """
    Resolve the relocated root output directory.

    `build_dir` is taken relative to `project_dir` (an absolute `build_dir` is
    used as-is) and normalized lexically; symlinks are not followed.
    """
    if not isinstance(build_dir, str) or not build_dir.strip():
        raise ConfigurationError("build directory must be a non-empty path", code="CONFIG_PATH")
    if "\x00" in build_dir or "\x00" in str(project_dir):
        raise ConfigurationError(f"invalid build directory path: {build_dir!r}", code="CONFIG_PATH")
    try:
        base = Path(os.path.abspath(project_dir))
        target = Path(build_dir)
        joined = target if target.is_absolute() else base / target
        return Path(os.path.normpath(joined))
    except (OSError, TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"cannot resolve build directory {build_dir!r} from {project_dir}: {exc}",
            code="CONFIG_PATH",
        ) from exc


def resolve_layout(
    project_dir: str | Path,
    build_dir: str,
    subprojects: Iterable[str] = (),
    *,
    root_name: str | None = None,
) -> BuildLayout:
    """
    Compute output directories for the root project and its subprojects.

    Every subproject writes to `<root output>/<subproject name>`.
    """
    root_dir = Path(os.path.abspath(project_dir))
    root_output = resolve_root_output(root_dir, build_dir)

    seen: set[str] = set()
    nodes: list[ProjectNode] = []
    for name in subprojects:
        problem = subproject_name_problem(name)
        if problem:
            raise ConfigurationError(problem, code="CONFIG_SUBPROJECT", details={"name": name})
        if name in seen:
            raise ConfigurationError(f"subproject {name!r} declared twice", code="CONFIG_SUBPROJECT", details={"name": name})
        seen.add(name)
        nodes.append(
            ProjectNode(
                name=name,
                path=project_path(name),
                project_dir=root_dir / name,
                output_directory=root_output / name,
            )
        )

    root = ProjectNode(
        name=root_name or root_dir.name,
        path=ROOT_PROJECT_PATH,
        project_dir=root_dir,
        output_directory=root_output,
    )
    logger.debug("Resolved root output %s (%d subprojects)", root_output, len(nodes))
    return BuildLayout(root=root, subprojects=tuple(nodes))
