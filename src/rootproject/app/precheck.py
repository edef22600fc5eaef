from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from rootproject.descriptor.types import (
    ANDROID_APPLICATION_PLUGIN,
    ANDROID_LIBRARY_PLUGIN,
    RootDescriptor,
)
from rootproject.project.evaluation import dependency_name
from rootproject.project.layout import subproject_name_problem


@dataclass(frozen=True, slots=True)
class PrecheckIssue:
    severity: str  # "ERROR" | "WARN" | "INFO"
    code: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"severity": self.severity, "code": self.code, "message": self.message}


def _issue(severity: str, code: str, message: str) -> PrecheckIssue:
    return PrecheckIssue(severity=severity, code=code, message=message)


def parse_version(v: Any) -> tuple[int, ...] | None:
    """
    "8.11.1" -> (8, 11, 1). A "-qualifier" suffix (e.g. "2.0.0-Beta1") is
    ignored for parsing; anything else non-numeric returns None.
    """
    if not isinstance(v, str) or not v.strip():
        return None
    core = v.strip().split("-", 1)[0]
    out: list[int] = []
    for p in core.split("."):
        try:
            out.append(int(p))
        except ValueError:
            return None
    return tuple(out)


def _check_plugins(descriptor: RootDescriptor, issues: list[PrecheckIssue]) -> None:
    versions: dict[str, str] = {}
    for p in descriptor.plugins:
        if parse_version(p.version) is None:
            issues.append(_issue("ERROR", "PLUGIN_VERSION", f"Plugin '{p.id}' has an invalid version {p.version!r}"))
        prev = versions.get(p.id)
        if prev is None:
            versions[p.id] = p.version
        elif prev != p.version:
            issues.append(
                _issue(
                    "ERROR",
                    "PLUGIN_DUPLICATE",
                    f"Plugin '{p.id}' declared with conflicting versions {prev} and {p.version}",
                )
            )

    # The application and library variants ship from one artifact; they must agree.
    app_v = versions.get(ANDROID_APPLICATION_PLUGIN)
    lib_v = versions.get(ANDROID_LIBRARY_PLUGIN)
    if app_v is not None and lib_v is not None and app_v != lib_v:
        issues.append(
            _issue(
                "ERROR",
                "AGP_VERSION_MISMATCH",
                f"'{ANDROID_APPLICATION_PLUGIN}' ({app_v}) and '{ANDROID_LIBRARY_PLUGIN}' ({lib_v}) must use the same version",
            )
        )


def _check_repositories(descriptor: RootDescriptor, issues: list[PrecheckIssue]) -> None:
    if not descriptor.repositories:
        issues.append(_issue("WARN", "REPO_NONE", "No repositories declared; dependencies cannot be resolved"))
        return
    seen: set[str] = set()
    for r in descriptor.repositories:
        if r.name in seen:
            issues.append(_issue("WARN", "REPO_DUPLICATE", f"Repository '{r.name}' declared more than once"))
        seen.add(r.name)
        if r.effective_url() is None:
            issues.append(
                _issue("ERROR", "REPO_UNKNOWN", f"Repository '{r.name}' is not a known repository and has no url")
            )


def _check_subprojects(descriptor: RootDescriptor, issues: list[PrecheckIssue]) -> None:
    if not descriptor.subprojects:
        issues.append(_issue("INFO", "NO_SUBPROJECTS", "Root project has no subprojects"))
    seen: set[str] = set()
    for name in descriptor.subprojects:
        problem = subproject_name_problem(name)
        if problem:
            issues.append(_issue("ERROR", "SUBPROJECT_NAME", problem))
        elif name in seen:
            issues.append(_issue("ERROR", "SUBPROJECT_DUPLICATE", f"Subproject '{name}' declared more than once"))
        seen.add(name)

    dep = descriptor.evaluation_depends_on
    if dep and descriptor.subprojects and dependency_name(dep) not in seen:
        issues.append(
            _issue(
                "ERROR",
                "EVAL_DEPENDENCY_MISSING",
                f"Subprojects are evaluated after '{dep}', which is not a declared subproject",
            )
        )


def precheck_descriptor(descriptor: RootDescriptor) -> list[PrecheckIssue]:
    issues: list[PrecheckIssue] = []
    if not descriptor.build_dir.strip():
        issues.append(_issue("ERROR", "BUILD_DIR", "build_dir must not be empty"))
    _check_plugins(descriptor, issues)
    _check_repositories(descriptor, issues)
    _check_subprojects(descriptor, issues)
    return issues


def summarize_issues(issues: Iterable[PrecheckIssue]) -> tuple[int, int, int]:
    issues = list(issues)
    e = sum(1 for i in issues if i.severity == "ERROR")
    w = sum(1 for i in issues if i.severity == "WARN")
    info = sum(1 for i in issues if i.severity == "INFO")
    return e, w, info
