from __future__ import annotations

from typing import Iterable

from rootproject.app.errors import ConfigurationError


def dependency_name(depends_on: str) -> str:
    """`:app` -> `app`; a bare name is returned unchanged."""
    return depends_on.strip().lstrip(":")


def evaluation_order(subprojects: Iterable[str], depends_on: str | None) -> list[str]:
    """
    Order subprojects for configuration.

    Every subproject is evaluated after `depends_on`, so that project comes
    first; the others keep their declared order.
    """
    names = list(subprojects)
    if not depends_on or not names:
        return names
    target = dependency_name(depends_on)
    if target not in names:
        raise ConfigurationError(
            f"evaluation depends on project '{depends_on}' which is not declared (subprojects: {names})",
            code="CONFIG_EVALUATION",
            details={"depends_on": depends_on, "subprojects": names},
        )
    return [target] + [n for n in names if n != target]
