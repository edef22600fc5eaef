from __future__ import annotations

from typing import Any


class ConfigurationError(RuntimeError):
    """
    Fatal failure of the configuration phase.

    `code` is a short machine-readable tag (see app.error_mapping);
    `details` carries optional structured context for reports.
    """

    def __init__(self, message: str, *, code: str = "CONFIG", details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.details = details


class CleanError(ConfigurationError):
    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CONFIG_CLEAN", details=details)
