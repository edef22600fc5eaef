from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from rootproject.app.errors import ConfigurationError
from rootproject.descriptor.errors import DescriptorError


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    code: str
    message: str
    details: dict[str, Any] | None = None


_CODE_RE = re.compile(r"[^A-Za-z0-9_]+")


def normalize_error_code(code: str) -> str:
    code = (code or "").strip()
    if not code:
        return "UNKNOWN"
    code = code.replace("-", "_").replace(" ", "_")
    code = _CODE_RE.sub("_", code)
    code = re.sub(r"_+", "_", code).strip("_")
    return code.upper() or "UNKNOWN"


def map_exception(exc: BaseException) -> ErrorInfo:
    """
    Map exceptions into a standardized (code, message, details) triple.
    """
    if isinstance(exc, ConfigurationError):
        return ErrorInfo(code=normalize_error_code(exc.code), message=str(exc), details=exc.details)
    if isinstance(exc, DescriptorError):
        return ErrorInfo(code="DESCRIPTOR", message=str(exc))
    if isinstance(exc, FileNotFoundError):
        return ErrorInfo(code="IO_NOT_FOUND", message=f"File not found: {exc.filename or exc}")
    if isinstance(exc, PermissionError):
        return ErrorInfo(code="IO_PERMISSION", message=str(exc))
    if isinstance(exc, OSError):
        return ErrorInfo(code="IO_ERROR", message=str(exc))
    return ErrorInfo(code="UNKNOWN", message=str(exc) or exc.__class__.__name__)
