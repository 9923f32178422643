from __future__ import annotations

from enum import Enum
from typing import Any

from ..menu.errors import ConfigurationError


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    NOT_FOUND = "NOT_FOUND"
    CONFIG_ERROR = "CONFIG_ERROR"
    MENU_NOT_INITIALIZED = "MENU_NOT_INITIALIZED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


def map_exception_to_error(exc: Exception) -> tuple[ErrorCode, str, dict[str, Any] | None]:
    msg = str(exc) or exc.__class__.__name__
    if isinstance(exc, ConfigurationError):
        details = {"unresolved": exc.unresolved} if exc.unresolved else None
        return ErrorCode.CONFIG_ERROR, msg, details
    if isinstance(exc, LookupError) or "not found" in msg.lower():
        return ErrorCode.NOT_FOUND, msg, None
    if isinstance(exc, (TypeError, ValueError)):
        return ErrorCode.INVALID_INPUT, msg, None
    return ErrorCode.INTERNAL_ERROR, msg, {"exception_type": exc.__class__.__name__}
