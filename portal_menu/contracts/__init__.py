"""Standardized API response contracts."""

from .errors import ErrorCode, map_exception_to_error
from .responses import ApiEnvelope, ApiErrorModel, ApiMetaModel, fail, ok

__all__ = [
    "ApiEnvelope",
    "ApiErrorModel",
    "ApiMetaModel",
    "ErrorCode",
    "fail",
    "map_exception_to_error",
    "ok",
]
