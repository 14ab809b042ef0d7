# core/errors.py
import asyncio
from enum import Enum
from typing import Optional


class ModelErrorKind(str, Enum):
    """Failure kinds of an external model call"""
    RATE_LIMITED = "rate_limited"
    BAD_REQUEST = "bad_request"
    FORBIDDEN = "forbidden"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


# HTTP status -> failure kind
STATUS_KINDS = {
    429: ModelErrorKind.RATE_LIMITED,
    400: ModelErrorKind.BAD_REQUEST,
    403: ModelErrorKind.FORBIDDEN,
}


class ModelError(Exception):
    """Raised when the external text-generation call fails"""

    def __init__(self, kind: ModelErrorKind, message: str = "", status: Optional[int] = None):
        super().__init__(message or kind.value)
        self.kind = kind
        self.status = status

    @classmethod
    def from_exception(cls, error: Exception) -> "ModelError":
        """Wrap a provider SDK exception, keeping its message and status"""
        if isinstance(error, ModelError):
            return error
        status = status_of(error)
        return cls(classify_error(error), str(error), status)


def status_of(error: BaseException) -> Optional[int]:
    """
    Find the HTTP status carried by a provider exception

    openai/httpx errors expose `status_code`, google-genai errors expose an
    integer `code`. Chained causes are followed, since LangChain and the SDKs
    sometimes re-raise.
    """
    seen = set()
    while error is not None and id(error) not in seen:
        seen.add(id(error))
        for attr in ("status_code", "code", "status"):
            value = getattr(error, attr, None)
            if isinstance(value, int) and not isinstance(value, bool):
                return value
        response = getattr(error, "response", None)
        value = getattr(response, "status_code", None)
        if isinstance(value, int):
            return value
        error = error.__cause__ or error.__context__
    return None


def is_timeout(error: BaseException) -> bool:
    """Check if an error is a timeout, whatever client raised it"""
    if isinstance(error, (asyncio.TimeoutError, TimeoutError)):
        return True
    return "Timeout" in type(error).__name__


def classify_error(error: Exception) -> ModelErrorKind:
    """Map any exception from a model call to a failure kind"""
    if isinstance(error, ModelError):
        return error.kind
    if is_timeout(error):
        return ModelErrorKind.TIMEOUT
    return STATUS_KINDS.get(status_of(error), ModelErrorKind.UNKNOWN)
