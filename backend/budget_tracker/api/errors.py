import logging
import math
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from fastapi import HTTPException
from pydantic import ValidationError

from ..storage import StorageError

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_MESSAGE = "Invalid request data"


class RequestDataError(Exception):
    """Invalid input found inside a handler; rendered as a 400 with error detail."""

    def __init__(self, message: str, error: ValidationError, **extra: Any):
        super().__init__(message)
        self.message = message
        self.errors = error.errors(include_url=False)
        self.extra = extra


def validation_message(message: str) -> Callable[[Callable], Callable]:
    """Set the message a 400 from request validation carries on this route."""
    def decorate(endpoint: Callable) -> Callable:
        endpoint.validation_message = message
        return endpoint
    return decorate


def validation_message_for(endpoint: Callable | None) -> str:
    return getattr(endpoint, "validation_message", DEFAULT_VALIDATION_MESSAGE)


def json_safe(value: Any) -> Any:
    """Swap NaN and infinities for strings so an error body can echo bad input."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {key: json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(item) for item in value]
    return value


@contextmanager
def storage_fault(message: str) -> Iterator[None]:
    """Turn a storage failure into a 500 carrying only a static message."""
    try:
        yield
    except StorageError as exc:
        logger.error("%s: %s", message, exc)
        raise HTTPException(status_code=500, detail=message) from exc
