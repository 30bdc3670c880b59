"""Cross-cutting error types and the API error renderer.

``StorageError`` is what services raise when the record store fails; it
carries a caller-safe message and chains the driver exception as its
``__cause__``.  ``api_exception_handler`` is registered as DRF's
``EXCEPTION_HANDLER`` so that every error body has a ``message`` field.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import structlog
from django.db import DatabaseError
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


class StorageError(Exception):
    """The record store was unreachable or rejected the operation."""


@contextmanager
def storage_errors(message: str) -> Iterator[None]:
    """Translate ``DatabaseError`` raised inside the block into ``StorageError``."""
    try:
        yield
    except DatabaseError as exc:
        raise StorageError(message) from exc


def validation_message(exc: PydanticValidationError, default: str) -> str:
    """Pick a readable message out of a Pydantic error.

    Messages raised by our own validators are returned verbatim; type errors
    from Pydantic itself fall back to *default*.
    """
    for error in exc.errors(include_url=False):
        ctx = error.get("ctx") or {}
        if isinstance(ctx.get("error"), ValueError):
            return str(ctx["error"])
    return default


def _flatten_detail(detail: Any) -> str:
    if isinstance(detail, dict):
        for field, value in detail.items():
            text = _flatten_detail(value)
            if field == "non_field_errors":
                return text
            return f"{field}: {text}"
        return ""
    if isinstance(detail, list):
        return _flatten_detail(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    """Render DRF errors and storage failures as ``{"message": ...}``."""
    if isinstance(exc, StorageError):
        view = context.get("view")
        logger.error(
            "storage.failure",
            message=str(exc),
            view=type(view).__name__ if view else None,
            exc_info=exc.__cause__ or exc,
        )
        return Response(
            {"message": str(exc)},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is None:
        return None

    response.data = {"message": _flatten_detail(response.data)}
    return response
