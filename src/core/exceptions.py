"""Error taxonomy and the DRF exception handler enforcing the error envelope."""

import logging
from typing import Any

from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

MSG_INVALID_BODY = "invalid json body"
MSG_UNAUTHORIZED = "authorization token is missing, malformed or expired"
MSG_STORE_FAILURE = "could not save changes, try again later"


class BlogError(Exception):
    """Base class for errors raised by the article/user store."""


class NotFoundError(BlogError):
    """Requested article or user does not exist."""


class StoreError(BlogError):
    """Persistence failed in the underlying store."""


class ConflictError(StoreError):
    """A unique constraint (user login, article slug) was violated."""


def error_body(messages: list[str]) -> dict[str, Any]:
    """Build the `{"errors": {"body": [...]}}` payload."""
    return {"errors": {"body": messages}}


def _flatten_errors(detail: Any, prefix: str = "") -> list[str]:
    """Turn DRF's nested error detail into `"<field>: <message>"` strings."""

    if isinstance(detail, dict):
        messages: list[str] = []
        for field, value in detail.items():
            name = "" if field == "non_field_errors" else str(field)
            key = ".".join(part for part in (prefix, name) if part)
            messages.extend(_flatten_errors(value, key))
        return messages
    if isinstance(detail, list):
        messages = []
        for item in detail:
            messages.extend(_flatten_errors(item, prefix))
        return messages
    return [f"{prefix}: {detail}" if prefix else str(detail)]


def blog_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Map store, auth and validation errors onto status codes and bodies.

    - Validation errors (and conflicts) become 422 with an itemised list.
    - Missing resources become 404 with an empty body.
    - Auth failures become 401, store failures 500, both with a short list.
    """

    if isinstance(exc, NotFoundError):
        return Response(status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, ConflictError):
        logger.info("Rejected conflicting write: %s", exc)
        return Response(error_body([str(exc)]), status=status.HTTP_422_UNPROCESSABLE_ENTITY)

    if isinstance(exc, StoreError):
        logger.error("Store failure: %s", exc, exc_info=exc)
        return Response(error_body([MSG_STORE_FAILURE]), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        return Response(
            error_body(_flatten_errors(exc.detail)),
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        return response

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED
        response.data = error_body([MSG_UNAUTHORIZED])
    elif isinstance(exc, NotFound):
        response.data = None
    elif isinstance(exc, MethodNotAllowed):
        response.data = error_body([str(exc.detail)])
    elif response.status_code >= 400:
        response.data = error_body(_flatten_errors(response.data))

    return response


__all__ = [
    "BlogError",
    "ConflictError",
    "MSG_INVALID_BODY",
    "MSG_STORE_FAILURE",
    "MSG_UNAUTHORIZED",
    "NotFoundError",
    "StoreError",
    "blog_exception_handler",
    "error_body",
]
