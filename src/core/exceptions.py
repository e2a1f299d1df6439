"""Custom exception handling to enforce the API error envelope."""

import logging
from typing import Any

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import DatabaseError, IntegrityError
from django.db.models import ProtectedError, RestrictedError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from authentication.services import BlocklistUnavailable

logger = logging.getLogger(__name__)

# DRF default_code -> envelope code. Codes not listed are upper-cased as is.
_ERROR_CODES = {
    "invalid": "VALIDATION_ERROR",
    "not_authenticated": "UNAUTHORIZED",
    "authentication_failed": "UNAUTHORIZED",
    "permission_denied": "FORBIDDEN",
    "parse_error": "BAD_REQUEST",
}


def error_payload(code: str, message: str, details: Any = None) -> dict[str, Any]:
    """Build the `{ "success": false, "error": {...} }` body."""
    error: dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"success": False, "error": error}


def _flatten_validation_errors(detail: Any, prefix: str = "") -> list[dict[str, str]]:
    """Turn DRF's nested ValidationError detail into `[{field, message}]`."""
    if isinstance(detail, dict):
        items: list[dict[str, str]] = []
        for key, value in detail.items():
            if key == "non_field_errors":
                field = prefix
            else:
                field = f"{prefix}.{key}" if prefix else str(key)
            items.extend(_flatten_validation_errors(value, field))
        return items
    if isinstance(detail, list):
        items = []
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                items.extend(_flatten_validation_errors(value, f"{prefix}[{index}]"))
            else:
                items.extend(_flatten_validation_errors(value, prefix))
        return items
    return [{"field": prefix or "non_field_errors", "message": str(detail)}]


def _error_response(code: str, message: str, status_code: int, details: Any = None) -> Response:
    return Response(error_payload(code, message, details), status=status_code)


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Map every exception raised inside a view onto the error envelope.

    - DRF ``APIException`` subclasses keep their status; the envelope code comes
      from their ``default_code``.
    - Integrity and protected-reference failures become 409 ``CONFLICT``;
      other database errors and blocklist outages become 503.
    - Anything unexpected is logged with its traceback and reported as a
      generic 500 ``INTERNAL_ERROR``.
    """

    if isinstance(exc, BlocklistUnavailable):
        logger.error("Token blocklist unavailable: %s", exc)
        return _error_response(
            "SERVICE_UNAVAILABLE",
            "Authentication service unavailable.",
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if isinstance(exc, (ProtectedError, RestrictedError)):
        return _error_response(
            "CONFLICT",
            "Resource is still referenced by other records.",
            status.HTTP_409_CONFLICT,
        )

    # IntegrityError is a DatabaseError subclass; check it first.
    if isinstance(exc, IntegrityError):
        logger.info("Integrity error: %s", exc)
        return _error_response("CONFLICT", "Duplicate record.", status.HTTP_409_CONFLICT)

    if isinstance(exc, DatabaseError):
        logger.error("Database error: %s", exc)
        return _error_response(
            "SERVICE_UNAVAILABLE",
            "Service temporarily unavailable.",
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", context.get("view").__class__.__name__, exc_info=exc)
        return _error_response(
            "INTERNAL_ERROR",
            "Internal server error.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, (exceptions.AuthenticationFailed, exceptions.NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    default_code = getattr(exc, "default_code", "error")
    code = _ERROR_CODES.get(default_code, str(default_code).upper())

    if isinstance(exc, exceptions.ValidationError):
        response.data = error_payload(code, "Validation failed", _flatten_validation_errors(exc.detail))
    else:
        detail = getattr(exc, "detail", None)
        message = str(detail) if detail is not None else response.status_text
        response.data = error_payload(code, message)

    return response


__all__ = ["custom_exception_handler", "error_payload"]
