"""API error types beyond the ones Django REST framework ships with."""

from rest_framework import status
from rest_framework.exceptions import APIException


class Conflict(APIException):
    """Uniqueness violation or a record still referenced elsewhere."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Duplicate record."
    default_code = "conflict"


class InvalidLanguage(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid or inactive language code."
    default_code = "invalid_language"


class InvalidToken(APIException):
    """Access token failed signature, type or revocation checks."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired token."
    default_code = "invalid_token"


class TokenExpired(APIException):
    """Access token expired; the client should call /auth/refresh/."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Token has expired. Refresh the access token and retry."
    default_code = "token_expired"


class InvalidRefreshToken(APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Invalid or expired refresh token."
    default_code = "invalid_refresh_token"


class ServiceUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Service temporarily unavailable."
    default_code = "service_unavailable"


__all__ = [
    "Conflict",
    "InvalidLanguage",
    "InvalidRefreshToken",
    "InvalidToken",
    "ServiceUnavailable",
    "TokenExpired",
]
