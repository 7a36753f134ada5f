"""Errors raised by the data access layer."""

from __future__ import annotations

from rest_framework import status
from rest_framework.exceptions import APIException


class DatabaseUnavailable(APIException):
    """Raised when MongoDB cannot be reached while serving a query."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Database unavailable."
    default_code = "database_unavailable"
