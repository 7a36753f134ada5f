"""Utility helpers used across apps."""

from .exceptions import DatabaseUnavailable  # noqa: F401
from .lookup import Found, LookupResult, MalformedId, NotFound  # noqa: F401
