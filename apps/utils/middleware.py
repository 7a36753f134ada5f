"""Custom middleware for the Storefront Django project."""

from __future__ import annotations

import logging
import time

from django.urls import Resolver404, resolve
from django.utils.deprecation import MiddlewareMixin


logger = logging.getLogger(__name__)


class RequestLogMiddleware(MiddlewareMixin):
    """
    Log one line per request: method, path, status, duration and body size.

    Example: ``GET /products 200 3.214 ms - 512``
    """

    def process_request(self, request):
        request._log_started_at = time.perf_counter()
        return None

    def process_response(self, request, response):
        started_at = getattr(request, "_log_started_at", None)
        elapsed = (time.perf_counter() - started_at) * 1000 if started_at is not None else 0.0
        if response.streaming:
            size = "-"
        else:
            size = len(response.content)
        logger.info(
            "%s %s %s %.3f ms - %s",
            request.method,
            request.get_full_path(),
            response.status_code,
            elapsed,
            size,
        )
        return response


class OptionalTrailingSlashMiddleware(MiddlewareMixin):
    """
    Let routes work with or without a trailing slash.

    Both /products/ and /products resolve to the same view.
    """

    def process_request(self, request):
        path = request.path_info
        try:
            resolve(path)
            return None
        except Resolver404:
            pass

        if path.endswith("/") and len(path) > 1:
            alternate_path = path.rstrip("/")
        else:
            alternate_path = path + "/"

        try:
            resolve(alternate_path)
        except Resolver404:
            return None
        request.path_info = alternate_path
        return None
