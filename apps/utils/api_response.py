"""Response helpers shared by the catalog views."""

from __future__ import annotations

import logging

from django.http import HttpResponse
from rest_framework import status
from rest_framework.response import Response

from .lookup import Found, LookupResult, MalformedId


logger = logging.getLogger(__name__)


def text_response(message: str, status_code: int = status.HTTP_200_OK) -> HttpResponse:
    return HttpResponse(message, content_type="text/plain; charset=utf-8", status=status_code)


def lookup_response(result: LookupResult, serializer_class, not_found_message: str):
    """Serialize a found document, or answer with ``not_found_message``.

    A malformed id gets 400 and a missing document 404; both carry the same
    plain-text body.
    """
    if isinstance(result, Found):
        return Response(serializer_class(result.document).data)
    if isinstance(result, MalformedId):
        logger.warning("%s Malformed id: %r", not_found_message, result.raw_id)
        return text_response(not_found_message, status.HTTP_400_BAD_REQUEST)
    logger.warning("%s No document with id %s", not_found_message, result.raw_id)
    return text_response(not_found_message, status.HTTP_404_NOT_FOUND)
