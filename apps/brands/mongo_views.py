"""ViewSets for brands using MongoEngine."""

from __future__ import annotations

from rest_framework import permissions, viewsets
from rest_framework.response import Response

from apps.registry import brands
from apps.utils.api_response import lookup_response

from .mongo_serializers import BrandSerializer


class BrandViewSet(viewsets.ViewSet):
    """Read-only access to brands."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    lookup_value_regex = "[^/]+"

    def list(self, request):
        """List all brands."""
        serializer = BrandSerializer(brands.find(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        """Get brand by id."""
        return lookup_response(brands.find_by_id(pk), BrandSerializer, "Brand not found.")
