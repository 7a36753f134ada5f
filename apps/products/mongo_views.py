"""ViewSets for products using MongoEngine."""

from __future__ import annotations

from rest_framework import permissions, viewsets
from rest_framework.response import Response

from apps.registry import products
from apps.utils.api_response import lookup_response

from .mongo_serializers import ProductSerializer


class ProductViewSet(viewsets.ViewSet):
    """Read-only access to products."""

    permission_classes = [permissions.AllowAny]
    authentication_classes = []
    lookup_value_regex = "[^/]+"

    def list(self, request):
        """List all products."""
        serializer = ProductSerializer(products.find(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        """Get product by id."""
        return lookup_response(products.find_by_id(pk), ProductSerializer, "Product not found.")
