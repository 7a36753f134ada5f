"""Serializers for MongoEngine Product models."""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    title = serializers.CharField()
    description = serializers.CharField()
    price = serializers.CharField()
    brand = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    def get_id(self, obj):
        return str(obj.id)

    def get_brand(self, obj):
        # Stored id only; a dangling reference is returned as-is.
        return str(obj.brand) if obj.brand is not None else None
