"""Serializers for MongoEngine Brand models."""

from __future__ import annotations

from rest_framework import serializers


class BrandSerializer(serializers.Serializer):
    id = serializers.SerializerMethodField()
    name = serializers.CharField()
    url = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    def get_id(self, obj):
        return str(obj.id)
