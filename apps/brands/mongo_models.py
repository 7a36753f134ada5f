"""Brand model using mongoengine for MongoDB."""

from __future__ import annotations

from datetime import datetime, timezone

import mongoengine as me
from mongoengine import fields


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Brand(me.Document):
    """Brand model."""

    meta = {
        "collection": "brands",
        "indexes": ["name"],
        "strict": False,
    }

    name = fields.StringField(required=True, min_length=1)
    url = fields.StringField(required=True, min_length=1)
    created_at = fields.DateTimeField(db_field="createdAt", default=utc_now)
    updated_at = fields.DateTimeField(db_field="updatedAt", default=utc_now)

    def save(self, *args, **kwargs):
        """Override save to automatically update updated_at."""
        self.updated_at = utc_now()
        return super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
