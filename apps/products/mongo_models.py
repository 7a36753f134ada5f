"""Product model using mongoengine for MongoDB."""

from __future__ import annotations

from typing import Optional

import mongoengine as me
from mongoengine import fields

from apps.brands.mongo_models import Brand, utc_now


class Product(me.Document):
    """Product model.

    ``brand`` stores the id of a :class:`Brand` instead of embedding it, so the
    brand name and url are not repeated on every product. The reference is not
    checked on write; a product may point at a brand that does not exist.
    """

    meta = {
        "collection": "products",
        "indexes": ["title", "brand"],
        "strict": False,
    }

    title = fields.StringField(required=True, min_length=1)
    description = fields.StringField(required=True, min_length=1)
    # Kept as text, e.g. "250".
    price = fields.StringField(required=True, min_length=1)
    brand = fields.ObjectIdField()

    created_at = fields.DateTimeField(db_field="createdAt", default=utc_now)
    updated_at = fields.DateTimeField(db_field="updatedAt", default=utc_now)

    def save(self, *args, **kwargs):
        """Override save to automatically update updated_at."""
        self.updated_at = utc_now()
        return super().save(*args, **kwargs)

    def get_brand(self) -> Optional[Brand]:
        """Resolve the brand reference, ``None`` when unset or dangling."""
        if self.brand is None:
            return None
        return Brand.objects(id=self.brand).first()

    def __str__(self) -> str:
        return self.title
