"""Project application config: opens the MongoDB connection at startup."""

from django.apps import AppConfig
from django.conf import settings


class StorefrontConfig(AppConfig):
    name = "storefront"
    verbose_name = "Storefront"

    def ready(self) -> None:
        if not getattr(settings, "MONGODB_CONNECT_ON_STARTUP", True):
            return
        from .mongodb import connect_mongodb

        connect_mongodb()
