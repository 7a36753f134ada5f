"""Router for product module."""

from rest_framework import routers

from .mongo_views import ProductViewSet


router = routers.SimpleRouter(trailing_slash=False)
router.register(r"products", ProductViewSet, basename="product")
