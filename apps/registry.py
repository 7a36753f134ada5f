"""Handles for the catalog collections."""

from apps.brands.mongo_models import Brand
from apps.products.mongo_models import Product
from apps.utils.registry import ModelRegistry


models = ModelRegistry()

brands = models.register(Brand)
products = models.register(Product)
