"""Sample catalog data and the batch job that loads it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from apps.brands.mongo_models import Brand
from apps.products.mongo_models import Product
from apps.registry import brands, products


logger = logging.getLogger(__name__)


BRANDS = [
    {"name": "Apple", "url": "https://www.apple.com"},
    {"name": "Samsung", "url": "https://www.samsung.com"},
    {"name": "Sony", "url": "https://www.sony.com"},
    {"name": "Bose", "url": "https://www.bose.com"},
    {"name": "Google", "url": "https://store.google.com"},
]

# (brand index, fields)
PRODUCTS = [
    (0, {
        "title": "Apple AirPods",
        "description": "https://www.apple.com/airpods",
        "price": "250",
    }),
    (0, {
        "title": "Apple iPhone Pro",
        "description": "https://www.apple.com/iphone",
        "price": "999",
    }),
    (1, {
        "title": "Samsung Galaxy S24",
        "description": "https://www.samsung.com/us/smartphones/galaxy-s24",
        "price": "799",
    }),
    (1, {
        "title": "Samsung Galaxy Buds",
        "description": "https://www.samsung.com/us/audio/galaxy-buds",
        "price": "150",
    }),
    (2, {
        "title": "Sony WH-1000XM5",
        "description": "https://electronics.sony.com/audio/headphones",
        "price": "400",
    }),
    (3, {
        "title": "Bose QuietComfort Earbuds",
        "description": "https://www.bose.com/c/earbuds",
        "price": "280",
    }),
    (4, {
        "title": "Google Pixel 8",
        "description": "https://store.google.com/product/pixel_8",
        "price": "699",
    }),
]


@dataclass
class SeedResult:
    brands: List[Brand]
    products: List[Product]


def seed_catalog(reset: bool = False) -> SeedResult:
    """Insert the sample brands one by one, then all products in one batch.

    Nothing is caught; any write error aborts the job. Running it twice
    duplicates every record unless ``reset`` drops both collections first.
    """
    if reset:
        logger.info("Dropping %s and %s", brands.collection_name, products.collection_name)
        products.drop()
        brands.drop()

    created_brands = [brands.insert_one(**fields) for fields in BRANDS]
    brand_ids = [brand.id for brand in created_brands]

    documents = [
        Product(brand=brand_ids[index], **fields)
        for index, fields in PRODUCTS
    ]
    created_products = products.insert_many(documents)

    logger.info("Created %d brands and %d products", len(created_brands), len(created_products))
    return SeedResult(brands=created_brands, products=created_products)
