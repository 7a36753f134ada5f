import mongoengine
import mongomock
import pytest
from rest_framework.test import APIClient


@pytest.fixture(scope="session", autouse=True)
def mongo_connection():
    """In-memory MongoDB shared by the whole test session."""
    mongoengine.disconnect()
    client = mongoengine.connect(
        db="productsDatabase_test",
        alias="default",
        mongo_client_class=mongomock.MongoClient,
    )
    yield client
    mongoengine.disconnect()


@pytest.fixture(autouse=True)
def empty_collections(mongo_connection):
    from apps.registry import models

    for handle in models:
        handle.drop()
    yield


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def seeded():
    from storefront.seed import seed_catalog

    return seed_catalog()
