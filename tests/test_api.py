import pytest
from bson import ObjectId

from apps.registry import brands, products
from apps.utils import DatabaseUnavailable


def test_root(api_client):
    response = api_client.get("/")
    assert response.status_code == 200
    assert response["Content-Type"].startswith("text/plain")
    assert response.content == b"This is root"


@pytest.mark.parametrize("path", ["/products", "/brands"])
def test_list_empty(api_client, path):
    response = api_client.get(path)
    assert response.status_code == 200
    assert response.json() == []


def test_list_products_matches_stored_count(api_client, seeded):
    response = api_client.get("/products")
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data, list)
    assert len(data) == products.count() == 7


def test_list_brands(api_client, seeded):
    response = api_client.get("/brands")
    assert response.status_code == 200
    assert len(response.json()) == 5


def test_get_first_seeded_product(api_client, seeded):
    first = seeded.products[0]

    response = api_client.get(f"/products/{first.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(first.id)
    assert data["title"] == "Apple AirPods"
    assert data["price"] == "250"
    assert data["brand"] == str(seeded.brands[0].id)
    assert data["createdAt"].endswith("Z")
    assert data["updatedAt"].endswith("Z")


def test_get_brand(api_client, seeded):
    brand = seeded.brands[2]

    response = api_client.get(f"/brands/{brand.id}")

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == str(brand.id)
    assert data["name"] == "Sony"
    assert data["url"] == "https://www.sony.com"
    assert set(data) == {"id", "name", "url", "createdAt", "updatedAt"}


def test_product_fields(api_client, seeded):
    data = api_client.get("/products").json()[0]
    assert set(data) == {"id", "title", "description", "price", "brand", "createdAt", "updatedAt"}


def test_product_without_brand(api_client):
    product = products.insert_one(title="Cable", description="USB-C cable", price="20")

    data = api_client.get(f"/products/{product.id}").json()

    assert data["brand"] is None


def test_product_with_dangling_brand(api_client):
    missing = ObjectId()
    product = products.insert_one(title="Cable", description="USB-C cable", price="20", brand=missing)

    data = api_client.get(f"/products/{product.id}").json()

    assert data["brand"] == str(missing)


@pytest.mark.parametrize(
    "path, message",
    [("/products", "Product not found."), ("/brands", "Brand not found.")],
)
def test_get_missing_document(api_client, path, message):
    response = api_client.get(f"{path}/{ObjectId()}")
    assert response.status_code == 404
    assert response["Content-Type"].startswith("text/plain")
    assert response.content.decode() == message


@pytest.mark.parametrize(
    "path, message",
    [
        ("/products/not-an-id", "Product not found."),
        ("/products/abc.def", "Product not found."),
        ("/brands/not-an-id", "Brand not found."),
        ("/brands/abc.def", "Brand not found."),
    ],
)
def test_get_malformed_id(api_client, path, message):
    response = api_client.get(path)
    assert response.status_code == 400
    assert response["Content-Type"].startswith("text/plain")
    assert response.content.decode() == message


def test_not_found_is_logged(api_client, caplog):
    raw_id = str(ObjectId())
    with caplog.at_level("WARNING", logger="apps.utils.api_response"):
        api_client.get(f"/brands/{raw_id}")
    assert any(raw_id in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize("path", ["/products/", "/brands/"])
def test_trailing_slash_is_optional(api_client, seeded, path):
    response = api_client.get(path)
    assert response.status_code == 200
    assert isinstance(response.json(), list)


def test_trailing_slash_on_detail(api_client, seeded):
    response = api_client.get(f"/brands/{seeded.brands[0].id}/")
    assert response.status_code == 200
    assert response.json()["name"] == "Apple"


def test_unknown_route(api_client):
    assert api_client.get("/orders").status_code == 404


@pytest.mark.parametrize("method", ["post", "put", "patch", "delete"])
def test_write_methods_not_allowed(api_client, seeded, method):
    product_id = seeded.products[0].id
    assert getattr(api_client, method)("/products").status_code == 405
    assert getattr(api_client, method)(f"/products/{product_id}").status_code == 405
    assert products.count() == 7


def test_database_unavailable(api_client, monkeypatch):
    def unavailable(**filters):
        raise DatabaseUnavailable()

    monkeypatch.setattr(brands, "find", unavailable)

    response = api_client.get("/brands")

    assert response.status_code == 503
    assert response.json() == {"detail": "Database unavailable."}


def test_cors_header(api_client):
    response = api_client.get("/products", HTTP_ORIGIN="http://localhost:3000")
    assert response["Access-Control-Allow-Origin"] == "*"


@pytest.mark.parametrize("viewset_path", ["apps.brands.mongo_views", "apps.products.mongo_views"])
def test_viewsets_documented(viewset_path):
    import importlib

    module = importlib.import_module(viewset_path)
    viewset = next(
        value for name, value in vars(module).items() if name.endswith("ViewSet") and name != "ViewSet"
    )
    assert module.__doc__
    assert viewset.__doc__
    assert viewset.list.__doc__
    assert viewset.retrieve.__doc__
