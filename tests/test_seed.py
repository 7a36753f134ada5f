from io import StringIO
from unittest import mock

from django.core.management import call_command

from apps.registry import brands, products
from storefront.seed import BRANDS, PRODUCTS, seed_catalog


def test_seed_counts():
    result = seed_catalog()

    assert len(result.brands) == len(BRANDS) == 5
    assert len(result.products) == len(PRODUCTS) == 7
    assert brands.count() == 5
    assert products.count() == 7


def test_seed_products_reference_seeded_brands():
    result = seed_catalog()
    brand_ids = {brand.id for brand in result.brands}

    for product in products.find():
        assert product.brand in brand_ids
        assert product.get_brand() is not None


def test_seed_first_product():
    result = seed_catalog()

    first = result.products[0]
    assert first.title == "Apple AirPods"
    assert first.price == "250"
    assert first.get_brand().name == "Apple"


def test_seed_twice_duplicates_records():
    seed_catalog()
    seed_catalog()

    assert brands.count() == 10
    assert products.count() == 14
    assert products.count(title="Apple AirPods") == 2


def test_seed_reset_replaces_records():
    seed_catalog()
    seed_catalog(reset=True)

    assert brands.count() == 5
    assert products.count() == 7


def test_seed_inserts_products_in_one_batch():
    with mock.patch.object(products, "insert_many", wraps=products.insert_many) as insert_many:
        seed_catalog()

    insert_many.assert_called_once()
    assert len(insert_many.call_args.args[0]) == 7


def test_seed_command_closes_connection():
    out = StringIO()
    with mock.patch("storefront.management.commands.seed.disconnect_mongodb") as disconnect:
        call_command("seed", stdout=out)

    disconnect.assert_called_once_with()
    assert "Seeded 5 brands and 7 products." in out.getvalue()
    assert products.count() == 7


def test_seed_command_reset():
    seed_catalog()
    with mock.patch("storefront.management.commands.seed.disconnect_mongodb"):
        call_command("seed", "--reset", stdout=StringIO())

    assert brands.count() == 5
    assert products.count() == 7
