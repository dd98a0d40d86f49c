"""Unit tests for the Product output serializer."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


@pytest.fixture()
def product():
    return Product.objects.create(
        sku="LAP-001",
        name="Laptop",
        description="14-inch",
        price=Decimal("1200.00"),
        quantity=50,
    )


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        expected = {
            "id",
            "name",
            "description",
            "price",
            "quantity",
            "sku",
            "created_at",
            "updated_at",
        }
        assert set(serializer.fields.keys()) == expected

    def test_all_fields_read_only(self):
        serializer = ProductSerializer()
        assert all(field.read_only for field in serializer.fields.values())


class TestSerialization:
    def test_serializes_product(self, product):
        data = ProductSerializer(product).data
        assert data["id"] == str(product.id)
        assert data["sku"] == "LAP-001"
        assert data["name"] == "Laptop"
        assert data["description"] == "14-inch"
        assert data["quantity"] == 50

    def test_price_rendered_as_exact_decimal_string(self, product):
        data = ProductSerializer(product).data
        assert data["price"] == "1200.00"

    def test_missing_optional_fields_are_null(self):
        bare = Product.objects.create(name="Bare", price=Decimal("0.10"))
        data = ProductSerializer(bare).data
        assert data["sku"] is None
        assert data["description"] is None
