"""Unit tests for the Product model.

Covers:
- Valid creation with all fields.
- Blank SKU stored as NULL; several SKU-less products may coexist.
- SKU uniqueness constraint.
- Non-negative price and quantity (application + DB constraint).
- Physical deletion.
- __str__ representation.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    """Build and full_clean a Product, returning the unsaved instance."""
    defaults = {
        "sku": f"TST-{uuid.uuid4().hex[:6].upper()}",
        "name": "Test Product",
        "price": Decimal("29.90"),
        "quantity": 100,
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.full_clean()
    return product


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(
            sku="LAP-001",
            name="Laptop",
            description="14-inch",
            price=Decimal("1200.00"),
            quantity=50,
        )
        p.refresh_from_db()
        assert p.sku == "LAP-001"
        assert p.name == "Laptop"
        assert p.description == "14-inch"
        assert p.price == Decimal("1200.00")
        assert p.quantity == 50

    def test_description_is_optional(self):
        p = Product.objects.create(name="Bare", price=Decimal("1.00"), quantity=1)
        assert p.description is None

    def test_sku_kept_verbatim(self):
        p = Product.objects.create(
            sku="lap-001", name="Laptop", price=Decimal("1.00"), quantity=1
        )
        p.refresh_from_db()
        assert p.sku == "lap-001"


# ---------------------------------------------------------------------------
# SKU
# ---------------------------------------------------------------------------


class TestSku:
    def test_blank_sku_saved_as_null(self):
        p = Product.objects.create(sku="   ", name="No SKU", price=Decimal("1.00"))
        p.refresh_from_db()
        assert p.sku is None

    def test_blank_sku_normalised_via_full_clean(self):
        p = _make_product(sku="")
        assert p.sku is None

    def test_many_products_without_sku(self):
        Product.objects.create(name="A", price=Decimal("1.00"))
        Product.objects.create(name="B", price=Decimal("1.00"), sku="")
        assert Product.objects.filter(sku__isnull=True).count() == 2

    def test_duplicate_sku_raises(self):
        Product.objects.create(sku="UNIQUE-SKU", name="First", price=Decimal("10.00"))
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(
                sku="UNIQUE-SKU", name="Second", price=Decimal("20.00")
            )


# ---------------------------------------------------------------------------
# Price / quantity
# ---------------------------------------------------------------------------


class TestPriceValidation:
    def test_negative_price_raises_validation_error(self):
        with pytest.raises(ValidationError):
            _make_product(price=Decimal("-5.00"))

    def test_zero_price_is_valid(self):
        p = _make_product(price=Decimal("0.00"))
        assert p.price == Decimal("0.00")

    def test_negative_price_rejected_by_database(self):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(name="Bad", price=Decimal("-1.00"))


class TestQuantityValidation:
    def test_negative_quantity_raises_validation_error(self):
        with pytest.raises(ValidationError):
            _make_product(quantity=-1)

    def test_zero_quantity_is_valid(self):
        p = _make_product(quantity=0)
        assert p.quantity == 0

    def test_default_quantity_is_zero(self):
        p = Product.objects.create(name="Default", price=Decimal("1.00"))
        assert p.quantity == 0


# ---------------------------------------------------------------------------
# Deletion / display / ordering
# ---------------------------------------------------------------------------


class TestProductDeletion:
    def test_delete_removes_row(self):
        p = Product.objects.create(name="Gone", price=Decimal("1.00"))
        pk = p.pk
        p.delete()
        assert not Product.objects.filter(pk=pk).exists()


class TestProductDisplay:
    def test_str_representation(self):
        p = _make_product(sku="DISP-001", name="Display Product")
        assert str(p) == "DISP-001 - Display Product"

    def test_str_without_sku(self):
        p = _make_product(sku=None, name="Anonymous")
        assert str(p) == "- - Anonymous"


class TestProductOrdering:
    def test_default_ordering_is_insertion_order(self):
        names = ["Zeta", "Alpha", "Mid"]
        for name in names:
            Product.objects.create(name=name, price=Decimal("1.00"))
        assert [p.name for p in Product.objects.all()] == names
