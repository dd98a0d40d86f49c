"""Product model with SKU uniqueness and stock control.

Invariants backed by the database:
- SKU is unique when present (NULLs do not collide).
- Price cannot be negative.
- Quantity cannot be negative.

Deletion is physical: a deleted product is gone and its id is never
handed out again.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Catalog entry, the only entity of the service.

    An empty or whitespace-only ``sku`` is stored as NULL so that several
    products without a SKU can coexist under the unique index.
    """

    name = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True, default=None)  # noqa: DJ01
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    quantity = models.PositiveIntegerField(default=0)
    sku = models.CharField(max_length=64, unique=True, null=True, blank=True)  # noqa: DJ01

    class Meta:
        db_table = "products"
        ordering = ["created_at", "id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="products_quantity_non_negative",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if not self.sku or not self.sku.strip():
            self.sku = None
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})
        if self.quantity is not None and self.quantity < 0:
            raise ValidationError({"quantity": "Quantity cannot be negative."})

    def save(self, *args, **kwargs) -> None:
        if not self.sku or not self.sku.strip():
            self.sku = None
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.sku or '-'} - {self.name}"
