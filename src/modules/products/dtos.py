"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``).

- ``ProductInputDTO``: full product payload for create and replace.
  There is no partial-update DTO: an update overwrites every field.
- ``StockQuantityDTO``: the ``quantity`` query parameter of the stock
  endpoints.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

NAME_MAX_LENGTH = 255
SKU_MAX_LENGTH = 64
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2
# Largest value every supported backend stores in a PositiveIntegerField.
QUANTITY_MAX = 2147483647


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/replace requests.

    Validates:
    - ``name`` is present, not blank and at most 255 characters.
    - ``price`` is present, non-negative and fits ``NUMERIC(10, 2)``.
    - ``quantity`` is present, non-negative and fits a 32-bit integer column.
    - ``sku`` is optional; a blank value means "no SKU".  A SKU is at most
      64 characters and never contains ``/``, which would make it
      unreachable through ``GET /products/sku/{sku}``.

    No ``id`` field exists, so a caller-supplied id never reaches the store.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    quantity: int
    description: Optional[str] = None
    sku: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be blank.")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"Name must be at most {NAME_MAX_LENGTH} characters.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_non_negative(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError("Price must be a finite number.")
        if v < 0:
            raise ValueError("Price cannot be negative.")
        if v >= Decimal(10) ** (PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES):
            raise ValueError("Price is too large.")
        if v != v.quantize(Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)):
            raise ValueError(
                f"Price must have at most {PRICE_DECIMAL_PLACES} decimal places."
            )
        return v

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Quantity cannot be negative.")
        if v > QUANTITY_MAX:
            raise ValueError("Quantity is too large.")
        return v

    @field_validator("sku")
    @classmethod
    def sku_must_be_addressable(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        if len(v) > SKU_MAX_LENGTH:
            raise ValueError(f"SKU must be at most {SKU_MAX_LENGTH} characters.")
        if "/" in v:
            raise ValueError("SKU must not contain '/'.")
        return v


class StockQuantityDTO(BaseModel):
    """Immutable DTO for the ``?quantity=N`` parameter of the stock endpoints."""

    model_config = ConfigDict(frozen=True)

    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_fit_column(cls, v: int) -> int:
        if v > QUANTITY_MAX:
            raise ValueError("Quantity is too large.")
        return v
