"""Product repository interface.

Extends ``IRepository[Product]`` with the SKU look-up, the row-locking
read used by read-modify-write operations, and stock primitives.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product store.

    ``insert`` and ``update`` raise ``ProductAlreadyExists`` on a SKU
    collision; ``update`` raises ``ProductNotFound`` for an unknown id.
    """

    @abstractmethod
    def get_by_sku(self, sku: str) -> Optional[Product]:
        """Retrieve a product by SKU (exact match)."""

    @abstractmethod
    def get_for_update(self, id: str) -> Optional[Product]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if the
        product does not exist.
        """

    @abstractmethod
    def check_stock(self, id: str, quantity: int) -> bool:
        """Check whether sufficient stock exists for the requested quantity."""

    @abstractmethod
    def decrease_stock(self, id: str, amount: int) -> bool:
        """Subtract ``amount`` only if at least that much is in stock.

        Returns ``True`` when the quantity was decreased, ``False`` when the
        product is missing or holds fewer than ``amount`` units.
        """
