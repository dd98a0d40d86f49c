"""Product service layer (Use Cases).

Orchestrates the catalog's use cases, delegating persistence to the
injected ``IProductRepository``.

Policies enforced here:
- A missing product is an expected outcome (``None`` / ``False``), not
  an error.
- Updates replace every field wholesale; there is no partial update.
- Read-modify-write sequences (update, stock decrease) run inside one
  transaction holding a row lock on the product.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class StockDecreaseStatus(str, enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"


@dataclass(frozen=True)
class StockDecreaseResult:
    """Outcome of a stock decrease.

    ``product`` is the updated record for ``OK``, the untouched record for
    ``INSUFFICIENT_STOCK`` and ``None`` for ``NOT_FOUND``.
    """

    status: StockDecreaseStatus
    product: Optional[Product] = None

    @property
    def ok(self) -> bool:
        return self.status is StockDecreaseStatus.OK


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product in the catalog."""
        return self._repo.list()

    def get_product(self, id: str) -> Optional[Product]:
        return self._repo.get_by_id(id)

    def get_product_by_sku(self, sku: str) -> Optional[Product]:
        return self._repo.get_by_sku(sku)

    def check_stock(self, id: str, required_quantity: int) -> bool:
        """``True`` iff the product exists and holds ``required_quantity`` units.

        A missing product and insufficient stock both yield ``False``.
        """
        return self._repo.check_stock(id, required_quantity)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, dto: ProductInputDTO) -> Product:
        """Create a new product; the store assigns its id.

        Raises:
            ProductAlreadyExists: if the SKU is already taken.
        """
        product = self._repo.insert(_product_from_dto(dto))
        logger.info("product.created", product_id=str(product.id), sku=product.sku)
        return product

    @transaction.atomic
    def update_product(self, id: str, dto: ProductInputDTO) -> Optional[Product]:
        """Replace every field of an existing product with ``dto``'s values.

        Returns ``None`` and changes nothing when the product does not exist.

        Raises:
            ProductAlreadyExists: if the new SKU belongs to another product.
        """
        existing = self._repo.get_for_update(id)
        if existing is None:
            logger.info("product.update_missed", product_id=str(id))
            return None

        merged = _product_from_dto(dto, id=existing.id)
        merged.created_at = existing.created_at
        product = self._repo.update(merged)
        logger.info("product.updated", product_id=str(product.id))
        return product

    def delete_product(self, id: str) -> bool:
        """Permanently remove a product; ``False`` if it did not exist."""
        deleted = self._repo.delete(id)
        if deleted:
            logger.info("product.deleted", product_id=str(id))
        return deleted

    @transaction.atomic
    def try_decrease_stock(self, id: str, amount: int) -> StockDecreaseResult:
        """Subtract ``amount`` units, reporting why nothing changed if it fails.

        Raises:
            ValueError: if ``amount`` is negative.
        """
        if amount < 0:
            raise ValueError("Amount to decrease cannot be negative.")

        log = logger.bind(product_id=str(id), amount=amount)

        product = self._repo.get_for_update(id)
        if product is None:
            log.info("product.stock_decrease_missed")
            return StockDecreaseResult(StockDecreaseStatus.NOT_FOUND)

        if not self._repo.decrease_stock(id, amount):
            log.warning("product.stock_insufficient", available=product.quantity)
            return StockDecreaseResult(StockDecreaseStatus.INSUFFICIENT_STOCK, product)

        product = self._repo.get_by_id(id)
        log.info("product.stock_decreased", remaining=product.quantity)
        return StockDecreaseResult(StockDecreaseStatus.OK, product)

    def decrease_stock(self, id: str, amount: int) -> Optional[Product]:
        """Subtract ``amount`` units and return the updated product.

        Returns ``None`` both when the product does not exist and when it
        holds fewer than ``amount`` units; use ``try_decrease_stock`` to
        tell the two apart.
        """
        result = self.try_decrease_stock(id, amount)
        return result.product if result.ok else None


def _product_from_dto(dto: ProductInputDTO, id=None) -> Product:
    product = Product(
        name=dto.name,
        description=dto.description,
        price=dto.price,
        quantity=dto.quantity,
        sku=dto.sku,
    )
    if id is not None:
        product.id = id
    return product
