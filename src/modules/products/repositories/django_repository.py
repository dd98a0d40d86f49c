"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: they return ``None`` instead of
raising, and an id that is not a valid UUID is treated as a miss.
Writes run inside ``transaction.atomic()``; integrity errors are caught
outside the savepoint so the caller's transaction stays usable.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.db.models import F
from django.utils import timezone

from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def get_by_sku(self, sku: str) -> Optional[Product]:
        return Product.objects.filter(sku=sku).first()

    def list(self) -> List[Product]:
        """Return every product in insertion order."""
        return list(Product.objects.all())

    def get_for_update(self, id: str) -> Optional[Product]:
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def check_stock(self, id: str, quantity: int) -> bool:
        """Check whether sufficient stock exists for the requested quantity."""
        product = self.get_by_id(id)
        if not product:
            return False
        return product.quantity >= quantity

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def insert(self, entity: Product) -> Product:
        """Persist a new product; the primary key is always freshly assigned.

        Raises:
            ProductAlreadyExists: if the SKU is already taken.
        """
        entity.id = Product._meta.get_field("id").get_default()
        entity._state.adding = True
        try:
            with transaction.atomic():
                entity.save(force_insert=True)
        except IntegrityError as exc:
            self._raise_if_sku_taken(entity, exc)
            raise
        logger.info("product.inserted", product_id=str(entity.id), sku=entity.sku)
        return entity

    def update(self, entity: Product) -> Product:
        """Overwrite every column of the product identified by ``entity.id``.

        Raises:
            ProductNotFound: if no product has that id.
            ProductAlreadyExists: if the new SKU belongs to another product.
        """
        try:
            with transaction.atomic():
                if self.get_by_id(str(entity.id)) is None:
                    raise ProductNotFound(f"Product {entity.id} not found.")
                entity._state.adding = False
                entity.save(force_update=True)
        except IntegrityError as exc:
            self._raise_if_sku_taken(entity, exc)
            raise
        logger.info("product.saved", product_id=str(entity.id), sku=entity.sku)
        return entity

    def delete(self, id: str) -> bool:
        """Permanently delete a product by ID.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given ID.
        """
        try:
            with transaction.atomic():
                deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return False
        if deleted:
            logger.info("product.removed", product_id=str(id))
        return deleted > 0

    def decrease_stock(self, id: str, amount: int) -> bool:
        """Conditional ``UPDATE ... WHERE quantity >= amount``.

        The guard lives in the statement itself, so concurrent callers can
        never push the quantity below zero.
        """
        try:
            with transaction.atomic():
                changed = Product.objects.filter(id=id, quantity__gte=amount).update(
                    quantity=F("quantity") - amount,
                    updated_at=timezone.now(),
                )
        except (ValueError, ValidationError):
            return False
        return changed == 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _raise_if_sku_taken(entity: Product, exc: IntegrityError) -> None:
        if not entity.sku:
            return
        clash = Product.objects.filter(sku=entity.sku).exclude(id=entity.id).exists()
        if clash:
            logger.warning("product.duplicate_sku", sku=entity.sku)
            raise ProductAlreadyExists(
                f"SKU '{entity.sku}' already registered."
            ) from exc
