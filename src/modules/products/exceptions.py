"""Product domain exceptions.

Raised by the store when a write cannot be applied.  The API layer
(Views) catches these and translates them into HTTP responses.  A
missing product on a read is not an exception: look-ups return ``None``.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """Another product already uses the same SKU."""


class ProductNotFound(Exception):
    """An update targeted a product id that does not exist."""
