"""Product DRF serializer for API output.

Input is validated by ``ProductInputDTO`` (see ``dtos.py``); this
serializer only renders ``Product`` instances, so every field is
read-only and no uniqueness validators run.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "quantity",
            "sku",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
