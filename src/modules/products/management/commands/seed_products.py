from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product

CATALOG = [
    ("LAP-001", "Laptop", "14-inch ultrabook", Decimal("1200.00"), 50),
    ("MON-001", "Monitor 27\"", "IPS panel, 1440p", Decimal("329.90"), 35),
    ("KEY-001", "Mechanical Keyboard", "Brown switches", Decimal("89.90"), 120),
    ("MOU-001", "Wireless Mouse", None, Decimal("24.50"), 200),
    ("HDS-001", "Headset", "Noise cancelling", Decimal("149.00"), 0),
    ("CAB-001", "USB-C Cable", "1 m, braided", Decimal("9.99"), 500),
]


class Command(BaseCommand):
    help = "Seed the catalog with a small demo product set."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding products...")
        created = 0
        for sku, name, description, price, quantity in CATALOG:
            _, was_created = Product.objects.get_or_create(
                sku=sku,
                defaults={
                    "name": name,
                    "description": description,
                    "price": price,
                    "quantity": quantity,
                },
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={len(CATALOG)}, created={created}"
            )
        )
