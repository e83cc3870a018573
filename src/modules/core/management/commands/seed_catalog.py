from __future__ import annotations

import structlog
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.constants import DELETED_CATEGORY_TITLE, NO_CATEGORY_TITLE
from modules.categories.models import Category
from modules.products.models import Product

logger = structlog.get_logger(__name__)

DEMO_CATALOG = {
    "Electronics": [
        ("Laptop", "LP123", 999.99, 10),
        ("Smartphone", "SMARTPHONE-001", 599.99, 50),
        ("Headset", "HS-010", 79.90, 120),
    ],
    "Books": [
        ("Clean Architecture", "BK-001", 34.50, 40),
        ("Domain-Driven Design", "BK-002", 54.00, 25),
    ],
    "Furniture": [
        ("Office Chair", "FN-001", 249.00, 15),
    ],
}


class Command(BaseCommand):
    help = "Create the sentinel categories ('Deleted', 'No Category') and optional demo data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--demo",
            action="store_true",
            help="Also create a few sample categories and products.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")

        created = self._seed_sentinels()
        products = self._seed_demo() if options["demo"] else 0

        logger.info("catalog.seeded", sentinels_created=created, demo_products=products)
        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: sentinels_created={created}, demo_products={products}"
            )
        )

    def _seed_sentinels(self) -> int:
        created = 0
        for title in (DELETED_CATEGORY_TITLE, NO_CATEGORY_TITLE):
            if Category.objects.filter(category_title__iexact=title).exists():
                continue
            Category.objects.create(category_title=title)
            created += 1
        return created

    def _seed_demo(self) -> int:
        self.stdout.write("Creating demo catalog...")
        created = 0
        for title, products in DEMO_CATALOG.items():
            category = Category.objects.filter(category_title__iexact=title).first()
            if category is None:
                category = Category.objects.create(category_title=title)
            for product_title, sku, price, quantity in products:
                _, was_created = Product.objects.get_or_create(
                    sku=sku,
                    defaults={
                        "product_title": product_title,
                        "image_url": f"https://img.example.com/{sku.lower()}.jpg",
                        "price_unit": price,
                        "quantity": quantity,
                        "category": category,
                    },
                )
                created += int(was_created)
        self.stdout.write(self.style.SUCCESS("Creating demo catalog... Done!"))
        return created
