from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.models import Product, ProductAccessory, ProductLang

DEFAULT_LANGUAGE_ID = 1


class Command(BaseCommand):
    help = "Seed database with a small development catalog."

    def add_arguments(self, parser):
        parser.add_argument(
            "--language",
            type=int,
            default=DEFAULT_LANGUAGE_ID,
            help="Language id used for product names.",
        )

    def handle(self, *args, **options):
        language_id = options["language"]
        self.stdout.write("Seeding catalog data...")

        products = self._seed_products(language_id)
        links_created = self._seed_accessories(products)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"products={len(products)}, "
                f"accessories={links_created}"
            )
        )

    def _seed_products(self, language_id: int) -> dict[str, Product]:
        self.stdout.write("Creating products...")
        products: dict[str, Product] = {}
        catalog = [
            ("demo_1", "Hummingbird printed t-shirt", Decimal("23.90"), Decimal("5.49")),
            ("demo_3", "Hummingbird printed sweater", Decimal("35.90"), Decimal("9.00")),
            ("demo_5", "The best is yet to come framed poster", Decimal("29.00"), Decimal("7.00")),
            ("demo_6", "The adventure begins framed poster", Decimal("29.00"), Decimal("7.00")),
            ("demo_11", "Mug The best is yet to come", Decimal("11.90"), Decimal("2.00")),
            ("demo_12", "Mug The adventure begins", Decimal("11.90"), Decimal("2.00")),
            ("demo_17", "Brown bear notebook", Decimal("12.90"), Decimal("3.00")),
        ]
        for reference, name, price, wholesale_price in catalog:
            product = Product.objects.filter(reference=reference).first()
            if product is None:
                product = Product.objects.create(
                    reference=reference,
                    price=price,
                    wholesale_price=wholesale_price,
                )
            ProductLang.objects.get_or_create(
                product=product,
                language_id=language_id,
                defaults={"name": name},
            )
            products[reference] = product
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products

    def _seed_accessories(self, products: dict[str, Product]) -> int:
        self.stdout.write("Linking related products...")
        links = {
            "demo_1": ["demo_3", "demo_11"],
            "demo_5": ["demo_6", "demo_12"],
            "demo_11": ["demo_12", "demo_17"],
        }
        created = 0
        for reference, related in links.items():
            for position, accessory_reference in enumerate(related):
                _, was_created = ProductAccessory.objects.get_or_create(
                    product=products[reference],
                    accessory=products[accessory_reference],
                    defaults={"position": position},
                )
                created += int(was_created)
        self.stdout.write(self.style.SUCCESS("Linking related products... Done!"))
        return created
