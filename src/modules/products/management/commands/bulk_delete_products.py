from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from modules.products.exceptions import (
    CannotBulkDeleteProduct,
    ProductConstraintException,
    ProductNotFound,
)
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService


class Command(BaseCommand):
    help = "Delete several products by id, reporting the ones that could not be deleted."

    def add_arguments(self, parser):
        parser.add_argument("product_ids", nargs="+", type=int, metavar="product_id")

    def handle(self, *args, **options):
        product_ids = options["product_ids"]
        service = ProductService(repository=ProductDjangoRepository())

        try:
            service.bulk_delete_products(product_ids)
        except CannotBulkDeleteProduct as exc:
            deleted = len(product_ids) - len(exc.failed_ids)
            raise CommandError(
                f"Deleted {deleted} product(s); failed to delete: "
                + ", ".join(map(str, exc.failed_ids))
            ) from exc
        except (ProductNotFound, ProductConstraintException) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(
            self.style.SUCCESS(f"Deleted {len(product_ids)} product(s).")
        )
