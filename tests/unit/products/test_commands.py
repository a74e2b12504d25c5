"""Unit tests for the product management commands."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError

from modules.products.models import Product, ProductAccessory, ProductLang

pytestmark = pytest.mark.unit


class TestBulkDeleteProductsCommand:
    def test_deletes_products(self, make_product):
        a = make_product()
        b = make_product()
        out = StringIO()

        call_command("bulk_delete_products", str(a.pk), str(b.pk), stdout=out)

        assert "Deleted 2 product(s)." in out.getvalue()
        assert not Product.objects.exists()

    def test_missing_product_is_a_command_error(self, make_product):
        kept = make_product()

        with pytest.raises(CommandError, match="was not found"):
            call_command("bulk_delete_products", "999999", str(kept.pk))

        assert Product.objects.filter(pk=kept.pk).exists()

    def test_invalid_id_is_a_command_error(self):
        with pytest.raises(CommandError, match="Invalid product id"):
            call_command("bulk_delete_products", "0")

    def test_reports_failed_ids(self, make_product):
        ok = make_product()
        failing = make_product()
        original_delete = Product.delete

        def _delete(self, *args, **kwargs):
            if self.pk == failing.pk:
                raise DatabaseError("locked")
            return original_delete(self, *args, **kwargs)

        with patch.object(Product, "delete", autospec=True, side_effect=_delete):
            with pytest.raises(CommandError) as exc_info:
                call_command("bulk_delete_products", str(ok.pk), str(failing.pk))

        assert str(exc_info.value) == (
            f"Deleted 1 product(s); failed to delete: {failing.pk}"
        )


class TestSeedCatalogCommand:
    def test_seeds_catalog(self):
        out = StringIO()
        call_command("seed_catalog", stdout=out)

        assert Product.objects.count() == 7
        assert ProductLang.objects.filter(language_id=1).count() == 7
        assert ProductAccessory.objects.count() == 6
        assert "Seed completed: products=7, accessories=6" in out.getvalue()

    def test_is_idempotent(self):
        call_command("seed_catalog", stdout=StringIO())
        out = StringIO()
        call_command("seed_catalog", stdout=out)

        assert Product.objects.count() == 7
        assert "accessories=0" in out.getvalue()

    def test_names_in_requested_language(self):
        call_command("seed_catalog", "--language", "2", stdout=StringIO())
        assert ProductLang.objects.filter(language_id=2).count() == 7
