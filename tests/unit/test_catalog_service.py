"""
Tests for catalog and settings services against an in-memory database
"""
import pytest
from fastapi import HTTPException

from app.models.category import Category
from app.schemas import CategoryCreate, MoveDirection, ProductCreate, SettingsUpdate
from app.services.catalog_service import catalog_service
from app.services.settings_service import settings_service


@pytest.mark.unit
class TestCategoryOrdering:

    def test_move_swaps_display_order(self, populated_db):
        dresses, bags = catalog_service.list_categories(populated_db)

        result = catalog_service.move_category(populated_db, bags.id, MoveDirection.UP)

        assert [c.name for c in result] == ["Bags", "Dresses"]
        assert bags.display_order == 0
        assert dresses.display_order == 1

    def test_move_at_edges_is_noop(self, populated_db):
        dresses, bags = catalog_service.list_categories(populated_db)

        catalog_service.move_category(populated_db, dresses.id, MoveDirection.UP)
        result = catalog_service.move_category(populated_db, bags.id, MoveDirection.DOWN)

        assert [c.name for c in result] == ["Dresses", "Bags"]
        assert (dresses.display_order, bags.display_order) == (0, 1)

    def test_move_with_tied_ranks(self, test_db):
        test_db.add_all([Category(name=n, display_order=0) for n in ("A", "B", "C")])
        test_db.commit()
        c_id = catalog_service.list_categories(test_db)[2].id

        result = catalog_service.move_category(test_db, c_id, MoveDirection.UP)

        assert [c.name for c in result] == ["A", "C", "B"]
        assert [c.display_order for c in result] == [0, 1, 2]

    def test_move_unknown_category(self, test_db):
        with pytest.raises(HTTPException) as exc_info:
            catalog_service.move_category(test_db, 404, MoveDirection.UP)
        assert exc_info.value.status_code == 404

    def test_duplicate_name_rejected(self, populated_db):
        with pytest.raises(HTTPException) as exc_info:
            catalog_service.create_category(populated_db, CategoryCreate(name="Dresses"))
        assert exc_info.value.status_code == 400


@pytest.mark.unit
class TestProductQueries:

    @pytest.fixture
    def tricky_names(self, test_db):
        for name in ("Dress 50% off", "Dress 500", "Silk_Scarf", "Silk Scarf", "Платье шелковое"):
            catalog_service.create_product(
                test_db, ProductCreate(name=name, price=100, images=["https://x/1.jpg"])
            )
        return test_db

    def test_percent_is_literal(self, tricky_names):
        result = catalog_service.list_products(tricky_names, search="50%")
        assert [p.name for p in result] == ["Dress 50% off"]

    def test_underscore_is_literal(self, tricky_names):
        result = catalog_service.list_products(tricky_names, search="_")
        assert [p.name for p in result] == ["Silk_Scarf"]

    def test_cyrillic_search_ignores_case(self, tricky_names):
        result = catalog_service.list_products(tricky_names, search="ПЛАТЬЕ")
        assert [p.name for p in result] == ["Платье шелковое"]
        result = catalog_service.list_products(tricky_names, search="шЕЛК")
        assert [p.name for p in result] == ["Платье шелковое"]

    def test_search_and_category_intersect(self, populated_db):
        dresses = catalog_service.list_categories(populated_db)[0]

        by_both = catalog_service.list_products(populated_db, category_id=dresses.id, search="SILK")
        by_search = catalog_service.list_products(populated_db, search="e")

        assert [p.name for p in by_both] == ["Silk Summer Dress"]
        assert len(by_search) == 3

    def test_product_survives_category_delete(self, populated_db):
        bags = catalog_service.list_categories(populated_db)[1]

        catalog_service.delete_category(populated_db, bags.id)
        products = catalog_service.list_products(populated_db, category_id=bags.id)

        assert [p.name for p in products] == ["Leather Tote"]

    def test_create_product_keeps_image_order(self, test_db):
        product = catalog_service.create_product(test_db, ProductCreate(
            name="Scarf", price=900, images=["https://x/2.jpg", " ", "https://x/1.jpg"],
        ))

        assert product.images == ["https://x/2.jpg", "https://x/1.jpg"]
        assert product.specifications == {}


@pytest.mark.unit
class TestSettingsUpsert:

    def test_upsert_creates_then_updates_single_row(self, test_db):
        first = settings_service.upsert_settings(test_db, SettingsUpdate(
            site_name="Shop", whatsapp_number="+7 900", imgbb_api_key="key-1",
        ))
        second = settings_service.upsert_settings(test_db, SettingsUpdate(
            site_name="Boutique", whatsapp_number="7901",
        ))

        assert first.id == second.id
        assert second.site_name == "Boutique"
        assert second.imgbb_api_key == "key-1"
        assert settings_service.get_imgbb_api_key(test_db) == "key-1"

    def test_no_settings_yet(self, test_db):
        assert settings_service.get_settings(test_db) is None
        assert settings_service.get_imgbb_api_key(test_db) is None
