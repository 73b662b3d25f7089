"""Tests for catalog CRUD."""

import pytest
from pydantic import ValidationError

from cafe_pos.crud.menu_item import create_item, delete_item, get_item, list_items, update_item
from cafe_pos.db.base import MAX_AMOUNT
from cafe_pos.exceptions import DuplicateItem
from cafe_pos.schemas.menu_item import ItemCreate, ItemUpdate


class TestListItems:

    async def test_sorted_by_category_then_name(self, db):
        items = await list_items(db)
        assert [(i.category, i.name) for i in items] == [
            ("bakery", "Croissant"),
            ("coffee", "Espresso"),
            ("coffee", "Latte"),
        ]


class TestCreateItem:

    async def test_creates_item_from_wire_names(self, db):
        item_in = ItemCreate.model_validate(
            {"id": "tea", "name": "Black tea", "category": "tea", "priceH": 200, "priceS": 180}
        )
        await create_item(db, item_in)

        tea = await get_item(db, "tea")
        assert (tea.name, tea.unit, tea.price_here, tea.price_away) == ("Black tea", "", 200, 180)

    async def test_duplicate_id_rejected(self, db):
        item_in = ItemCreate(id="latte", name="Latte 2", category="coffee", price_here=1, price_away=1)
        with pytest.raises(DuplicateItem):
            await create_item(db, item_in)
        assert (await get_item(db, "latte")).name == "Latte"

    @pytest.mark.parametrize("payload", [
        {"id": "", "name": "x", "category": "c", "priceH": 1, "priceS": 1},
        {"id": "x", "name": "", "category": "c", "priceH": 1, "priceS": 1},
        {"id": "x", "name": "x", "priceH": 1, "priceS": 1},
        {"id": "x", "name": "x", "category": "c", "priceH": 1.5, "priceS": 1},
        {"id": "x", "name": "x", "category": "c", "priceH": "100", "priceS": 1},
        {"id": "x", "name": "x", "category": "c", "priceH": -1, "priceS": 1},
        {"id": "x", "name": "x", "category": "c", "priceH": 10 ** 20, "priceS": 1},
        {"id": "x", "name": "x", "category": "c", "priceH": 1, "priceS": MAX_AMOUNT + 1},
    ])
    def test_invalid_payload(self, payload):
        with pytest.raises(ValidationError):
            ItemCreate.model_validate(payload)


class TestUpdateItem:

    async def test_only_given_fields_change(self, db):
        item = await update_item(db, "latte", ItemUpdate.model_validate({"priceS": 470}))
        assert (item.name, item.category, item.price_here, item.price_away) == ("Latte", "coffee", 500, 470)

    @pytest.mark.parametrize("payload", [{"priceH": 10 ** 20}, {"priceS": MAX_AMOUNT + 1}])
    def test_oversized_price_rejected(self, payload):
        with pytest.raises(ValidationError):
            ItemUpdate.model_validate(payload)

    async def test_missing_item(self, db):
        assert await update_item(db, "ghost", ItemUpdate(name="Ghost")) is None


class TestDeleteItem:

    async def test_delete_is_idempotent(self, db):
        assert await delete_item(db, "espresso") is True
        assert await delete_item(db, "espresso") is False
        assert await get_item(db, "espresso") is None
