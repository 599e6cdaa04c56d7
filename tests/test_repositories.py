"""
Repository tests against mocked pymongo collections.

Verifies the exact driver calls: business-id filters, upsert flags,
projection on existence checks and the food page aggregation.
"""

import pytest
from bson import ObjectId

from repositories import (
    BaseRepository,
    FoodRepository,
    MenuRepository,
    OrderItemRepository,
)
from test_fixtures import make_collection, make_food_docs


def test_repository_requires_id_field():
    class Nameless(BaseRepository):
        pass

    with pytest.raises(NotImplementedError):
        Nameless(make_collection("x"))


def test_get_by_id_filters_on_business_id():
    collection = make_collection("menu")
    MenuRepository(collection).get_by_id("m1")
    collection.find_one.assert_called_once_with({"menu_id": "m1"})


def test_exists_uses_projection():
    collection = make_collection("menu")
    collection.find_one.return_value = {"_id": ObjectId()}
    assert MenuRepository(collection).exists("m1") is True
    collection.find_one.assert_called_once_with({"menu_id": "m1"}, projection={"_id": 1})


def test_exists_false_when_missing():
    assert MenuRepository(make_collection("menu")).exists("m1") is False


def test_create_returns_storage_id_string():
    oid = ObjectId()
    assert MenuRepository(make_collection("menu")).create({"_id": oid}) == str(oid)


def test_upsert_call_shape():
    collection = make_collection("menu")
    MenuRepository(collection).upsert("m1", {"name": "Brunch"}, on_insert={"created_at": 1})
    collection.update_one.assert_called_once_with(
        {"menu_id": "m1"},
        {"$set": {"name": "Brunch"}, "$setOnInsert": {"created_at": 1}},
        upsert=True,
    )


def test_upsert_without_insert_defaults():
    collection = make_collection("menu")
    MenuRepository(collection).upsert("m1", {"name": "Brunch"})
    update = collection.update_one.call_args[0][1]
    assert update == {"$set": {"name": "Brunch"}}


def test_food_page_empty_collection_is_none():
    assert FoodRepository(make_collection("food")).get_page(0, 10) is None


def test_food_page_returns_first_result():
    collection = make_collection("food")
    page = {"total_count": 5, "food_items": make_food_docs(2)}
    collection.aggregate.return_value = iter([page])
    assert FoodRepository(collection).get_page(0, 2) == page


def test_order_items_by_order_sorted_by_creation():
    collection = make_collection("order_item")
    OrderItemRepository(collection).get_by_order("o1")
    args, kwargs = collection.find.call_args
    assert args[0] == {"order_id": "o1"}
    assert kwargs["sort"] == [("created_at", 1)]


def test_create_many_returns_ids():
    collection = make_collection("order_item")
    docs = [{"_id": ObjectId()}, {"_id": ObjectId()}]
    ids = OrderItemRepository(collection).create_many(docs)
    assert ids == [str(d["_id"]) for d in docs]
