"""
Use-case tests for ProductService running against the in-memory adapter.
"""
from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from product_api.core.errors import (  # noqa: E402
    PersistenceError,
    ProductNotFoundError,
    ProductValidationError,
)
from product_api.repositories.memory import InMemoryProductRepository  # noqa: E402
from product_api.services.product_service import (  # noqa: E402
    DELETED_MESSAGE,
    INVALID_ID_MESSAGE,
    INVALID_TYPES_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    ProductService,
)


def _seed():
    return [
        {"id": 1, "name": "Widget", "price": 5, "inStock": True},
        {"id": 4, "name": "Gadget", "price": 10, "inStock": False},
        {"id": 2, "name": "Gizmo", "price": 1.5, "inStock": True},
    ]


@pytest.fixture()
def repo():
    return InMemoryProductRepository(_seed())


@pytest.fixture()
def svc(repo):
    return ProductService(repo)


def test_list_in_stock_keeps_relative_order(svc):
    assert [p["id"] for p in svc.list_in_stock()] == [1, 2]
    expected = [p for p in svc.list_all() if p["inStock"] is True]
    assert svc.list_in_stock() == expected


def test_create_assigns_next_id_after_highest(svc, repo):
    product = svc.create({"name": "Doohickey", "price": 3, "inStock": False, "extra": "ignored"})
    assert product == {"id": 5, "name": "Doohickey", "price": 3, "inStock": False}
    assert list(product) == ["id", "name", "price", "inStock"]
    assert repo.load_all()[-1] == product


def test_create_validation_runs_before_persistence(svc, repo):
    with pytest.raises(ProductValidationError) as excinfo:
        svc.create({"name": "X"})
    assert excinfo.value.message == MISSING_FIELDS_MESSAGE

    with pytest.raises(ProductValidationError) as excinfo:
        svc.create({"name": "X", "price": "5", "inStock": True})
    assert excinfo.value.message == INVALID_TYPES_MESSAGE
    assert repo.save_count == 0


def test_create_rejects_non_object_body(svc):
    with pytest.raises(ProductValidationError):
        svc.create([{"name": "X", "price": 1, "inStock": True}])


def test_create_reports_failed_save(repo):
    repo.fail_saves = True
    svc = ProductService(repo)
    with pytest.raises(PersistenceError) as excinfo:
        svc.create({"name": "X", "price": 1, "inStock": True})
    assert excinfo.value.status_code == 500
    assert excinfo.value.message == "Failed to save product"
    assert len(repo.load_all()) == 3


def test_update_merges_only_supplied_fields(svc, repo):
    updated = svc.update("4", {"price": 9.99})
    assert updated == {"id": 4, "name": "Gadget", "price": 9.99, "inStock": False}
    assert repo.load_all()[1] == updated


def test_update_cannot_change_id(svc):
    assert svc.update("1", {"id": 99, "name": "Renamed"})["id"] == 1


def test_update_with_empty_body_returns_product_unchanged(svc):
    assert svc.update("2", None) == _seed()[2]


@pytest.mark.parametrize(
    "body, message",
    [
        ({"name": 1}, "Name must be a string"),
        ({"price": "9"}, "Price must be a number"),
        ({"inStock": "yes"}, "inStock must be a boolean"),
        ({"name": None}, "Name must be a string"),
        ({"name": ""}, "Name must be a string"),
        ({"price": "9", "inStock": "yes"}, "Price must be a number"),
    ],
)
def test_update_type_errors(svc, body, message):
    with pytest.raises(ProductValidationError) as excinfo:
        svc.update("1", body)
    assert excinfo.value.message == message


def test_update_checks_id_then_existence(svc):
    with pytest.raises(ProductValidationError) as excinfo:
        svc.update("abc", {"price": 1})
    assert excinfo.value.message == INVALID_ID_MESSAGE
    with pytest.raises(ProductNotFoundError):
        svc.update("999", {"price": 1})


def test_update_reports_failed_save(repo):
    repo.fail_saves = True
    with pytest.raises(PersistenceError) as excinfo:
        ProductService(repo).update("1", {"price": 2})
    assert excinfo.value.message == "Failed to update product"
    assert repo.load_all()[0]["price"] == 5


def test_delete_is_not_found_when_repeated(svc, repo):
    assert svc.delete("4") == DELETED_MESSAGE
    assert [p["id"] for p in repo.load_all()] == [1, 2]
    for _ in range(2):
        with pytest.raises(ProductNotFoundError):
            svc.delete("4")


def test_delete_reports_failed_save(repo):
    repo.fail_saves = True
    with pytest.raises(PersistenceError) as excinfo:
        ProductService(repo).delete("1")
    assert excinfo.value.message == "Failed to delete product"


def test_serialized_writes_allocate_distinct_ids():
    repo = InMemoryProductRepository()
    svc = ProductService(repo, serialize_writes=True)
    threads = [
        threading.Thread(target=svc.create, args=({"name": f"P{i}", "price": i, "inStock": True},))
        for i in range(20)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(p["id"] for p in repo.load_all()) == list(range(1, 21))
