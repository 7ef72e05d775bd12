from __future__ import annotations

import pytest

from stockroom.domain.errors import DuplicateIdentityError, InvalidValueError, NotFoundError
from stockroom.repositories.memory import KeyedStore


def test_add_and_get_by_id(make_item) -> None:
    store = KeyedStore()
    laptop = make_item(1, "Laptop", 5)
    store.add(laptop)
    assert store.get_by_id(1) is laptop
    assert len(store) == 1
    assert 1 in store


def test_duplicate_add_is_rejected_without_mutation(make_item) -> None:
    store = KeyedStore([make_item(1, "Laptop", 5), make_item(2, "Mouse", 25)])
    with pytest.raises(DuplicateIdentityError) as excinfo:
        store.add(make_item(1, "Tablet", 3))
    assert excinfo.value.entity_id == 1
    assert len(store) == 2
    assert store.get_by_id(1).name == "Laptop"


@pytest.mark.parametrize("op", ["get", "remove", "update"])
def test_unknown_id_raises_not_found(make_item, op: str) -> None:
    store = KeyedStore([make_item(1)])
    with pytest.raises(NotFoundError) as excinfo:
        if op == "get":
            store.get_by_id(42)
        elif op == "remove":
            store.remove(42)
        else:
            store.update_quantity(42, 3)
    assert excinfo.value.entity_id == 42
    assert len(store) == 1


def test_removed_id_is_gone(make_item) -> None:
    store = KeyedStore([make_item(1), make_item(2)])
    store.remove(1)
    assert 1 not in store
    with pytest.raises(NotFoundError):
        store.get_by_id(1)
    with pytest.raises(NotFoundError):
        store.remove(1)
    with pytest.raises(NotFoundError):
        store.update_quantity(1, 4)
    assert [i.id for i in store.list_all()] == [2]


def test_update_quantity_overwrites_in_place(make_item) -> None:
    store = KeyedStore([make_item(1, quantity=5)])
    item = store.update_quantity(1, 0)
    assert item.quantity == 0
    assert store.get_by_id(1).quantity == 0


def test_negative_quantity_is_rejected(make_item) -> None:
    store = KeyedStore([make_item(1, quantity=5)])
    with pytest.raises(InvalidValueError) as excinfo:
        store.update_quantity(1, -10)
    assert excinfo.value.value == -10
    assert store.get_by_id(1).quantity == 5


def test_negative_quantity_checked_before_lookup() -> None:
    store = KeyedStore()
    with pytest.raises(InvalidValueError):
        store.update_quantity(99, -1)


@pytest.mark.parametrize("bad", [True, 2.5, "3"])
def test_non_integer_quantity_is_rejected(make_item, bad: object) -> None:
    store = KeyedStore([make_item(1, quantity=5)])
    with pytest.raises(InvalidValueError):
        store.update_quantity(1, bad)  # type: ignore[arg-type]
    assert store.get_by_id(1).quantity == 5


def test_list_all_is_a_snapshot(make_item) -> None:
    store = KeyedStore([make_item(1), make_item(2)])
    snapshot = store.list_all()
    snapshot.clear()
    assert len(store) == 2
    assert [i.id for i in store] == [1, 2]


def test_adjust_quantity_increases_and_decreases(make_item) -> None:
    store = KeyedStore([make_item(1, quantity=10)])
    assert store.adjust_quantity(1, 5).quantity == 15
    assert store.adjust_quantity(1, -15).quantity == 0


def test_adjust_quantity_failures_leave_store_unchanged(make_item) -> None:
    store = KeyedStore([make_item(1, quantity=10)])
    with pytest.raises(NotFoundError):
        store.adjust_quantity(7, 5)
    with pytest.raises(InvalidValueError):
        store.adjust_quantity(1, -11)
    assert [(i.id, i.quantity) for i in store.list_all()] == [(1, 10)]


def test_replace_all_swaps_content(make_item) -> None:
    store = KeyedStore([make_item(1), make_item(2)])
    store.replace_all([make_item(3), make_item(4)])
    assert [i.id for i in store.list_all()] == [3, 4]


def test_replace_all_with_duplicates_keeps_previous_content(make_item) -> None:
    store = KeyedStore([make_item(1), make_item(2)])
    with pytest.raises(DuplicateIdentityError):
        store.replace_all([make_item(5), make_item(5)])
    assert [i.id for i in store.list_all()] == [1, 2]


def test_clear(make_item) -> None:
    store = KeyedStore([make_item(1)])
    store.clear()
    assert len(store) == 0
    assert store.list_all() == []


def test_store_works_for_unrelated_shapes() -> None:
    class Crate:
        def __init__(self, id: int, quantity: int) -> None:
            self.id = id
            self.quantity = quantity

    store: KeyedStore[Crate] = KeyedStore([Crate(10, 1)])
    store.adjust_quantity(10, 2)
    assert store.get_by_id(10).quantity == 3


def test_add_rejects_negative_quantity_for_any_shape(make_item) -> None:
    class Crate:
        def __init__(self, id: int, quantity: int) -> None:
            self.id = id
            self.quantity = quantity

    store: KeyedStore = KeyedStore([make_item(1)])
    with pytest.raises(InvalidValueError) as excinfo:
        store.add(Crate(2, -3))
    assert excinfo.value.value == -3
    assert len(store) == 1
    assert 2 not in store


def test_package_docstring_names_importable_modules() -> None:
    import importlib
    import re

    import stockroom.repositories as repositories

    names = re.findall(r":mod:`([\w.]+)`", repositories.__doc__ or "")
    assert "stockroom.repositories.file" in names
    for name in names:
        importlib.import_module(name)
