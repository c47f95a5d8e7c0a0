import sqlite3

import pytest

from botplugins.bili_store import Vup, VupStore, order_vups
from botplugins.bili_types import Medal


def test_insert_and_filter():
    with VupStore() as store:
        assert store.insert_vup(1, "a", 10) is True
        assert store.insert_vup(2, "b", 20) is True
        assert store.filter_vups([2, 3]) == [Vup(2, "b", 20)]


def test_insert_keeps_existing_entry():
    with VupStore() as store:
        store.insert_vup(1, "a", 10)
        assert store.insert_vup(1, "z", 99) is False
        assert store.filter_vups([1]) == [Vup(1, "a", 10)]


def test_filter_without_ids():
    with VupStore() as store:
        store.insert_vup(1, "a", 10)
        assert store.filter_vups([]) == []


def test_filter_many_ids_in_order():
    with VupStore() as store:
        for mid in range(0, 3000, 2):
            store.insert_vup(mid, str(mid), 0)
        found = store.filter_vups(reversed(range(3000)))
        assert [v.mid for v in found] == list(range(0, 3000, 2))


def test_cookie_defaults_to_empty():
    with VupStore() as store:
        assert store.get_cookie() == ""


def test_cookie_set_and_replace():
    with VupStore() as store:
        store.set_cookie("placeholder")
        assert store.get_cookie() == "placeholder"
        store.set_cookie("token")
        assert store.get_cookie() == "token"


def test_update_from_entries():
    entries = [{"mid": 5, "uname": "x", "roomid": 7}, {"mid": "6", "uname": "y"}]
    with VupStore() as store:
        assert store.update_from(entries) == 2
        assert store.filter_vups([5, 6]) == [Vup(5, "x", 7), Vup(6, "y", 0)]
        assert store.update_from(entries) == 0


def test_persists_to_file(tmp_path):
    path = str(tmp_path / "bilibili.db")
    store = VupStore(path)
    store.insert_vup(8, "k", 3)
    store.set_cookie("secret")
    store.close()
    with VupStore(path) as again:
        assert again.filter_vups([8]) == [Vup(8, "k", 3)]
        assert again.get_cookie() == "secret"


def test_closed_store_refuses_work():
    store = VupStore()
    store.close()
    with pytest.raises(sqlite3.ProgrammingError):
        store.insert_vup(1, "a", 1)


def test_order_vups_puts_medals_first():
    vups = [Vup(1, "a"), Vup(2, "b"), Vup(3, "c")]
    medals = [Medal(uname="b", mid=2, level=3), Medal(uname="z", mid=9, level=20)]
    result = order_vups(vups, medals)
    assert [v.mid for v in result] == [9, 2, 1, 3]
    assert result[0] == Vup(9, "z")


def test_order_vups_without_medals():
    vups = [Vup(4, "d"), Vup(1, "a")]
    assert order_vups(vups, []) == vups