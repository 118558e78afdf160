from __future__ import annotations

import sys
import threading
from pathlib import Path

import pytest

# Make the proverbs package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from proverbs.domain.proverbs import Proverb, next_identifier  # noqa: E402
from proverbs.services.proverb_store import ProverbNotFoundError, ProverbStore  # noqa: E402


def test_next_identifier_is_max_plus_one():
    assert next_identifier([]) == 1
    assert next_identifier([Proverb(4, "a"), Proverb(2, "b")]) == 5


def test_create_assigns_distinct_ids():
    store = ProverbStore()
    ids = [store.create(f"p{i}").id for i in range(20)]
    assert ids == list(range(1, 21))
    assert len(set(ids)) == len(ids)


def test_create_then_get_returns_same_text():
    store = ProverbStore()
    created = store.create("Less is more")
    fetched = store.get(created.id)
    assert fetched.id == created.id
    assert fetched.text == "Less is more"


def test_ids_are_not_reused_after_delete():
    store = ProverbStore()
    store.create("one")
    store.create("two")
    store.delete(1)
    third = store.create("three")
    assert third.id == 3
    assert [p.id for p in store.list()] == [2, 3]


def test_deleting_the_max_id_frees_it():
    # max-plus-one is derived from the current contents
    store = ProverbStore()
    store.create("one")
    store.create("two")
    store.delete(2)
    assert store.create("again").id == 2


def test_ids_follow_loaded_gaps():
    store = ProverbStore([Proverb(3, "c"), Proverb(10, "j")])
    assert store.create("k").id == 11


def test_delete_then_get_is_not_found():
    store = ProverbStore()
    p = store.create("gone soon")
    store.delete(p.id)
    with pytest.raises(ProverbNotFoundError):
        store.get(p.id)


def test_update_keeps_id_and_position():
    store = ProverbStore()
    store.create("first")
    store.create("second")
    store.create("third")
    updated = store.update(2, "middle", {"author": "anon"})
    assert updated.id == 2
    assert store.get(2).text == "middle"
    assert store.get(2).extra == {"author": "anon"}
    assert [p.text for p in store.list()] == ["first", "middle", "third"]


def test_missing_ids_raise_not_found():
    store = ProverbStore()
    with pytest.raises(ProverbNotFoundError):
        store.get(999)
    with pytest.raises(ProverbNotFoundError):
        store.update(999, "x")
    with pytest.raises(ProverbNotFoundError) as excinfo:
        store.delete(999)
    assert excinfo.value.proverb_id == 999


def test_list_after_creates_and_deletes():
    store = ProverbStore()
    for i in range(6):
        store.create(f"p{i}")
    for proverb_id in (1, 4):
        store.delete(proverb_id)
    remaining = store.list()
    assert len(remaining) == 4
    assert [p.id for p in remaining] == [2, 3, 5, 6]
    assert len(store) == 4


def test_returned_records_are_copies():
    store = ProverbStore()
    p = store.create("original")
    p.text = "mutated outside"
    store.list()[0].extra["x"] = 1
    assert store.get(p.id).text == "original"
    assert store.get(p.id).extra == {}


def test_concurrent_creates_get_unique_ids():
    store = ProverbStore()
    results: list[int] = []
    results_lock = threading.Lock()

    def worker():
        for _ in range(50):
            proverb_id = store.create("x").id
            with results_lock:
                results.append(proverb_id)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert sorted(results) == list(range(1, 401))
