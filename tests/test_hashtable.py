import random

import pytest

from satune.hashtable import HashTable


def constant_hash(_key):
    return 7


def test_put_and_get_round_trip():
    table = HashTable(16)
    for i in range(1, 6):
        table.put(i, f"v{i}")
    assert len(table) == 5
    assert [table.get(i) for i in range(1, 6)] == [f"v{i}" for i in range(1, 6)]


def test_missing_key_returns_none():
    table = HashTable(16)
    table.put("a", 1)
    assert table.get("b") is None
    assert "b" not in table
    assert table.contains("a")


def test_put_overwrites_without_growing():
    table = HashTable(16)
    table.put("k", 1)
    table.put("k", 2)
    assert len(table) == 1
    assert table.get("k") == 2


def test_remove_returns_value():
    table = HashTable(16)
    table.put("k", "value")
    assert table.remove("k") == "value"
    assert table.get("k") is None
    assert len(table) == 0
    assert table.remove("k") is None


def test_none_key_uses_separate_slot():
    table = HashTable(16)
    table.put(None, "zero")
    table.put(3, "three")
    assert table.get(None) == "zero"
    assert None in table
    assert len(table) == 2
    assert table.remove(None) == "zero"
    assert None not in table
    assert len(table) == 1


def test_collisions_keep_chain_reachable_after_removal():
    table = HashTable(16, hash_function=constant_hash)
    for key in "abcde":
        table.put(key, key.upper())
    assert table.remove("b") == "B"
    assert [table.get(k) for k in "acde"] == ["A", "C", "D", "E"]
    table.put("e", "again")
    assert len(table) == 4
    assert table.get("e") == "again"


def test_reinsert_after_removal_does_not_duplicate():
    table = HashTable(16, hash_function=constant_hash)
    for key in "xyz":
        table.put(key, 1)
    table.remove("x")
    table.put("z", 2)
    assert len(table) == 2
    assert sorted(table.items()) == [("y", 1), ("z", 2)]


def test_table_grows_and_keeps_entries():
    table = HashTable(4)
    for i in range(1, 101):
        table.put(i, i * 2)
    assert table.capacity > 4
    assert len(table) == 100
    assert all(table.get(i) == i * 2 for i in range(1, 101))


def test_many_removals_do_not_break_lookups():
    table = HashTable(8)
    for round_ in range(50):
        table.put(round_ + 1, round_)
        table.remove(round_ + 1)
    table.put("last", 1)
    assert len(table) == 1
    assert table.get("last") == 1


def test_custom_equality():
    table = HashTable(
        16,
        hash_function=lambda k: hash(k[0]),
        equals=lambda a, b: a[0] == b[0],
    )
    table.put(("id", 1), "first")
    table.put(("id", 2), "second")
    assert len(table) == 1
    assert table.get(("id", 99)) == "second"


def test_reset_clears_everything():
    table = HashTable(16)
    table.put(None, 0)
    table.put(1, 1)
    table.reset()
    assert len(table) == 0
    assert list(table.items()) == []
    assert table.get(1) is None


def test_items_lists_all_pairs():
    table = HashTable(16)
    pairs = {("a", 1), ("b", 2), (None, 3)}
    for key, value in pairs:
        table.put(key, value)
    assert set(table.items()) == pairs


def test_random_value_is_a_stored_value():
    table = HashTable(16)
    for i in range(1, 9):
        table.put(i, i * 10)
    rng = random.Random(1)
    for _ in range(20):
        assert table.random_value(rng) in {i * 10 for i in range(1, 9)}


def test_random_value_on_empty_table_raises():
    with pytest.raises(LookupError):
        HashTable(16).random_value(random.Random(0))


def test_resize_preserves_entries():
    table = HashTable(16)
    for i in range(1, 5):
        table.put(i, -i)
    table.resize(64)
    assert table.capacity == 64
    assert sorted(table.items()) == [(i, -i) for i in range(1, 5)]


@pytest.mark.parametrize("capacity", [0, 3, 12, -8])
def test_capacity_must_be_power_of_two(capacity):
    with pytest.raises(ValueError):
        HashTable(capacity)


@pytest.mark.parametrize("factor", [0, 1, 1.5, -0.2])
def test_load_factor_range(factor):
    with pytest.raises(ValueError):
        HashTable(16, factor)