import pytest

from pathgraph.config import MAP_CONFIG
from pathgraph.errors import DuplicateKeyError, InvalidKeyError, KeyNotFoundError
from pathgraph.keyed_map import KeyedMap


class CollidingKey:
    """Key whose instances all hash to the same bucket."""

    def __init__(self, name):
        self.name = name

    def __hash__(self):
        return 42

    def __eq__(self, other):
        return isinstance(other, CollidingKey) and other.name == self.name


class NegativeHashKey:
    def __init__(self, value):
        self.value = value

    def __hash__(self):
        return -abs(self.value) - 1

    def __eq__(self, other):
        return isinstance(other, NegativeHashKey) and other.value == self.value


def test_init_defaults():
    m = KeyedMap()
    assert m.size() == 0
    assert len(m) == 0
    assert m.capacity() == MAP_CONFIG.default_capacity == 64


@pytest.mark.parametrize("capacity", [0, -1])
def test_init_rejects_non_positive_capacity(capacity):
    with pytest.raises(ValueError, match="greater than 0"):
        KeyedMap(capacity)


def test_put_get_small():
    m = KeyedMap()
    m.put(1, "one")
    m.put(2, "two")
    m.put(3, "three")
    assert m.get(2) == "two"
    assert m.size() == 3


def test_put_get_big():
    m = KeyedMap()
    for i in range(1000):
        m.put(i, str(i))
    assert m.size() == 1000
    assert m.get(500) == "500"
    assert all(m.get(i) == str(i) for i in range(1000))


def test_contains_key():
    m = KeyedMap()
    keys = ["alpha", "beta", "gamma", (1, 2), 3.5]
    for k in keys:
        m.put(k, k)
    for k in keys:
        assert m.contains_key(k)
        assert k in m
    assert not m.contains_key("delta")
    assert not m.contains_key(None)
    assert not m.contains_key(["unhashable"])


def test_duplicate_put_rejected_and_map_unchanged():
    m = KeyedMap()
    m.put("a", 6)
    with pytest.raises(DuplicateKeyError, match="already exists"):
        m.put("a", 7)
    with pytest.raises(DuplicateKeyError):
        m.put("a", 8)
    assert m.get("a") == 6
    assert m.size() == 1


def test_duplicate_error_is_value_error():
    m = KeyedMap()
    m.put("a", 1)
    with pytest.raises(ValueError):
        m.put("a", 2)


def test_put_none_key_rejected():
    m = KeyedMap()
    with pytest.raises(InvalidKeyError):
        m.put(None, "x")
    assert m.size() == 0


def test_put_unhashable_key_rejected():
    m = KeyedMap()
    with pytest.raises(InvalidKeyError, match="not hashable"):
        m.put(["a", "b"], "x")
    assert m.size() == 0


def test_get_missing_raises():
    m = KeyedMap()
    m.put("a", 1)
    with pytest.raises(KeyNotFoundError, match="not found"):
        m.get("b")
    # Also catchable as a built-in KeyError
    with pytest.raises(KeyError):
        m.get("b")


def test_remove():
    m = KeyedMap()
    m.put(1, "one")
    m.put(2, "two")
    m.put(3, "three")
    assert m.remove(2) == "two"
    assert m.size() == 2
    assert not m.contains_key(2)
    with pytest.raises(KeyNotFoundError):
        m.remove(2)
    with pytest.raises(KeyNotFoundError):
        m.get(2)


def test_remove_then_reinsert():
    m = KeyedMap()
    m.put("k", 1)
    m.remove("k")
    m.put("k", 2)
    assert m.get("k") == 2


def test_remove_never_shrinks():
    m = KeyedMap(4)
    for i in range(10):
        m.put(i, i)
    grown = m.capacity()
    for i in range(10):
        m.remove(i)
    assert m.size() == 0
    assert m.capacity() == grown


def test_clear():
    m = KeyedMap(8)
    m.put(1, "one")
    m.put(2, "two")
    m.put(3, "three")
    m.clear()
    assert m.size() == 0
    assert m.capacity() == 8
    assert not m.contains_key(1)
    m.put(1, "uno")
    assert m.get(1) == "uno"


def test_resize_thresholds():
    """Capacity 8 holds at 6 entries (0.75) and doubles at 7 (0.875 >= 0.8)."""
    m = KeyedMap(8)
    for k in "abcd":
        m.put(k, k)
    assert m.capacity() == 8

    m.put("e", "5")
    m.put("f", "6")
    assert m.capacity() == 8

    m.put("g", "7")
    assert m.capacity() == 16


def test_resize_exactly_at_load_factor():
    m = KeyedMap(10)
    for i in range(7):
        m.put(i, i)
    assert m.capacity() == 10
    m.put(7, 7)  # 8 / 10 == 0.8
    assert m.capacity() == 20


def test_resize_preserves_all_pairs():
    m = KeyedMap(2)
    expected = {f"key-{i}": i * i for i in range(200)}
    for k, v in expected.items():
        m.put(k, v)
    assert m.size() == 200
    assert m.load_factor() < MAP_CONFIG.load_factor
    for k, v in expected.items():
        assert m.get(k) == v
    assert dict(m.items()) == expected


def test_chaining_with_colliding_keys():
    m = KeyedMap(8)
    keys = [CollidingKey(str(i)) for i in range(5)]
    for i, k in enumerate(keys):
        m.put(k, i)
    for i, k in enumerate(keys):
        assert m.get(k) == i
    assert m.remove(keys[2]) == 2
    assert not m.contains_key(keys[2])
    assert m.get(keys[3]) == 3
    with pytest.raises(DuplicateKeyError):
        m.put(CollidingKey("0"), 99)


def test_negative_hashes_land_in_valid_buckets():
    m = KeyedMap(3)
    for i in range(20):
        m.put(NegativeHashKey(i), i)
    for i in range(20):
        assert m.get(NegativeHashKey(i)) == i


def test_nan_key_is_found_by_identity():
    nan = float("nan")
    m = KeyedMap(4)
    m.put(nan, 1)

    assert m.contains_key(nan)
    assert nan in m
    assert m.get(nan) == 1
    with pytest.raises(DuplicateKeyError):
        m.put(nan, 2)
    assert m.size() == 1

    for i in range(10):
        m.put(i, i)
    assert m.get(nan) == 1

    assert m.remove(nan) == 1
    assert not m.contains_key(nan)


def test_iteration_helpers():
    m = KeyedMap()
    for i in range(5):
        m.put(i, str(i))
    assert sorted(m) == [0, 1, 2, 3, 4]
    assert sorted(m.keys()) == [0, 1, 2, 3, 4]
    assert sorted(m.values()) == ["0", "1", "2", "3", "4"]
    assert sorted(m.items()) == [(i, str(i)) for i in range(5)]


def test_repr():
    m = KeyedMap(8)
    m.put("a", 1)
    assert repr(m) == "KeyedMap(size=1, capacity=8)"
