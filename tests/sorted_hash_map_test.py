import gc
import random
import string
import weakref

from hashtables.datastructures import SortedHashTable, key_index
from hashtables.datastructures import hash_map
from hashtables.datastructures.linked_list import Entry


def random_key(rng):
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(1, 4)))


def test_sorted_print_and_reverse(capsys):
    t = SortedHashTable(5)
    t.set("a", "1")
    t.set("b", "2")
    t.set("a", "99")
    assert t.get("a") == "99"
    t.print()
    t.print_rev()
    assert capsys.readouterr().out == "{'a': '99', 'b': '2'}\n{'b': '2', 'a': '99'}\n"


def test_order_independent_of_bucket_placement(capsys):
    # One bucket: chain order is the reverse of insertion order.
    t = SortedHashTable(1)
    for k, v in [("y", "0"), ("j", "1"), ("c", "2"), ("b", "3"), ("z", "4"),
                 ("n", "5"), ("a", "6"), ("m", "7")]:
        t.set(k, v)
    t.print()
    t.print_rev()
    assert capsys.readouterr().out == (
        "{'a': '6', 'b': '3', 'c': '2', 'j': '1', 'm': '7', 'n': '5', 'y': '0', 'z': '4'}\n"
        "{'z': '4', 'y': '0', 'n': '5', 'm': '7', 'j': '1', 'c': '2', 'b': '3', 'a': '6'}\n"
    )
    assert str(t) == "{'a': '6', 'b': '3', 'c': '2', 'j': '1', 'm': '7', 'n': '5', 'y': '0', 'z': '4'}"


def test_update_keeps_order_position_and_entry():
    t = SortedHashTable(3)
    for k in ("c", "a", "b"):
        t.set(k, "old")
    head, tail = t.head, t.tail
    t.set("a", "new")
    t.set("c", "new")
    assert t.head is head and t.tail is tail
    assert list(t.items()) == [("a", "new"), ("b", "old"), ("c", "new")]
    assert len(t) == 3


def test_invalid_key_leaves_table_empty():
    t = SortedHashTable(5)
    assert t.set("", "x") is False
    assert len(t) == 0
    assert t.head is None and t.tail is None
    assert t.get("missing") is None
    assert t.find_ordered("missing") is None


def test_random_operations_keep_structures_consistent():
    rng = random.Random(532)
    size = 7
    t = SortedHashTable(size)
    model = {}
    for step in range(600):
        k = random_key(rng)
        v = str(step)
        assert t.set(k, v) is True
        model[k] = v
        assert t.get(k) == v

    expected = sorted(model.items())
    assert list(t.items()) == expected
    assert list(t.reversed_items()) == expected[::-1]
    assert list(t.keys()) == [k for k, _ in expected]

    order_keys = [k for k, _ in t.items()]
    assert all(a < b for a, b in zip(order_keys, order_keys[1:]))

    bucket_entries = [e for _, chain in t.chains() for e in chain.entries()]
    order_entries = list(t._order.entries())
    assert len(bucket_entries) == len(order_entries) == len(t) == len(model)
    assert {id(e) for e in bucket_entries} == {id(e) for e in order_entries}

    for e in bucket_entries:
        assert e.index == key_index(e.key, size)

    for k, v in model.items():
        assert t.get(k) == v
        assert t.find_ordered(k) == v


def test_head_and_tail_have_no_outer_links():
    t = SortedHashTable(2)
    for k in ("m", "a", "z", "q"):
        t.set(k, k)
    assert t.head.key == "a" and t.head.sprev is None
    assert t.tail.key == "z" and t.tail.snext is None


def test_delete_releases_each_entry_exactly_once(monkeypatch):
    t = SortedHashTable(3)
    for i in range(25):
        t.set(f"key{i:02d}", str(i))

    released = []
    original = Entry.release

    def counting_release(self):
        released.append(id(self))
        original(self)

    monkeypatch.setattr(Entry, "release", counting_release)
    assert t.delete() == 25
    assert len(released) == 25
    assert len(set(released)) == 25
    assert t.delete() == 0
    assert len(released) == 25


def test_delete_drops_all_entries():
    t = SortedHashTable(4)
    for k in ("d", "b", "a", "c"):
        t.set(k, k)
    refs = [weakref.ref(e) for e in t._order.entries()]
    assert len(refs) == 4

    t.delete()
    gc.collect()
    assert all(r() is None for r in refs)
    assert t.head is None and t.tail is None
    assert len(t) == 0
    assert list(t.items()) == []
    assert list(t.reversed_items()) == []
    assert t.set("a", "1") is False
    assert t.get("a") is None
    assert t.find_ordered("a") is None


def test_unencodable_key_is_rejected():
    t = SortedHashTable(5)
    assert t.set("\udcff", "x") is False
    assert len(t) == 0
    assert t.head is None and t.tail is None
    assert t.get("\udcff") is None
    assert t.find_ordered("\udcff") is None


def test_allocation_failure_leaves_order_list_unchanged(monkeypatch):
    t = SortedHashTable(5)
    for k in ("b", "d"):
        t.set(k, k)
    head, tail = t.head, t.tail

    def no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(hash_map, "Entry", no_memory)
    for k in ("a", "c", "e"):
        assert t.set(k, k) is False
    assert t.head is head and t.tail is tail
    assert len(t) == len(t._order) == 2
    assert list(t.items()) == [("b", "b"), ("d", "d")]
    assert list(t.reversed_items()) == [("d", "d"), ("b", "b")]
    assert t.get("c") is None


def test_failed_chain_allocation_leaves_order_list_unchanged(monkeypatch):
    t = SortedHashTable(5)
    t.set("a", "1")

    def no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(hash_map, "LinkedList", no_memory)
    # djb2("b") % 5 == 1, a bucket that has no chain yet
    assert t.set("b", "2") is False
    assert len(t) == len(t._order) == 1
    assert t.head is t.tail
    assert t.head.key == "a" and t.head.snext is None
