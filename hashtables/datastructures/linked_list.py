from __future__ import annotations
from typing import Iterator, Optional, Tuple


class Entry:
    """A key/value node shared by a bucket chain and the sorted order list.

    ``next`` links the entry inside its bucket chain; ``sprev``/``snext``
    thread it through a sorted table's order list and stay ``None`` in a
    plain table. ``index`` is the bucket the key hashed to when the entry
    was created.
    """

    __slots__ = ("key", "value", "index", "next", "sprev", "snext", "__weakref__")

    def __init__(self, key: str, value: str, index: int, next: Optional["Entry"] = None) -> None:
        self.key = key
        self.value = value
        self.index = index
        self.next = next
        self.sprev: Optional[Entry] = None
        self.snext: Optional[Entry] = None

    def release(self) -> None:
        """Drop the owned strings and every link held by this entry."""
        self.key = None  # type: ignore[assignment]
        self.value = None  # type: ignore[assignment]
        self.next = None
        self.sprev = None
        self.snext = None

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self.key!r}, {self.value!r}, index={self.index})"


class LinkedList:
    """Singly-linked collision chain for one bucket of a hash table.

    New entries are pushed at the head, so iteration yields the most
    recently inserted key first.
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[Entry] = None

    def push(self, entry: Entry) -> None:
        """Link *entry* in front of the current head."""
        entry.next = self.head
        self.head = entry

    def find_entry(self, key: str) -> Optional[Entry]:
        """Return the entry holding *key*, or None if not present."""
        n = self.head
        while n:
            if n.key == key:
                return n
            n = n.next
        return None

    def entries(self) -> Iterator[Entry]:
        """Yield the chain's entries from head to end."""
        n = self.head
        while n:
            yield n
            n = n.next

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in chain order."""
        for n in self.entries():
            yield (n.key, n.value)

    def __bool__(self) -> bool:
        return self.head is not None

    def __len__(self) -> int:
        count = 0
        n = self.head
        while n:
            count += 1
            n = n.next
        return count
