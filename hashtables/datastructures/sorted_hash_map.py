from __future__ import annotations
import logging
from typing import Iterator, Optional, TextIO, Tuple

from .hash_map import DEFAULT_CAPACITY, HashTable
from .linked_list import Entry
from .order_list import OrderList
from .render import print_pairs

logger = logging.getLogger(__name__)


class SortedHashTable(HashTable):
    """A :class:`HashTable` that also keeps its entries in ascending key order.

    Every entry sits in its bucket chain and in an :class:`OrderList` at the
    same time. ``set`` links a new entry into both as one step, so printing
    and iteration follow key order no matter how keys hash.

    Lookups and duplicate checks go through the bucket chain; the order list
    only decides ordering.
    """

    __slots__ = ("_order",)

    def __init__(self, size: int = DEFAULT_CAPACITY) -> None:
        super().__init__(size)
        self._order = OrderList()

    def _link(self, entry: Entry) -> None:
        self._order.insert(entry)

    def _entries(self) -> Iterator[Entry]:
        return self._order.entries()

    @property
    def head(self) -> Optional[Entry]:
        return self._order.head

    @property
    def tail(self) -> Optional[Entry]:
        return self._order.tail

    def find_ordered(self, key: str) -> Optional[str]:
        """Look *key* up by scanning the order list instead of its bucket (O(n))."""
        if self.deleted or not self._valid_key(key):
            return None
        entry = self._order.find(key)
        return None if entry is None else entry.value

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in ascending key order."""
        return self._order.forward()

    def reversed_items(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in descending key order."""
        return self._order.reverse()

    def __reversed__(self) -> Iterator[str]:  # pragma: no cover - simple
        for k, _ in self.reversed_items():
            yield k

    def print(self, file: Optional[TextIO] = None) -> None:
        """Print the table in ascending key order."""
        print_pairs(self._order.forward(), file)

    def print_rev(self, file: Optional[TextIO] = None) -> None:
        """Print the table in descending key order."""
        print_pairs(self._order.reverse(), file)

    def delete(self) -> int:
        """Release every entry along the order list, then the bucket array."""
        if self.deleted:
            return 0
        released = 0
        order = self._order
        while order.head is not None:
            entry = order.head
            order.remove(entry)
            entry.release()
            released += 1
        for bucket in self._buckets:
            if bucket is not None:
                bucket.head = None
        self._buckets = None
        self._size = 0
        logger.debug("deleted SortedHashTable, released %d entries", released)
        return released


# ---------------------------------------------------------------------------
# Function-style API
# ---------------------------------------------------------------------------

def sorted_create(size: int) -> Optional[SortedHashTable]:
    """Create a sorted hash table with *size* buckets, or None on failure."""
    try:
        return SortedHashTable(size)
    except (ValueError, MemoryError, OverflowError) as exc:
        logger.warning("could not create a sorted table of size %r: %s", size, exc)
        return None


def table_print_rev(ht: Optional[SortedHashTable], file: Optional[TextIO] = None) -> None:
    """Print *ht* in descending key order; a None or unsorted table prints nothing."""
    if not isinstance(ht, SortedHashTable):
        return
    ht.print_rev(file)
