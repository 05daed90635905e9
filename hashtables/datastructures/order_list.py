from __future__ import annotations
from typing import Iterator, Optional, Tuple

from .linked_list import Entry


class OrderList:
    """Doubly-linked list keeping a sorted table's entries in ascending key order.

    Entries are linked through their ``sprev``/``snext`` slots, so the same
    :class:`Entry` objects live in a bucket chain and in this list at once.

    Implementation notes
    --------------------
    • ``insert`` walks from the head to the last key smaller than the new one
      (O(n) worst case) and splices the entry in; the list is never re-sorted.
    • ``remove`` is O(1) given the entry itself.
    • ``forward``/``reverse`` are lazy generators; every call starts a fresh
      walk and neither mutates the list.
    """

    __slots__ = ("head", "tail", "_size")

    def __init__(self) -> None:
        self.head: Optional[Entry] = None
        self.tail: Optional[Entry] = None
        self._size = 0

    # --------------------------------- mutation -------------------------------

    def insert(self, entry: Entry) -> None:
        """Splice *entry* in at its sorted position.

        The caller guarantees ``entry.key`` is not already in the list.
        """
        if self.head is None:
            entry.sprev = None
            entry.snext = None
            self.head = entry
            self.tail = entry
        elif entry.key < self.head.key:
            entry.sprev = None
            entry.snext = self.head
            self.head.sprev = entry
            self.head = entry
        else:
            node = self.head
            while node.snext is not None and node.snext.key < entry.key:
                node = node.snext
            entry.sprev = node
            entry.snext = node.snext
            if node.snext is None:
                self.tail = entry
            else:
                node.snext.sprev = entry
            node.snext = entry
        self._size += 1

    def remove(self, entry: Entry) -> None:
        """Unlink *entry*, repairing its neighbours and head/tail as needed."""
        if entry.sprev is None:
            self.head = entry.snext
        else:
            entry.sprev.snext = entry.snext
        if entry.snext is None:
            self.tail = entry.sprev
        else:
            entry.snext.sprev = entry.sprev
        entry.sprev = None
        entry.snext = None
        self._size -= 1

    # --------------------------------- lookup ---------------------------------

    def find(self, key: str) -> Optional[Entry]:
        """Return the entry holding *key* by scanning from the head (O(n))."""
        node = self.head
        while node is not None and node.key != key:
            node = node.snext
        return node

    # -------------------------------- traversal -------------------------------

    def entries(self) -> Iterator[Entry]:
        node = self.head
        while node is not None:
            yield node
            node = node.snext

    def forward(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in ascending key order."""
        for node in self.entries():
            yield (node.key, node.value)

    def reverse(self) -> Iterator[Tuple[str, str]]:
        """Yield (key, value) pairs in descending key order, starting at the tail."""
        node = self.tail
        while node is not None:
            yield (node.key, node.value)
            node = node.sprev

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return self.forward()

    def __reversed__(self) -> Iterator[Tuple[str, str]]:
        return self.reverse()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self.head is not None
