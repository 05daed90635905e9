from __future__ import annotations
import logging
from typing import Iterator, List, Optional, TextIO, Tuple

from .hashing import key_index
from .linked_list import Entry, LinkedList
from .render import format_pairs, print_pairs

logger = logging.getLogger(__name__)

# Bucket count used when the caller does not pick one.
DEFAULT_CAPACITY = 1024


class HashTable:
    """A fixed-capacity separate-chaining hash table of ``str`` keys and values.

    - Capacity is set once at construction; the table never resizes.
    - Lazy bucket creation: a chain is only allocated when a key lands in it.
    - New keys are pushed at the front of their bucket's chain.
    - Fallible operations report ``False``/``None`` instead of raising.
    """

    __slots__ = ("_cap", "_buckets", "_size")

    def __init__(self, size: int = DEFAULT_CAPACITY) -> None:
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError("size must be a positive integer")
        self._cap: int = size
        self._buckets: Optional[List[Optional[LinkedList]]] = [None] * self._cap
        self._size: int = 0
        logger.debug("created %s with %d buckets", type(self).__name__, self._cap)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _valid_key(key: object) -> bool:
        """Keys are non-empty strs that can be encoded as UTF-8 for hashing."""
        if not isinstance(key, str) or key == "":
            return False
        try:
            key.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    def _bucket_index(self, key: str) -> int:
        return key_index(key, self._cap)

    def _lookup(self, key: str) -> Optional[Entry]:
        """Return the entry for *key* by scanning its bucket's chain."""
        bucket = self._buckets[self._bucket_index(key)]
        return bucket.find_entry(key) if bucket is not None else None

    def _link(self, entry: Entry) -> None:
        """Hook run after a new entry joins its bucket chain."""

    def _entries(self) -> Iterator[Entry]:
        """Yield every live entry in print order."""
        if self._buckets is None:
            return
        for bucket in self._buckets:
            if bucket is not None:
                yield from bucket.entries()

    # -----------------------------
    # Core operations
    # -----------------------------
    def set(self, key: str, value: str) -> bool:
        """Insert a new key or replace the value of an existing one.

        Returns False, leaving the table untouched, when the key is missing,
        empty or not a string, when the value is not a string, when the table
        has been deleted, or when the new entry cannot be allocated.
        """
        if self._buckets is None:
            logger.warning("set(%r) on a deleted table", key)
            return False
        if not self._valid_key(key) or not isinstance(value, str):
            logger.warning("rejected set(%r, %r): key must be a non-empty UTF-8 encodable str and value a str", key, value)
            return False

        entry = self._lookup(key)
        if entry is not None:
            entry.value = value
            logger.debug("updated %r in bucket %d", key, entry.index)
            return True

        idx = self._bucket_index(key)
        bucket = self._buckets[idx]
        try:
            entry = Entry(key, value, idx)
            if bucket is None:
                bucket = LinkedList()
        except MemoryError:
            logger.warning("could not allocate an entry for %r", key)
            return False

        self._buckets[idx] = bucket
        bucket.push(entry)
        self._link(entry)
        self._size += 1
        logger.debug("inserted %r into bucket %d", key, idx)
        return True

    def get(self, key: str) -> Optional[str]:
        """Return the value stored for *key*, or None if it is absent."""
        if self._buckets is None or not self._valid_key(key):
            return None
        entry = self._lookup(key)
        return None if entry is None else entry.value

    def contains(self, key: str) -> bool:
        """Check if key exists in the table."""
        if self._buckets is None or not self._valid_key(key):
            return False
        return self._lookup(key) is not None

    def delete(self) -> int:
        """Release every entry, then the bucket array.

        Returns the number of entries released; a second call releases
        nothing and returns 0.
        """
        if self._buckets is None:
            return 0
        released = 0
        for bucket in self._buckets:
            if bucket is None:
                continue
            node = bucket.head
            while node:
                nxt = node.next
                node.release()
                released += 1
                node = nxt
            bucket.head = None
        self._buckets = None
        self._size = 0
        logger.debug("deleted %s, released %d entries", type(self).__name__, released)
        return released

    # -----------------------------
    # Iteration & printing
    # -----------------------------
    def chains(self) -> Iterator[Tuple[int, LinkedList]]:
        """Yield (index, chain) for every non-empty bucket, in index order."""
        if self._buckets is None:
            return
        for idx, bucket in enumerate(self._buckets):
            if bucket is not None and bucket.head is not None:
                yield idx, bucket

    def items(self) -> Iterator[Tuple[str, str]]:
        for entry in self._entries():
            yield (entry.key, entry.value)

    def keys(self) -> Iterator[str]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[str]:
        for _, v in self.items():
            yield v

    def print(self, file: Optional[TextIO] = None) -> None:
        """Print ``{'key': 'value', ...}`` in bucket order, newline-terminated."""
        print_pairs(self.items(), file)

    @property
    def capacity(self) -> int:
        return self._cap

    @property
    def deleted(self) -> bool:
        return self._buckets is None

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[str]:  # pragma: no cover - simple
        return self.keys()

    def __str__(self) -> str:
        return format_pairs(self.items())

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}(size={self._cap}, {format_pairs(self.items())})"


# ---------------------------------------------------------------------------
# Function-style API
# ---------------------------------------------------------------------------

def create(size: int) -> Optional[HashTable]:
    """Create a plain hash table with *size* buckets, or None on failure."""
    try:
        return HashTable(size)
    except (ValueError, MemoryError, OverflowError) as exc:
        logger.warning("could not create a table of size %r: %s", size, exc)
        return None


def table_set(ht: Optional[HashTable], key: str, value: str) -> bool:
    """Add or update *key* in *ht*; False if *ht* is None or the call is rejected."""
    if ht is None:
        return False
    return ht.set(key, value)


def table_get(ht: Optional[HashTable], key: str) -> Optional[str]:
    if ht is None:
        return None
    return ht.get(key)


def table_print(ht: Optional[HashTable], file: Optional[TextIO] = None) -> None:
    """Print *ht*; a None table prints nothing."""
    if ht is None:
        return
    ht.print(file)


def delete_table(ht: Optional[HashTable]) -> int:
    """Tear *ht* down; deleting None is a no-op. Returns entries released."""
    if ht is None:
        return 0
    return ht.delete()
