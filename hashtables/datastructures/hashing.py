from __future__ import annotations

# Initial value of the djb2 accumulator.
_DJB2_SEED = 5381

# The accumulator is kept to an unsigned long, like the C implementation.
_MASK = (1 << 64) - 1


def hash_djb2(key: str) -> int:
    """Return the djb2 hash of the UTF-8 bytes of *key*.

    ``hash = hash * 33 + byte`` for every byte, starting from 5381.
    """
    h = _DJB2_SEED
    for byte in key.encode("utf-8"):
        h = ((h << 5) + h + byte) & _MASK
    return h


def key_index(key: str, size: int) -> int:
    """Map *key* to a bucket index in ``[0, size)``.

    Pure and deterministic: the same key and size always give the same index.
    """
    return hash_djb2(key) % size
