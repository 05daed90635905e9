from __future__ import annotations
import sys
from typing import Iterable, Optional, TextIO, Tuple


def format_pairs(pairs: Iterable[Tuple[str, str]]) -> str:
    """Render (key, value) pairs as ``{'k1': 'v1', 'k2': 'v2'}``.

    Keys and values are written verbatim between single quotes; an empty
    sequence renders as ``{}``.
    """
    return "{" + ", ".join(f"'{k}': '{v}'" for k, v in pairs) + "}"


def print_pairs(pairs: Iterable[Tuple[str, str]], file: Optional[TextIO] = None) -> None:
    """Write the rendered pairs followed by a newline (stdout by default)."""
    out = sys.stdout if file is None else file
    out.write(format_pairs(pairs) + "\n")
