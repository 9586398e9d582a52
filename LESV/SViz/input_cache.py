# =============================================================================
# input_cache.py — Last-Input Cache
# =============================================================================
#
# Remembers ONE string: the last bit string that was successfully drawn.
# Stored as a plain text file (default ~/.lesv_last_input).  Anything
# unreadable or invalid falls back to DEFAULT_BITS.

from __future__ import annotations
import os
import pathlib

from LESV.SMM.constants import DEFAULT_BITS, INPUT_CACHE_FILENAME
from LESV.SGM.bitstream import is_binary


def default_cache_path() -> pathlib.Path:
    return pathlib.Path.home() / INPUT_CACHE_FILENAME


def load_last_input(path: str | os.PathLike | None = None) -> str:
    path = pathlib.Path(path) if path else default_cache_path()
    try:
        value = path.read_text(encoding="utf-8").strip()
    except OSError:
        return DEFAULT_BITS
    return value if is_binary(value) else DEFAULT_BITS


def save_last_input(text: str, path: str | os.PathLike | None = None) -> None:
    """Cache `text`.  Only valid bit strings are written."""
    if not is_binary(text):
        raise ValueError(f"refusing to cache non-binary input {text!r}")
    path = pathlib.Path(path) if path else default_cache_path()
    path.write_text(text, encoding="utf-8")
