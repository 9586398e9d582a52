# =============================================================================
# bitstream.py — Bit String Parsing, Validation and Random Generation
# =============================================================================
#
# Everything that turns user text into a BitSequence lives here.  The
# encoders never re-validate text; they only check their own precondition
# (non-empty, values in {0, 1}) and fail fast.
#
#   "1011"  → parse_bits() → (1, 0, 1, 1)
#   ""      → InvalidBitString("Please enter a binary string")
#   "10a1"  → InvalidBitString("Invalid input! Please enter only 0s and 1s")

from __future__ import annotations
import random
import re
from typing import Sequence

from LESV.SMM.constants import (
    RANDOM_MIN_BITS, RANDOM_MAX_BITS,
    MSG_EMPTY_INPUT, MSG_INVALID_INPUT,
)

_BINARY_RE = re.compile(r"[01]+")


class InvalidBitString(ValueError):
    """User-supplied text is empty or contains characters other than 0/1."""


def is_binary(text: str) -> bool:
    """True if `text` is one or more '0'/'1' characters and nothing else."""
    return _BINARY_RE.fullmatch(text) is not None


def parse_bits(text: str) -> tuple[int, ...]:
    """
    Convert a user-supplied string into an immutable BitSequence.

    Surrounding whitespace is ignored.  Raises InvalidBitString with the
    message the input form shows to the user.
    """
    value = text.strip()
    if not value:
        raise InvalidBitString(MSG_EMPTY_INPUT)
    if not is_binary(value):
        raise InvalidBitString(MSG_INVALID_INPUT)
    return tuple(int(ch) for ch in value)


def bits_to_str(bits: Sequence[int]) -> str:
    return "".join(str(b) for b in bits)


def random_bits(rng: random.Random | None = None) -> tuple[int, ...]:
    """
    Random BitSequence for exercising the encoders.

    Length is uniform in [RANDOM_MIN_BITS, RANDOM_MAX_BITS]; each bit is an
    independent fair coin.  Pass a seeded random.Random for repeatable output.
    """
    rng = rng or random.Random()
    length = rng.randint(RANDOM_MIN_BITS, RANDOM_MAX_BITS)
    return tuple(rng.randint(0, 1) for _ in range(length))
