# =============================================================================
# line_encoder.py — Line Encoding Schemes
# =============================================================================
#
# Converts a BitSequence into an EncodedSignal: an ordered tuple of Segments,
# one per bit (NRZ-L, NRZI, AMI, Pseudoternary) or two per bit (Manchester,
# Differential Manchester).
#
# ENCODING RULES:
#   NRZ-L          1 → +V, 0 → -V
#   NRZI           level starts at -V; '1' inverts, '0' holds
#   AMI            '0' → 0; '1' → alternating +V / -V (first mark is +V)
#   Pseudoternary  AMI with the roles of '0' and '1' swapped
#   Manchester     '1' → (-V, +V), '0' → (+V, -V)   (G.E. Thomas convention)
#   Diff. Manch.   level starts at +V; '0' inverts at the start of the bit,
#                  '1' holds; ALWAYS inverts at mid-bit
#
# Every encoder is a fold over the bits with an explicit accumulator
# (_FoldState).  Nothing is carried between calls: the same bits always give
# the same segments.
#
# TRANSITION FLAGS:
#   Segment.transition is the encoder's boundary flag.  For AMI and
#   Pseudoternary it is True for every bit after the first, even between two
#   equal levels.  The renderer works out the visible jump itself from the
#   levels; the two flags are never merged.

from __future__ import annotations
from enum import Enum
from typing import Callable, NamedTuple, Sequence

from LESV.SMM.constants import (
    LEVEL_HIGH, LEVEL_ZERO, LEVEL_LOW,
    NRZI_INITIAL_LEVEL, AMI_INITIAL_POLARITY, DIFF_MANCHESTER_INITIAL,
    SCHEME_NRZL, SCHEME_NRZI, SCHEME_AMI, SCHEME_PSEUDO,
    SCHEME_MANCHESTER, SCHEME_DIFF_MANCHESTER,
    SCHEME_TITLES, SCHEME_COLORS, HALF_BIT_SCHEMES,
)


class InvalidBitSequence(ValueError):
    """Encoder precondition failed: empty input or a value outside {0, 1}."""


class UnknownScheme(KeyError):
    """Selector does not name one of the six schemes."""


class Scheme(str, Enum):
    NRZL            = SCHEME_NRZL
    NRZI            = SCHEME_NRZI
    AMI             = SCHEME_AMI
    PSEUDO          = SCHEME_PSEUDO
    MANCHESTER      = SCHEME_MANCHESTER
    DIFF_MANCHESTER = SCHEME_DIFF_MANCHESTER

    @classmethod
    def lookup(cls, selector) -> Scheme | None:
        """Scheme for a selector string, or None if it names no scheme."""
        try:
            return cls(selector)
        except ValueError:
            return None

    @property
    def half_bit(self) -> bool:
        return self.value in HALF_BIT_SCHEMES

    @property
    def display_name(self) -> str:
        return SCHEME_TITLES[self.value]

    @property
    def color(self) -> str:
        return SCHEME_COLORS[self.value]


class Segment(NamedTuple):
    bit_index:  int          # source bit, 0-based
    level:      int          # +1, 0 or -1
    transition: bool         # encoder boundary flag (see module header)
    half:       int | None = None   # 0/1 for the Manchester family, else None


class _FoldState(NamedTuple):
    level:        int        # current level / last mark polarity
    previous_bit: int | None


_Step = Callable[[_FoldState, int, int], "tuple[_FoldState, tuple[Segment, ...]]"]


def _invert(level: int) -> int:
    return LEVEL_LOW if level == LEVEL_HIGH else LEVEL_HIGH


def require_bits(bits: Sequence[int]) -> None:
    """Raise InvalidBitSequence unless `bits` is a non-empty sequence of 0/1."""
    if len(bits) == 0:
        raise InvalidBitSequence("bit sequence must not be empty")
    for i, b in enumerate(bits):
        if b not in (0, 1):
            raise InvalidBitSequence(f"bit {i} is {b!r}, expected 0 or 1")


def _fold(bits: Sequence[int], step: _Step, initial_level: int) -> tuple[Segment, ...]:
    require_bits(bits)
    state = _FoldState(level=initial_level, previous_bit=None)
    segments: list[Segment] = []
    for index, bit in enumerate(bits):
        state, emitted = step(state, index, bit)
        segments.extend(emitted)
    return tuple(segments)


# ── Per-scheme steps ─────────────────────────────────────────────────────────

def _nrzl_step(state, index, bit):
    level = LEVEL_HIGH if bit == 1 else LEVEL_LOW
    changed = state.previous_bit is not None and bit != state.previous_bit
    return _FoldState(level, bit), (Segment(index, level, changed),)


def _nrzi_step(state, index, bit):
    level = _invert(state.level) if bit == 1 else state.level
    return _FoldState(level, bit), (Segment(index, level, bit == 1),)


def _alternate_mark_step(mark_bit: int) -> _Step:
    """AMI when mark_bit == 1, Pseudoternary when mark_bit == 0."""

    def step(state, index, bit):
        polarity = state.level
        if bit == mark_bit:
            polarity = _invert(polarity)
            level = polarity
        else:
            level = LEVEL_ZERO
        return _FoldState(polarity, bit), (Segment(index, level, index > 0),)

    return step


def _manchester_step(state, index, bit):
    first, second = (LEVEL_LOW, LEVEL_HIGH) if bit == 1 else (LEVEL_HIGH, LEVEL_LOW)
    # Equal neighbouring bits meet at opposite levels: the boundary jumps
    repeat = state.previous_bit is not None and bit == state.previous_bit
    return _FoldState(second, bit), (
        Segment(index, first,  repeat, half=0),
        Segment(index, second, True,   half=1),
    )


def _diff_manchester_step(state, index, bit):
    transition_at_start = bit == 0
    start = _invert(state.level) if transition_at_start else state.level
    middle = _invert(start)
    return _FoldState(middle, bit), (
        Segment(index, start,  transition_at_start, half=0),
        Segment(index, middle, True,                half=1),
    )


# ── Public encoders ──────────────────────────────────────────────────────────

def encode_nrzl(bits: Sequence[int]) -> tuple[Segment, ...]:
    return _fold(bits, _nrzl_step, LEVEL_LOW)


def encode_nrzi(bits: Sequence[int]) -> tuple[Segment, ...]:
    return _fold(bits, _nrzi_step, NRZI_INITIAL_LEVEL)


def encode_ami(bits: Sequence[int]) -> tuple[Segment, ...]:
    return _fold(bits, _alternate_mark_step(1), AMI_INITIAL_POLARITY)


def encode_pseudoternary(bits: Sequence[int]) -> tuple[Segment, ...]:
    return _fold(bits, _alternate_mark_step(0), AMI_INITIAL_POLARITY)


def encode_manchester(bits: Sequence[int]) -> tuple[Segment, ...]:
    return _fold(bits, _manchester_step, LEVEL_LOW)


def encode_differential_manchester(bits: Sequence[int]) -> tuple[Segment, ...]:
    """
    Half 0 of each bit carries the transition-at-start flag (True for '0').
    Half 1 always transitions: the mid-bit inversion is unconditional.
    """
    return _fold(bits, _diff_manchester_step, DIFF_MANCHESTER_INITIAL)


_ENCODERS: dict[Scheme, Callable[[Sequence[int]], tuple[Segment, ...]]] = {
    Scheme.NRZL:            encode_nrzl,
    Scheme.NRZI:            encode_nrzi,
    Scheme.AMI:             encode_ami,
    Scheme.PSEUDO:          encode_pseudoternary,
    Scheme.MANCHESTER:      encode_manchester,
    Scheme.DIFF_MANCHESTER: encode_differential_manchester,
}

_unhandled = set(Scheme) - set(_ENCODERS)
if _unhandled:
    raise RuntimeError(f"no encoder registered for {sorted(s.value for s in _unhandled)}")


def encode(scheme: Scheme | str, bits: Sequence[int]) -> tuple[Segment, ...]:
    """
    Encode `bits` with one scheme.

    Args:
        scheme: a Scheme member or its selector string ("nrzl", "ami", ...).
        bits:   non-empty sequence of 0/1.

    Raises:
        UnknownScheme:      selector names no scheme.
        InvalidBitSequence: bits are empty or not all 0/1.
    """
    resolved = Scheme.lookup(scheme)
    if resolved is None:
        raise UnknownScheme(f"unknown encoding scheme: {scheme!r}")
    return _ENCODERS[resolved](bits)


def is_half_bit(scheme: Scheme | str) -> bool:
    return Scheme(scheme).half_bit


def segment_count(scheme: Scheme | str, bit_count: int) -> int:
    """Number of segments `encode(scheme, ...)` returns for `bit_count` bits."""
    return bit_count * 2 if is_half_bit(scheme) else bit_count
