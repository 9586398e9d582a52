#!/usr/bin/env python3
# =============================================================================
# line_decoder.py — Line Code Decoder
# =============================================================================
#
# Inverse of the encoders in LESV/SGM/line_encoder.py.  Takes an
# EncodedSignal and recovers the bits, reporting anything a receiver would
# flag instead of raising:
#
#   - level outside the scheme's alphabet       (e.g. 0 in NRZ-L)
#   - bipolar violation                         (AMI / Pseudoternary: two
#                                                consecutive marks with the
#                                                same polarity)
#   - missing mid-bit transition                (Manchester family)
#   - half-segment pairing broken               (Manchester family)
#
# Receiver memory starts from the same initial levels as the encoders.
# =============================================================================

from __future__ import annotations
from typing import NamedTuple, Sequence

from LESV.SMM.constants import (
    LEVEL_HIGH, LEVEL_ZERO, LEVEL_LOW,
    NRZI_INITIAL_LEVEL, AMI_INITIAL_POLARITY, DIFF_MANCHESTER_INITIAL,
)
from LESV.SGM.line_encoder import Scheme, Segment

_BINARY_LEVELS = (LEVEL_HIGH, LEVEL_LOW)


class DecodeError(NamedTuple):
    bit_index: int
    reason:    str


class LineDecoder:
    """
    Decoder for one scheme.

    Usage:
        dec = LineDecoder("ami")
        bits, errors = dec.decode(encode_ami([1, 1, 0, 1]))
    """

    def __init__(self, scheme: Scheme | str) -> None:
        self.scheme = Scheme(scheme)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def decode(self, signal: Sequence[Segment]) -> tuple[list[int], list[DecodeError]]:
        bits:   list[int]         = []
        errors: list[DecodeError] = []
        if self.scheme.half_bit:
            self._decode_halves(signal, bits, errors)
        else:
            self._decode_levels(signal, bits, errors)
        return bits, errors

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _decode_levels(self, signal, bits, errors) -> None:
        scheme = self.scheme
        previous = NRZI_INITIAL_LEVEL
        last_mark = AMI_INITIAL_POLARITY
        mark_bit = 0 if scheme is Scheme.PSEUDO else 1

        for seg in signal:
            level, idx = seg.level, seg.bit_index

            if scheme in (Scheme.NRZL, Scheme.NRZI):
                if level not in _BINARY_LEVELS:
                    errors.append(DecodeError(idx, f"level {level} not allowed in {scheme.value}"))
                    continue
                if scheme is Scheme.NRZL:
                    bits.append(1 if level == LEVEL_HIGH else 0)
                else:
                    bits.append(1 if level != previous else 0)
                    previous = level
                continue

            # AMI / Pseudoternary
            if level == LEVEL_ZERO:
                bits.append(1 - mark_bit)
            elif level in _BINARY_LEVELS:
                if level == last_mark:
                    errors.append(DecodeError(
                        idx, f"bipolar violation: mark repeats polarity {level:+d}"))
                last_mark = level
                bits.append(mark_bit)
            else:
                errors.append(DecodeError(idx, f"level {level} not allowed in {scheme.value}"))

    def _decode_halves(self, signal, bits, errors) -> None:
        previous = DIFF_MANCHESTER_INITIAL

        for i in range(0, len(signal), 2):
            first = signal[i]
            if i + 1 >= len(signal):
                errors.append(DecodeError(first.bit_index, "trailing half-segment without a partner"))
                break
            second = signal[i + 1]
            if (first.half, second.half) != (0, 1) or first.bit_index != second.bit_index:
                errors.append(DecodeError(first.bit_index, "half-segments out of order"))
                continue
            if first.level not in _BINARY_LEVELS or second.level not in _BINARY_LEVELS:
                errors.append(DecodeError(first.bit_index, "zero level in a two-level code"))
                continue
            if first.level == second.level:
                errors.append(DecodeError(first.bit_index, "missing mid-bit transition"))
                continue

            if self.scheme is Scheme.MANCHESTER:
                bits.append(1 if first.level == LEVEL_LOW else 0)
            else:
                bits.append(0 if first.level != previous else 1)
                previous = second.level
