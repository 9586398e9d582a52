#!/usr/bin/env python3
# =============================================================================
# validate.py — LESV Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m LESV.SVM.validate
#             or python LESV/SVM/validate.py (from project root)
#
# Tests:
#   1. Constants integrity   — selectors, colours, geometry are consistent
#   2. Encoders              — reference examples, lengths, level alphabet
#   3. Renderer              — geometry, stepped path, no-op safety, repeatability
#   4. Decoder cross-check   — every encoder's output decodes back to its bits
# =============================================================================

import sys
import os
import random

# Allow running from project root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from LESV.SMM.constants import (
    SCHEME_ORDER, SCHEME_COLORS, SCHEME_TITLES, HALF_BIT_SCHEMES,
    LEVELS, PADDING, CANVAS_WIDTH, CANVAS_HEIGHT,
    RANDOM_MIN_BITS, RANDOM_MAX_BITS,
)
from LESV.SGM.bitstream import parse_bits, random_bits, InvalidBitString
from LESV.SGM.line_encoder import Scheme, encode, segment_count
from LESV.SViz.renderer import render, plot_geometry, plot_points, stepped_path
from LESV.SViz.surfaces import RecordingSurface, MatplotlibSurface, SurfaceRegistry
from LESV.SViz.visualizer_bridge import draw_single_encoding
from LESV.SVM.line_decoder import LineDecoder

PASS = "[PASS]"
FAIL = "[FAIL]"
INFO = "[INFO]"

failures = 0

def check(label: str, condition: bool, detail: str = "") -> bool:
    global failures
    if condition:
        print(f"  {PASS} {label}")
    else:
        print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}")
        failures += 1
    return condition


def levels_of(scheme, text):
    return [s.level for s in encode(scheme, parse_bits(text))]


# =============================================================================
# TEST 1 — Constants Integrity
# =============================================================================
print("\n" + "="*60)
print("TEST 1 — Constants Integrity")
print("="*60)

check("Six scheme selectors",            len(SCHEME_ORDER) == 6)
check("Selectors unique",                len(set(SCHEME_ORDER)) == 6)
check("Enum matches selector list",      {s.value for s in Scheme} == set(SCHEME_ORDER))
check("Every scheme has a colour",       set(SCHEME_COLORS) == set(SCHEME_ORDER))
check("Every scheme has a title",        set(SCHEME_TITLES) == set(SCHEME_ORDER))
check("Half-bit schemes are selectors",  HALF_BIT_SCHEMES <= set(SCHEME_ORDER))
check("Levels = {-1, 0, +1}",            LEVELS == {-1, 0, 1})
check("Plot area has room",              CANVAS_WIDTH > 2 * PADDING and CANVAS_HEIGHT > 2 * PADDING)
check("Random length range sane",        1 <= RANDOM_MIN_BITS <= RANDOM_MAX_BITS)


# =============================================================================
# TEST 2 — Encoders
# =============================================================================
print("\n" + "="*60)
print("TEST 2 — Encoders")
print("="*60)

nrzl = encode("nrzl", parse_bits("1011"))
check("NRZ-L 1011 levels",      [s.level for s in nrzl] == [1, -1, 1, 1])
check("NRZ-L 1011 transitions", [s.transition for s in nrzl] == [False, True, True, False])
check("NRZI 1011",              levels_of("nrzi", "1011") == [1, 1, -1, 1])
check("AMI 1101",               levels_of("ami", "1101") == [1, -1, 0, 1])
check("Pseudoternary 0010",     levels_of("pseudo", "0010") == [1, -1, 0, 1])
check("Manchester 10",          levels_of("manchester", "10") == [-1, 1, 1, -1])
check("Diff. Manchester 01",    levels_of("diffmanchester", "01") == [-1, 1, 1, -1])

ami = encode("ami", parse_bits("1101"))
check("AMI boundary flag set for every bit after the first",
      [s.transition for s in ami] == [False, True, True, True])

rng = random.Random(4800)
samples = [random_bits(rng) for _ in range(200)]
check("Random lengths within range",
      all(RANDOM_MIN_BITS <= len(b) <= RANDOM_MAX_BITS for b in samples))

for scheme in Scheme:
    lengths_ok = all(len(encode(scheme, b)) == segment_count(scheme, len(b)) for b in samples)
    levels_ok  = all(s.level in LEVELS for b in samples for s in encode(scheme, b))
    repeat_ok  = all(encode(scheme, b) == encode(scheme, b) for b in samples)
    check(f"{scheme.value:<15} length / level / determinism",
          lengths_ok and levels_ok and repeat_ok,
          f"length={lengths_ok} level={levels_ok} repeat={repeat_ok}")

try:
    parse_bits("10a1")
    check("Invalid text rejected", False, "no exception")
except InvalidBitString:
    check("Invalid text rejected", True)

try:
    encode("nrzl", ())
    check("Empty sequence rejected", False, "no exception")
except ValueError:
    check("Empty sequence rejected", True)


# =============================================================================
# TEST 3 — Renderer
# =============================================================================
print("\n" + "="*60)
print("TEST 3 — Renderer")
print("="*60)

bits = parse_bits("10110010")
geo  = plot_geometry(CANVAS_WIDTH, CANVAS_HEIGHT, len(bits))
check("bit_width = (width - 2*padding) / n",
      geo.bit_width == (CANVAS_WIDTH - 2 * PADDING) / len(bits))

path = stepped_path(plot_points("nrzl", encode("nrzl", bits), geo), geo)
diagonal = [(a, b) for a, b in zip(path, path[1:]) if a[0] != b[0] and a[1] != b[1]]
check("NRZ-L path has no diagonal edges", not diagonal, f"{len(diagonal)} diagonal edges")

for scheme in Scheme:
    path = stepped_path(plot_points(scheme, encode(scheme, bits), geo), geo)
    diagonal = [(a, b) for a, b in zip(path, path[1:]) if a[0] != b[0] and a[1] != b[1]]
    check(f"{scheme.value:<15} stepped path is rectilinear", not diagonal)

rec = RecordingSurface()
check("Render onto recording surface", render("ami", bits, rec))
lines = [c for c in rec.commands if c["op"] == "line"]
dashed = [c for c in lines if c["dash"]]
check("Grid: n + 1 dashed dividers", len(dashed) == len(bits) + 1, f"got {len(dashed)}")
check("Grid: 3 reference lines", len(lines) - len(dashed) - 1 == 3)

first = list(rec.commands)
render("ami", bits, rec)
check("Second render gives identical draw list", rec.commands == first)

check("None surface is a no-op",      render("ami", bits, None) is False)
registry = SurfaceRegistry()
check("Unknown surface id is a no-op", draw_single_encoding(bits, "ami", registry) is False)
registry.register("canvas-single", RecordingSurface())
check("Unknown selector is a no-op",   draw_single_encoding(bits, "rz", registry) is False)
gone = RecordingSurface()
gone.detach()
check("Detached surface is a no-op",   render("ami", bits, gone) is False and gone.commands == [])

mpl = MatplotlibSurface(CANVAS_WIDTH, CANVAS_HEIGHT)
render("diffmanchester", bits, mpl)
px_a = mpl.to_pixels()
render("diffmanchester", bits, mpl)
px_b = mpl.to_pixels()
check("Pixel output identical on redraw", (px_a == px_b).all())
check("Pixel buffer matches surface size", px_a.shape == (CANVAS_HEIGHT, CANVAS_WIDTH, 4),
      f"shape {px_a.shape}")


# =============================================================================
# TEST 4 — Decoder cross-check
# =============================================================================
print("\n" + "="*60)
print("TEST 4 — Decoder cross-check")
print("="*60)

for scheme in Scheme:
    dec = LineDecoder(scheme)
    bad = 0
    for b in samples:
        decoded, errors = dec.decode(encode(scheme, b))
        if tuple(decoded) != b or errors:
            bad += 1
    print(f"  {INFO} {scheme.display_name:<24} {len(samples) - bad}/{len(samples)} sequences recovered")
    check(f"{scheme.value:<15} decodes back to source bits", bad == 0)


# =============================================================================
# Summary
# =============================================================================
print("\n" + "="*60)
if failures == 0:
    print(f"  ALL TESTS PASSED")
else:
    print(f"  {failures} TEST(S) FAILED")
print("="*60 + "\n")
sys.exit(0 if failures == 0 else 1)
