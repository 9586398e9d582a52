#!/usr/bin/env python3
# =============================================================================
# render_png.py — Render line-code waveforms to PNG
# =============================================================================
#
# Usage:
#   python tools/render_png.py 10110010
#   python tools/render_png.py 10110010 --scheme manchester
#   python tools/render_png.py 10110010 --out plots --width 1200 --height 240
#   python tools/render_png.py --random
#
# Output sections:
#   [1] Input            — bit string, length
#   [2] Segment table    — per scheme: level per bit / half-bit
#   [3] Files            — one <scheme>.png per rendered scheme
# =============================================================================

import sys, os, argparse

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from LESV.SMM.constants import SCHEME_ORDER, CANVAS_WIDTH, CANVAS_HEIGHT, PADDING
from LESV.SGM.bitstream import InvalidBitString, parse_bits, random_bits, bits_to_str
from LESV.SGM.line_encoder import Scheme, encode
from LESV.SViz.renderer import render
from LESV.SViz.surfaces import MatplotlibSurface

DIVIDER = "=" * 68


def _level_str(level: int) -> str:
    return {1: "+", 0: "0", -1: "-"}[level]


def run(bits, schemes, out_dir, width, height) -> bool:
    print(f"\n{DIVIDER}")
    print(f"  Line Encoding Renderer")
    print(DIVIDER)
    print(f"  Bits     : {bits_to_str(bits)}")
    print(f"  Length   : {len(bits)}")
    print(f"  Surface  : {width} x {height} px")

    if width <= 2 * PADDING:
        print(f"  [!!] Width must exceed {2 * PADDING} px to leave room for the plot")
        return False

    print(f"\n  -- Segment Table --")
    print(f"  {'Scheme':<16} levels")
    print(f"  {'-'*16} {'-'*40}")
    signals = {scheme: encode(scheme, bits) for scheme in schemes}
    for scheme in schemes:
        levels = "".join(_level_str(s.level) for s in signals[scheme])
        print(f"  {scheme.value:<16} {levels}")

    os.makedirs(out_dir, exist_ok=True)
    print(f"\n  -- Files --")
    for scheme in schemes:
        surface = MatplotlibSurface(width, height)
        render(scheme, bits, surface, signal=signals[scheme])
        path = os.path.join(out_dir, f"{scheme.value}.png")
        with open(path, "wb") as f:
            f.write(surface.to_png())
        print(f"  [PASS] {path}")
    print(f"{DIVIDER}\n")
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------
def main() -> None:
    parser = argparse.ArgumentParser(description="Render line-code waveforms to PNG")
    parser.add_argument("bits", nargs="?", help="Bit string, e.g. 10110010")
    parser.add_argument(
        "--random", action="store_true",
        help="Ignore BITS and use a random 4-11 bit sequence",
    )
    parser.add_argument(
        "--scheme", choices=list(SCHEME_ORDER) + ["all"], default="all",
        help="Scheme to render, default all",
    )
    parser.add_argument("--out", default=".", help="Output directory, default .")
    parser.add_argument("--width", type=int, default=CANVAS_WIDTH, help=f"default {CANVAS_WIDTH}")
    parser.add_argument("--height", type=int, default=CANVAS_HEIGHT, help=f"default {CANVAS_HEIGHT}")
    args = parser.parse_args()

    if args.random:
        bits = random_bits()
    else:
        try:
            bits = parse_bits(args.bits or "")
        except InvalidBitString as e:
            print(f"[!!] {e}")
            sys.exit(2)

    schemes = list(Scheme) if args.scheme == "all" else [Scheme(args.scheme)]
    ok = run(bits, schemes, args.out, args.width, args.height)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
