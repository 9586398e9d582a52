# =============================================================================
# Line Encoding Signal Visualizer (LESV)
# =============================================================================
#
# ── ENCODE, THEN DRAW ─────────────────────────────────────────────────────────
#
# RESPONSIBLE for:
#   - Six line codes
#       NRZ-L, NRZI, AMI, Pseudoternary, Manchester, Differential Manchester.
#       Each turns a bit sequence into signal segments (level + boundary flag).
#   - Deterministic rendering
#       Same bits + same surface size → same draw list, same pixels.
#       Geometry is recomputed on every draw, nothing is cached.
#   - Receiver-side verification
#       Decoders recover the bits and flag bipolar violations or missing
#       mid-bit transitions.
#
# NOT responsible for:
#   - Input widgets, page layout, window resize events
#       The Tk tool and the browser page own these; they call in here.
#   - Persistence beyond the single last-input string.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   UI          → user types "10110010" and picks a scheme
#   SGM         → parse_bits() → (1,0,1,1,0,0,1,0) → encode("ami", bits)
#   SViz        → render() onto the surface registered for that view
#   Output      → grid, +V/0/-V labels, bit digits, stepped waveform
#
# ── LEVELS ────────────────────────────────────────────────────────────────────
#   +1 = +V (top line)   0 = rest (middle line)   -1 = -V (bottom line)
#
#   Scheme          bit 1            bit 0            memory
#   ─────────────   ──────────────   ──────────────   ───────────────────────
#   NRZ-L           +V               -V               none
#   NRZI            invert           hold             level, starts -V
#   AMI             alternate ±V     0                polarity, first mark +V
#   Pseudoternary   0                alternate ±V     polarity, first mark +V
#   Manchester      -V → +V          +V → -V          none
#   Diff. Manch.    no start edge    start edge       level, starts +V
#                   (both always invert at mid-bit)
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/constants.py          — selectors, levels, colours, geometry
#   SGM/bitstream.py          — parse / validate / random bit strings
#   SGM/line_encoder.py       — encoders + encode(scheme, bits)
#   SViz/renderer.py          — geometry, stepped path, render()
#   SViz/surfaces.py          — drawing surfaces + surface registry
#   SViz/visualizer_bridge.py — selector dispatch, JSON entry points
#   SViz/bridge_server.py     — Flask bridge for a browser page
#   SViz/input_cache.py       — last-input cache
#   SVM/line_decoder.py       — decoders / violation checks
#   SVM/validate.py           — self-validation suite
# =============================================================================

__version__ = "1.0.0"
