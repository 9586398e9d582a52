# =============================================================================
# renderer.py — Waveform Renderer
# =============================================================================
#
# Draws one EncodedSignal onto a surface (see surfaces.py):
#
#        +V ─ ─ ─ ─ ─ ─ ─ ─ ─ ─ ─ ─     three reference lines
#         0 ─ ─ ─ ─ ─ ─ ─ ─ ─ ─ ─ ─     bit_count + 1 dashed dividers
#        -V ─ ─ ─ ─ ─ ─ ─ ─ ─ ─ ─ ─     one digit label above each bit
#
# GEOMETRY (recomputed on every call, never cached):
#   bit_width = (width - 2 * padding) / bit_count
#   y(+1) = padding,  y(0) = height / 2,  y(-1) = height - padding
#
# VISUAL TRANSITIONS:
#   NRZ-L, NRZI        use the encoder's Segment.transition flag
#   AMI, Pseudoternary compare each level with the previous segment's level
#                      (the first segment is compared with 0)
#   Manchester family  compare each half with the previous half; the first
#                      half never transitions
#
#   A flagged point draws horizontal → vertical → horizontal, so the result is
#   a stepped square wave, never a diagonal ramp.
#
# MISSING SURFACE:
#   render() returns False and draws nothing when the surface is None, not
#   ready, too narrow for the plot area, or the selector is unknown.
# =============================================================================

from __future__ import annotations
from typing import NamedTuple, Sequence

from LESV.SMM.constants import (
    LEVEL_HIGH, LEVEL_ZERO,
    PADDING, COLOR_GRID, COLOR_TEXT,
    GRID_LINE_WIDTH, GRID_DASH, SIGNAL_LINE_WIDTH,
    AXIS_LABEL_OFFSET, AXIS_LABEL_NUDGE, BIT_LABEL_RISE,
    AXIS_FONT, BIT_FONT, AXIS_LABELS,
)
from LESV.SGM.line_encoder import (
    Scheme, Segment, InvalidBitSequence, encode, require_bits, segment_count,
)


class PlotGeometry(NamedTuple):
    width:     float
    height:    float
    padding:   float
    bit_width: float


class PlotPoint(NamedTuple):
    x:          float
    level:      int
    transition: bool     # visual jump at x from the previous point's level


# Schemes whose visible jump is decided by comparing levels, not by the
# encoder's boundary flag
_LEVEL_COMPARED = frozenset({Scheme.AMI, Scheme.PSEUDO})


def plot_geometry(width: float, height: float, bit_count: int,
                  padding: float = PADDING) -> PlotGeometry:
    if bit_count < 1:
        raise ValueError(f"bit_count must be >= 1, got {bit_count}")
    return PlotGeometry(width, height, padding, (width - 2 * padding) / bit_count)


def level_y(level: int, geometry: PlotGeometry) -> float:
    if level == LEVEL_HIGH:
        return geometry.padding
    if level == LEVEL_ZERO:
        return geometry.height / 2
    return geometry.height - geometry.padding


# ── Segments → plot points ───────────────────────────────────────────────────

def _full_bit_points(signal, geometry, compare_levels):
    points: list[PlotPoint] = []
    for i, seg in enumerate(signal):
        x = geometry.padding + seg.bit_index * geometry.bit_width
        if compare_levels:
            previous = signal[i - 1].level if i > 0 else LEVEL_ZERO
            jump = seg.level != previous
        else:
            jump = seg.transition
        points.append(PlotPoint(x, seg.level, jump))
        points.append(PlotPoint(x + geometry.bit_width, seg.level, False))
    return points


def _half_bit_points(signal, geometry):
    half_width = geometry.bit_width / 2
    points: list[PlotPoint] = []
    for i, seg in enumerate(signal):
        x = geometry.padding + seg.bit_index * geometry.bit_width + seg.half * half_width
        jump = i > 0 and seg.level != signal[i - 1].level
        points.append(PlotPoint(x, seg.level, jump))
        if seg.half == 1:
            # close the bit period
            points.append(PlotPoint(x + half_width, seg.level, False))
    return points


def plot_points(scheme: Scheme | str, signal: Sequence[Segment],
                geometry: PlotGeometry) -> list[PlotPoint]:
    """Resolve segments to pixel x-positions and visual transition flags."""
    scheme = Scheme(scheme)
    if scheme.half_bit:
        return _half_bit_points(signal, geometry)
    return _full_bit_points(signal, geometry, scheme in _LEVEL_COMPARED)


def stepped_path(points: Sequence[PlotPoint],
                 geometry: PlotGeometry) -> list[tuple[float, float]]:
    """
    Pixel vertices of the waveform polyline.

    A flagged point first extends the previous level horizontally to its x,
    then jumps vertically.  The first point only positions the pen.
    """
    path: list[tuple[float, float]] = []
    for i, p in enumerate(points):
        if i > 0 and p.transition:
            path.append((p.x, level_y(points[i - 1].level, geometry)))
        path.append((p.x, level_y(p.level, geometry)))
    return path


# ── Drawing ──────────────────────────────────────────────────────────────────

def draw_grid(surface, bits: Sequence[int], geometry: PlotGeometry) -> None:
    g = geometry
    left, right = g.padding, g.width - g.padding
    top, bottom = g.padding, g.height - g.padding

    for level, _ in AXIS_LABELS:
        y = level_y(level, g)
        surface.line([(left, y), (right, y)], COLOR_GRID, GRID_LINE_WIDTH)

    for i in range(len(bits) + 1):
        x = g.padding + i * g.bit_width
        surface.line([(x, top), (x, bottom)], COLOR_GRID, GRID_LINE_WIDTH, dash=GRID_DASH)

    for level, label in AXIS_LABELS:
        surface.text(g.padding - AXIS_LABEL_OFFSET, level_y(level, g) + AXIS_LABEL_NUDGE,
                     label, COLOR_TEXT, AXIS_FONT, "right")

    for i, bit in enumerate(bits):
        x = g.padding + i * g.bit_width + g.bit_width / 2
        surface.text(x, g.padding - BIT_LABEL_RISE, str(bit), COLOR_TEXT, BIT_FONT, "center")


def draw_signal(surface, path: Sequence[tuple[float, float]], color: str) -> None:
    if len(path) < 2:
        return
    surface.line(path, color, SIGNAL_LINE_WIDTH, rounded=True)


def render(
    scheme,
    bits: Sequence[int],
    surface,
    color: str | None = None,
    signal: Sequence[Segment] | None = None,
) -> bool:
    """
    Encode (unless `signal` is given) and draw one scheme onto `surface`.

    Returns True if something was drawn.  A missing or unready surface, a
    plot area with no room, or an unknown selector is a silent no-op that
    returns False.  Invalid bits, or a `signal` whose segment count does not
    match `bits` under this scheme, raise InvalidBitSequence.
    """
    if surface is None or not surface.is_ready():
        return False
    resolved = Scheme.lookup(scheme)
    if resolved is None:
        return False

    if signal is None:
        signal = encode(resolved, bits)
    else:
        require_bits(bits)
        expected = segment_count(resolved, len(bits))
        if len(signal) != expected:
            raise InvalidBitSequence(
                f"{resolved.value} signal has {len(signal)} segments, "
                f"expected {expected} for {len(bits)} bits")
    geometry = plot_geometry(surface.width, surface.height, len(bits))
    if geometry.bit_width <= 0:
        return False

    surface.clear()
    draw_grid(surface, bits, geometry)
    path = stepped_path(plot_points(resolved, signal, geometry), geometry)
    draw_signal(surface, path, color or resolved.color)
    return True
