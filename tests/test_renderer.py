# test_renderer.py
#
# Plot geometry, visual transition rules and the draw sequence.
#
# What this suite verifies
# ------------------------
# 1) Geometry follows the surface size on every call
# 2) Visual transitions: encoder flag (NRZ), level comparison (AMI family),
#    half-to-half comparison (Manchester family)
# 3) Stepped paths are rectilinear (no diagonal ramps)
# 4) Draw order and primitive counts: grid, dividers, labels, signal
# 5) Missing / unready / too-narrow surfaces and unknown selectors draw nothing
# 6) Rendering the same input twice yields the same draw list

import random

import pytest

from LESV.SMM.constants import (
    PADDING, GRID_DASH, SIGNAL_LINE_WIDTH, COLOR_GRID, BIT_LABEL_RISE,
)
from LESV.SGM.bitstream import random_bits
from LESV.SGM.line_encoder import Scheme, InvalidBitSequence, encode
from LESV.SViz.renderer import (
    PlotPoint, plot_geometry, level_y, plot_points, stepped_path, render,
)
from LESV.SViz.surfaces import RecordingSurface


def ops(surface, op):
    return [c for c in surface.commands if c["op"] == op]


# ── Geometry ─────────────────────────────────────────────────────────────────

def test_bit_width_from_surface_size():
    g = plot_geometry(800, 200, 8)
    assert g.bit_width == 87.5
    assert g.padding == PADDING


def test_level_rows():
    g = plot_geometry(800, 200, 4)
    assert level_y(1, g) == 50
    assert level_y(0, g) == 100
    assert level_y(-1, g) == 150


def test_geometry_needs_at_least_one_bit():
    with pytest.raises(ValueError):
        plot_geometry(800, 200, 0)


# ── Visual transitions ───────────────────────────────────────────────────────

def test_nrzl_points_use_encoder_flag():
    g = plot_geometry(800, 200, 2)
    points = plot_points(Scheme.NRZL, encode(Scheme.NRZL, [1, 0]), g)
    assert points == [
        PlotPoint(50, 1, False), PlotPoint(400, 1, False),
        PlotPoint(400, -1, True), PlotPoint(750, -1, False),
    ]


def test_ami_zero_run_has_no_visual_jump():
    # the encoder flags the second boundary, the levels do not change
    g = plot_geometry(800, 200, 2)
    signal = encode(Scheme.AMI, [0, 0])
    assert [s.transition for s in signal] == [False, True]
    assert [p.transition for p in plot_points(Scheme.AMI, signal, g)] == [False] * 4


def test_ami_first_mark_rises_from_zero():
    g = plot_geometry(800, 200, 1)
    points = plot_points("ami", encode(Scheme.AMI, [1]), g)
    assert points[0].transition is True


def test_pseudoternary_compares_levels():
    g = plot_geometry(800, 200, 3)
    points = plot_points(Scheme.PSEUDO, encode(Scheme.PSEUDO, [1, 0, 0]), g)
    # levels 0, +1, -1
    assert [p.transition for p in points] == [False, False, True, False, True, False]


def test_manchester_points_per_half():
    g = plot_geometry(800, 200, 1)
    points = plot_points(Scheme.MANCHESTER, encode(Scheme.MANCHESTER, [1]), g)
    assert points == [
        PlotPoint(50, -1, False),
        PlotPoint(400, 1, True),
        PlotPoint(750, 1, False),
    ]


def test_manchester_first_half_never_jumps():
    g = plot_geometry(800, 200, 2)
    for bits in ([0, 0], [1, 1], [0, 1]):
        for scheme in (Scheme.MANCHESTER, Scheme.DIFF_MANCHESTER):
            assert plot_points(scheme, encode(scheme, bits), g)[0].transition is False


def test_diff_manchester_hold_has_no_boundary_jump():
    g = plot_geometry(800, 200, 2)
    points = plot_points(Scheme.DIFF_MANCHESTER, encode(Scheme.DIFF_MANCHESTER, [1, 1]), g)
    # levels +1 -1 | -1 +1 : start of bit 1 keeps -1
    assert [p.level for p in points] == [1, -1, -1, -1, 1, 1]
    assert [p.transition for p in points] == [False, True, False, False, True, False]


# ── Stepped path ─────────────────────────────────────────────────────────────

def test_stepped_path_nrzl():
    g = plot_geometry(800, 200, 2)
    path = stepped_path(plot_points(Scheme.NRZL, encode(Scheme.NRZL, [1, 0]), g), g)
    assert path == [(50, 50), (400, 50), (400, 50), (400, 150), (750, 150)]


def test_stepped_path_manchester():
    g = plot_geometry(800, 200, 1)
    path = stepped_path(plot_points(Scheme.MANCHESTER, encode(Scheme.MANCHESTER, [1]), g), g)
    assert path == [(50, 150), (400, 150), (400, 50), (750, 50)]


@pytest.mark.parametrize("scheme", list(Scheme))
def test_paths_are_rectilinear(scheme):
    rng = random.Random(7)
    for _ in range(100):
        bits = random_bits(rng)
        g = plot_geometry(800, 200, len(bits))
        path = stepped_path(plot_points(scheme, encode(scheme, bits), g), g)
        for (x0, y0), (x1, y1) in zip(path, path[1:]):
            assert x0 == x1 or y0 == y1
        assert path[0][0] == PADDING
        assert path[-1][0] == pytest.approx(800 - PADDING)


# ── Draw sequence ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("scheme", list(Scheme))
def test_primitive_counts(scheme):
    bits = [1, 0, 1, 1, 0]
    surface = RecordingSurface(800, 200)
    assert render(scheme, bits, surface) is True

    assert surface.commands[0]["op"] == "clear"
    lines = ops(surface, "line")
    texts = ops(surface, "text")
    # 3 reference lines + n+1 dividers + 1 waveform
    assert len(lines) == 3 + len(bits) + 1 + 1
    # +V / 0 / -V + one digit per bit
    assert len(texts) == 3 + len(bits)


def test_grid_lines_and_dividers():
    surface = RecordingSurface(800, 200)
    render("nrzl", [1, 0, 1, 1], surface)
    lines = ops(surface, "line")

    refs = lines[:3]
    assert [r["points"] for r in refs] == [
        [[50.0, 50.0], [750.0, 50.0]],
        [[50.0, 100.0], [750.0, 100.0]],
        [[50.0, 150.0], [750.0, 150.0]],
    ]
    assert all(r["color"] == COLOR_GRID and r["dash"] is None for r in refs)

    dividers = lines[3:8]
    assert [d["points"][0][0] for d in dividers] == [50.0, 225.0, 400.0, 575.0, 750.0]
    assert all(d["dash"] == list(GRID_DASH) for d in dividers)


def test_bit_labels_centred_above_plot():
    surface = RecordingSurface(800, 200)
    render("ami", [1, 0], surface)
    labels = [t for t in ops(surface, "text") if t["align"] == "center"]
    assert [t["text"] for t in labels] == ["1", "0"]
    assert [t["x"] for t in labels] == [225.0, 575.0]
    assert all(t["y"] == PADDING - BIT_LABEL_RISE for t in labels)


def test_axis_labels():
    surface = RecordingSurface(800, 200)
    render("ami", [1], surface)
    axis = [t["text"] for t in ops(surface, "text") if t["align"] == "right"]
    assert axis == ["+V", "0", "-V"]


def test_signal_drawn_last_with_scheme_colour():
    surface = RecordingSurface(800, 200)
    render(Scheme.MANCHESTER, [1, 0], surface)
    signal = surface.commands[-1]
    assert signal["op"] == "line"
    assert signal["color"] == Scheme.MANCHESTER.color
    assert signal["width"] == SIGNAL_LINE_WIDTH
    assert signal["rounded"] is True


def test_colour_override():
    surface = RecordingSurface(800, 200)
    render("nrzi", [1], surface, color="#123456")
    assert surface.commands[-1]["color"] == "#123456"


def test_geometry_recomputed_after_resize():
    surface = RecordingSurface(800, 200)
    render("nrzl", [1, 0], surface)
    surface.width = 1050
    render("nrzl", [1, 0], surface)
    dividers = ops(surface, "line")[3:6]
    assert [d["points"][0][0] for d in dividers] == [50.0, 525.0, 1000.0]


# ── No-op cases ──────────────────────────────────────────────────────────────

def test_missing_surface_is_noop():
    assert render("nrzl", [1, 0], None) is False


def test_detached_surface_is_noop():
    surface = RecordingSurface()
    surface.detach()
    assert render("nrzl", [1, 0], surface) is False
    assert surface.commands == []


def test_unknown_selector_draws_nothing():
    surface = RecordingSurface()
    assert render("rz", [1, 0], surface) is False
    assert surface.commands == []


def test_surface_without_plot_room_is_noop():
    surface = RecordingSurface(2 * PADDING, 200)
    assert render("ami", [1, 0], surface) is False
    assert surface.commands == []


def test_invalid_bits_raise_before_clearing():
    surface = RecordingSurface()
    render("nrzl", [1], surface)
    before = list(surface.commands)
    with pytest.raises(InvalidBitSequence):
        render("nrzl", [], surface)
    assert surface.commands == before


# ── Idempotence ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("scheme", list(Scheme))
def test_render_is_idempotent(scheme):
    bits = [1, 1, 0, 1, 0, 0, 1]
    surface = RecordingSurface(640, 180)
    render(scheme, bits, surface)
    first = surface.to_json()
    render(scheme, bits, surface)
    assert surface.to_json() == first

    other = RecordingSurface(640, 180)
    render(scheme, bits, other)
    assert other.to_json() == first


# ── Pre-encoded signal ───────────────────────────────────────────────────────

def test_pre_encoded_signal_matches_encoding_in_place():
    bits = [1, 0, 1, 1]
    direct = RecordingSurface(800, 200)
    render("ami", bits, direct)
    given = RecordingSurface(800, 200)
    assert render("ami", bits, given, signal=encode(Scheme.AMI, bits)) is True
    assert given.commands == direct.commands


def test_pre_encoded_half_bit_signal():
    bits = [0, 1, 1]
    surface = RecordingSurface(800, 200)
    signal = encode(Scheme.MANCHESTER, bits)
    assert render("manchester", bits, surface, signal=signal) is True
    assert surface.commands[-1]["points"][-1][0] == pytest.approx(800 - PADDING)


@pytest.mark.parametrize("scheme,bits,signal_bits", [
    ("ami", [1, 0, 1, 1], [1, 0]),
    ("nrzl", [1], [1, 0]),
    ("manchester", [1, 0], [1]),
])
def test_signal_length_mismatch_rejected(scheme, bits, signal_bits):
    surface = RecordingSurface(800, 200)
    with pytest.raises(InvalidBitSequence):
        render(scheme, bits, surface, signal=encode(scheme, signal_bits))
    assert surface.commands == []


def test_pre_encoded_signal_with_empty_bits_rejected():
    surface = RecordingSurface(800, 200)
    with pytest.raises(InvalidBitSequence):
        render("ami", [], surface, signal=encode(Scheme.AMI, [1]))
    assert surface.commands == []


def test_pre_encoded_signal_with_non_binary_bits_rejected():
    with pytest.raises(InvalidBitSequence):
        render("nrzl", [1, 2], RecordingSurface(), signal=encode(Scheme.NRZL, [1, 0]))
