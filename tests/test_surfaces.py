# test_surfaces.py
#
# Surface implementations and the id registry.

import numpy as np
import pytest

from LESV.SMM.constants import SURFACE_BACKGROUND
from LESV.SViz.renderer import render
from LESV.SViz.surfaces import (
    split_rgba, blend,
    RecordingSurface, MatplotlibSurface, TkCanvasSurface, SurfaceRegistry,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def _rgb(color):
    return [int(color[i:i + 2], 16) for i in (1, 3, 5)]


# ── Colour helpers ───────────────────────────────────────────────────────────

def test_split_rgba():
    assert split_rgba("#ff6b6b") == ("#ff6b6b", 1.0)
    rgb, alpha = split_rgba("#ffffff99")
    assert rgb == "#ffffff"
    assert alpha == pytest.approx(0x99 / 255)


@pytest.mark.parametrize("bad", ["ff6b6b", "#fff", "#ff6b6b1"])
def test_split_rgba_rejects_malformed(bad):
    with pytest.raises(ValueError):
        split_rgba(bad)


def test_blend():
    assert blend("#abcdef", "#000000") == "#abcdef"
    assert blend("#ffffff80", "#000000") == "#808080"
    assert blend("#ffffff00", "#1e1e2e") == "#1e1e2e"


# ── RecordingSurface ─────────────────────────────────────────────────────────

def test_recording_surface_commands():
    s = RecordingSurface(300, 100)
    s.clear()
    s.line([(0, 0), (10, 5)], "#ffffff", 2, dash=(5, 5))
    s.text(1, 2, "+V", "#ffffff99", ("sans", 12), "right")
    assert s.commands == [
        {"op": "clear", "width": 300, "height": 100},
        {"op": "line", "points": [[0.0, 0.0], [10.0, 5.0]], "color": "#ffffff",
         "width": 2, "dash": [5, 5], "rounded": False},
        {"op": "text", "x": 1.0, "y": 2.0, "text": "+V", "color": "#ffffff99",
         "font": ["sans", 12], "align": "right"},
    ]


def test_recording_surface_clear_drops_history():
    s = RecordingSurface()
    s.line([(0, 0), (1, 1)], "#000000")
    s.clear()
    assert len(s.commands) == 1


def test_recording_surface_json_round_trips_as_dict():
    import json
    s = RecordingSurface(400, 120)
    render("ami", [1, 0, 1], s)
    assert json.loads(s.to_json()) == s.to_dict()
    assert s.to_dict()["width"] == 400


def test_detach():
    s = RecordingSurface()
    assert s.is_ready()
    s.detach()
    assert not s.is_ready()


# ── MatplotlibSurface ────────────────────────────────────────────────────────

@pytest.fixture
def surface():
    s = MatplotlibSurface(800, 200)
    yield s
    s.close()


def test_pixel_shape(surface):
    pixels = surface.to_pixels()
    assert pixels.shape == (200, 800, 4)
    assert pixels.dtype == np.uint8


def test_blank_surface_is_background(surface):
    pixels = surface.to_pixels()
    assert (pixels[..., :3] == _rgb(SURFACE_BACKGROUND)).all()
    assert (pixels[..., 3] == 255).all()


def test_render_marks_pixels(surface):
    render("nrzl", [1, 0, 1, 1], surface)
    pixels = surface.to_pixels()
    assert (pixels[..., :3] != _rgb(SURFACE_BACKGROUND)).any()


@pytest.mark.parametrize("scheme", ["nrzl", "ami", "diffmanchester"])
def test_pixels_identical_across_renders(scheme, surface):
    bits = [1, 0, 0, 1, 1, 0]
    render(scheme, bits, surface)
    first = surface.to_pixels()
    render(scheme, bits, surface)
    assert np.array_equal(surface.to_pixels(), first)

    other = MatplotlibSurface(800, 200)
    render(scheme, bits, other)
    assert np.array_equal(other.to_pixels(), first)
    other.close()


def test_png_bytes(surface):
    render("manchester", [1, 0], surface)
    assert surface.to_png().startswith(PNG_SIGNATURE)


def test_closed_surface_not_ready():
    s = MatplotlibSurface(200, 100)
    s.close()
    assert not s.is_ready()
    assert render("nrzl", [1], s) is False


# ── TkCanvasSurface ──────────────────────────────────────────────────────────

class FakeCanvas:
    """Records the tkinter.Canvas calls the adapter makes."""

    def __init__(self, width=800, height=200):
        self.options = {"width": str(width), "height": str(height)}
        self.items = []

    def cget(self, key):
        return self.options[key]

    def delete(self, tag):
        self.items.append(("delete", tag))

    def create_line(self, *coords, **opts):
        self.items.append(("line", coords, opts))

    def create_text(self, x, y, **opts):
        self.items.append(("text", (x, y), opts))


def test_tk_surface_size_from_canvas():
    s = TkCanvasSurface(FakeCanvas(640, 150))
    assert (s.width, s.height) == (640, 150)


def test_tk_line_flattens_points_and_blends():
    canvas = FakeCanvas()
    s = TkCanvasSurface(canvas, background="#000000")
    s.line([(1, 2), (3, 4)], "#ffffff80", 1, dash=(5, 5))
    kind, coords, opts = canvas.items[0]
    assert kind == "line"
    assert coords == (1, 2, 3, 4)
    assert opts == {"fill": "#808080", "width": 1, "dash": (5, 5)}


def test_tk_rounded_line():
    canvas = FakeCanvas()
    TkCanvasSurface(canvas).line([(0, 0), (5, 0)], "#ff6b6b", 3, rounded=True)
    opts = canvas.items[0][2]
    assert opts["capstyle"] == "round" and opts["joinstyle"] == "round"
    assert opts["fill"] == "#ff6b6b"


def test_tk_text_anchor_and_pixel_font():
    canvas = FakeCanvas()
    TkCanvasSurface(canvas).text(10, 20, "1", "#ffffff", ("mono", 14), "center")
    kind, xy, opts = canvas.items[0]
    assert xy == (10, 20)
    assert opts["anchor"] == "s"
    assert opts["font"] == ("Courier New", -14)
    assert opts["text"] == "1"


def test_tk_clear_deletes_all():
    canvas = FakeCanvas()
    TkCanvasSurface(canvas).clear()
    assert canvas.items == [("delete", "all")]


# ── Registry ─────────────────────────────────────────────────────────────────

def test_registry():
    reg = SurfaceRegistry()
    a, b = RecordingSurface(), RecordingSurface()
    reg.register("canvas-nrzl", a)
    reg.register("canvas-ami", b)
    assert reg.get("canvas-nrzl") is a
    assert "canvas-ami" in reg
    assert len(reg) == 2
    assert reg.ids() == ["canvas-nrzl", "canvas-ami"]

    reg.remove("canvas-ami")
    reg.remove("canvas-ami")
    assert reg.get("canvas-ami") is None
    assert len(reg) == 1


def test_registry_unknown_id_is_none():
    assert SurfaceRegistry().get("canvas-rz") is None
