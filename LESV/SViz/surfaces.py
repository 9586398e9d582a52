# =============================================================================
# surfaces.py — Drawing Surfaces
# =============================================================================
#
# The renderer draws through a very small surface interface:
#
#   width, height                       pixel size (y grows downward)
#   is_ready()                          False = detached / destroyed / unsized
#   clear()
#   line(points, color, width=1, dash=None, rounded=False)
#   text(x, y, label, color, font, align)   font = (family, px), family is
#                                           "sans" or "mono"; align is
#                                           "left" | "center" | "right";
#                                           y is the text baseline
#
# Colours are "#rrggbb" or "#rrggbbaa".
#
# Implementations:
#   RecordingSurface   — keeps a JSON-serialisable draw list (browser replay,
#                        tests)
#   MatplotlibSurface  — off-screen Agg figure → RGBA pixels / PNG bytes
#   TkCanvasSurface    — a live tkinter.Canvas (desktop visualizer)
#
# SurfaceRegistry maps surface ids ("canvas-nrzl", "canvas-single", ...) to
# surfaces.  Unknown ids resolve to None, which the renderer treats as
# "nothing to draw on".
# =============================================================================

from __future__ import annotations
import io
import json

import numpy as np
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg

from LESV.SMM.constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT,
    SURFACE_BACKGROUND, RENDER_DPI,
)


def split_rgba(color: str) -> tuple[str, float]:
    """'#rrggbbaa' → ('#rrggbb', alpha 0..1).  '#rrggbb' has alpha 1.0."""
    if not color.startswith("#") or len(color) not in (7, 9):
        raise ValueError(f"colour must be #rrggbb or #rrggbbaa, got {color!r}")
    if len(color) == 7:
        return color, 1.0
    return color[:7], int(color[7:9], 16) / 255


def blend(color: str, background: str) -> str:
    """Flatten an alpha colour over an opaque background (for Tk)."""
    rgb, alpha = split_rgba(color)
    if alpha >= 1.0:
        return rgb
    bg, _ = split_rgba(background)
    mixed = []
    for i in (1, 3, 5):
        fg_c = int(rgb[i:i + 2], 16)
        bg_c = int(bg[i:i + 2], 16)
        mixed.append(round(fg_c * alpha + bg_c * (1 - alpha)))
    return "#" + "".join(f"{c:02x}" for c in mixed)


# ── Draw-list recorder ───────────────────────────────────────────────────────

class RecordingSurface:
    """
    Records every primitive as a plain dict.

    The draw list is what the browser bridge ships to a JS canvas, and what
    the tests compare when checking that two renders are identical.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
        self.width  = width
        self.height = height
        self.commands: list[dict] = []
        self._attached = True

    def is_ready(self) -> bool:
        return self._attached

    def detach(self) -> None:
        """Simulate the surface going away (closed tab, destroyed widget)."""
        self._attached = False

    def clear(self) -> None:
        self.commands = [{"op": "clear", "width": self.width, "height": self.height}]

    def line(self, points, color, width=1, dash=None, rounded=False) -> None:
        self.commands.append({
            "op":      "line",
            "points":  [[float(x), float(y)] for x, y in points],
            "color":   color,
            "width":   width,
            "dash":    list(dash) if dash else None,
            "rounded": rounded,
        })

    def text(self, x, y, label, color, font, align) -> None:
        self.commands.append({
            "op":    "text",
            "x":     float(x),
            "y":     float(y),
            "text":  label,
            "color": color,
            "font":  list(font),
            "align": align,
        })

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "commands": self.commands}

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


# ── Off-screen raster (matplotlib Agg) ───────────────────────────────────────

class MatplotlibSurface:
    """
    Pixel-exact off-screen surface.

    One figure of `width x height` pixels with a single axes spanning it;
    data coordinates equal pixel coordinates, origin top-left.
    """

    _FAMILIES = {"sans": "sans-serif", "mono": "monospace"}
    _ALIGN    = {"left": "left", "center": "center", "right": "right"}

    def __init__(
        self,
        width:  int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        dpi:    int = RENDER_DPI,
        background: str = SURFACE_BACKGROUND,
    ) -> None:
        self.width      = int(width)
        self.height     = int(height)
        self.dpi        = dpi
        self.background = background
        self.figure  = Figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi,
                              facecolor=background)
        self._canvas = FigureCanvasAgg(self.figure)
        self._ax     = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        self._closed = False
        self.clear()

    def _pt(self, px: float) -> float:
        # pixels → points at this dpi
        return px * 72.0 / self.dpi

    def is_ready(self) -> bool:
        return not self._closed

    def close(self) -> None:
        self._closed = True
        self.figure.clear()

    def clear(self) -> None:
        ax = self._ax
        ax.cla()
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_axis_off()

    def line(self, points, color, width=1, dash=None, rounded=False) -> None:
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        style: dict = {"color": color, "linewidth": self._pt(width)}
        if dash:
            # matplotlib scales dash lengths by the line width
            style["linestyle"] = (0, tuple(d / width for d in dash))
        if rounded:
            style["solid_capstyle"]  = "round"
            style["solid_joinstyle"] = "round"
        self._ax.plot(xs, ys, **style)

    def text(self, x, y, label, color, font, align) -> None:
        family, size = font
        self._ax.text(
            x, y, label,
            color=color,
            fontsize=self._pt(size),
            family=self._FAMILIES.get(family, family),
            ha=self._ALIGN[align],
            va="baseline",
        )

    def to_pixels(self) -> np.ndarray:
        """RGBA uint8 array, shape (height, width, 4)."""
        self._canvas.draw()
        return np.asarray(self._canvas.buffer_rgba()).copy()

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self._canvas.print_png(buf)
        return buf.getvalue()


# ── Live tkinter canvas ──────────────────────────────────────────────────────

class TkCanvasSurface:
    """
    Adapter over a tkinter.Canvas.

    The caller provisions the size (canvas `width` / `height` options).  Tk has
    no alpha channel, so translucent colours are blended over the background.
    """

    _FAMILIES = {"sans": "Arial", "mono": "Courier New"}
    # Tk anchors a text item by a compass point; bottom edge ≈ baseline
    _ANCHORS  = {"left": "sw", "center": "s", "right": "se"}

    def __init__(self, canvas, background: str = SURFACE_BACKGROUND) -> None:
        self.canvas     = canvas
        self.background = background

    @property
    def width(self) -> int:
        return int(float(self.canvas.cget("width")))

    @property
    def height(self) -> int:
        return int(float(self.canvas.cget("height")))

    def is_ready(self) -> bool:
        import tkinter as tk
        try:
            return bool(self.canvas.winfo_exists()) and self.width > 1
        except tk.TclError:
            return False

    def clear(self) -> None:
        self.canvas.delete("all")

    def line(self, points, color, width=1, dash=None, rounded=False) -> None:
        coords = [c for point in points for c in point]
        opts: dict = {"fill": blend(color, self.background), "width": width}
        if dash:
            opts["dash"] = tuple(int(d) for d in dash)
        if rounded:
            opts["capstyle"]  = "round"
            opts["joinstyle"] = "round"
        self.canvas.create_line(*coords, **opts)

    def text(self, x, y, label, color, font, align) -> None:
        family, size = font
        self.canvas.create_text(
            x, y,
            text=label,
            fill=blend(color, self.background),
            font=(self._FAMILIES.get(family, family), -int(size)),   # negative = pixels
            anchor=self._ANCHORS[align],
        )


# ── Registry ─────────────────────────────────────────────────────────────────

class SurfaceRegistry:
    """Surface id → surface.  Missing ids are not an error: get() returns None."""

    def __init__(self) -> None:
        self._surfaces: dict[str, object] = {}

    def register(self, surface_id: str, surface) -> None:
        self._surfaces[surface_id] = surface

    def remove(self, surface_id: str) -> None:
        self._surfaces.pop(surface_id, None)

    def get(self, surface_id: str):
        return self._surfaces.get(surface_id)

    def ids(self) -> list[str]:
        return list(self._surfaces)

    def __contains__(self, surface_id: str) -> bool:
        return surface_id in self._surfaces

    def __len__(self) -> int:
        return len(self._surfaces)
