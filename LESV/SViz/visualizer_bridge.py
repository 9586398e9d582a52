# =============================================================================
# visualizer_bridge.py — Scheme Dispatch and JSON Entry Points
# =============================================================================
#
# Glue between a UI (Tk window, browser page) and the encoder / renderer pair.
#
# Surface lookup is by id through a SurfaceRegistry:
#   "canvas-<selector>"  one dedicated surface per scheme (all-schemes view)
#   "canvas-single"      the single-scheme view
#
# Unknown selectors and missing surfaces draw nothing and raise nothing.
#
# The *_json() functions return plain JSON strings so a browser caller gets
# either a result or {"error": "..."} without needing exception handling.
# =============================================================================

from __future__ import annotations
import json
from typing import Sequence

from LESV.SMM.constants import SCHEME_ORDER, SINGLE_SURFACE_ID, surface_id
from LESV.SGM.bitstream import InvalidBitString, parse_bits, bits_to_str
from LESV.SGM.line_encoder import Scheme, Segment, encode
from LESV.SViz.renderer import render
from LESV.SViz.surfaces import RecordingSurface, SurfaceRegistry


def draw_single_encoding(
    bits: Sequence[int],
    selector: str,
    registry: SurfaceRegistry,
    target_id: str = SINGLE_SURFACE_ID,
) -> bool:
    """Draw one scheme on the single-view surface.  False = nothing drawn."""
    scheme = Scheme.lookup(selector)
    if scheme is None:
        return False
    return render(scheme, bits, registry.get(target_id))


def draw_all_encodings(bits: Sequence[int], registry: SurfaceRegistry) -> list[Scheme]:
    """Draw every scheme that has a dedicated surface.  Returns those drawn."""
    drawn = []
    for selector in SCHEME_ORDER:
        if render(selector, bits, registry.get(surface_id(selector))):
            drawn.append(Scheme(selector))
    return drawn


def clear_all(registry: SurfaceRegistry) -> int:
    """Blank every ready surface.  Returns how many were cleared."""
    cleared = 0
    for sid in registry.ids():
        surface = registry.get(sid)
        if surface is not None and surface.is_ready():
            surface.clear()
            cleared += 1
    return cleared


# ---------------------------------------------------------------------------
# Plain-data conversions
# ---------------------------------------------------------------------------

def segment_to_dict(seg: Segment) -> dict:
    out = {"bit_index": seg.bit_index, "level": seg.level, "transition": seg.transition}
    if seg.half is not None:
        out["half"] = seg.half
    return out


def encode_dict(bits: Sequence[int], scheme: Scheme) -> dict:
    return {
        "scheme":   scheme.value,
        "title":    scheme.display_name,
        "bits":     bits_to_str(bits),
        "segments": [segment_to_dict(s) for s in encode(scheme, bits)],
    }


def draw_list(bits: Sequence[int], scheme: Scheme, width: int, height: int) -> dict:
    surface = RecordingSurface(width, height)
    render(scheme, bits, surface)
    out = surface.to_dict()
    out["scheme"] = scheme.value
    return out


# ---------------------------------------------------------------------------
# JSON entry points
# ---------------------------------------------------------------------------

def encode_json(text: str, selector: str) -> str:
    """
    Parse `text`, encode with `selector`, return JSON.

    Returns
    -------
    {"scheme", "title", "bits", "segments": [{bit_index, level, transition[, half]}]}
    or {"error": "<message>"}
    """
    scheme = Scheme.lookup(selector)
    if scheme is None:
        return json.dumps({"error": f"unknown encoding scheme: {selector!r}"})
    try:
        bits = parse_bits(text)
    except InvalidBitString as e:
        return json.dumps({"error": str(e)})
    return json.dumps(encode_dict(bits, scheme))


def draw_list_json(text: str, selector: str, width: int, height: int) -> str:
    """
    Same as encode_json() but returns the recorded draw list for a JS canvas:
    {"width", "height", "scheme", "commands": [...]}.
    An unknown selector gives an empty command list (nothing to draw).
    """
    try:
        bits = parse_bits(text)
    except InvalidBitString as e:
        return json.dumps({"error": str(e)})
    scheme = Scheme.lookup(selector)
    if scheme is None:
        return json.dumps({"width": width, "height": height, "scheme": None, "commands": []})
    return json.dumps(draw_list(bits, scheme, width, height))
