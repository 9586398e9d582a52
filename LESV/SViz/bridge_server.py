# =============================================================================
# bridge_server.py — Local HTTP Bridge (Flask)
# =============================================================================
#
# Lets a browser page use the Python encoders / renderer.  Run it with
# tools/py_bridge_server.py.
#
#   GET /py-bridge/health                          {"status": "ok"}
#   GET /py-bridge/random                          {"bits": "0110..."}
#   GET /py-bridge/encode/<selector>?bits=1011     segments JSON
#   GET /py-bridge/draw/<selector>?bits=..&width=..&height=..
#                                                  draw-list JSON
#   GET /py-bridge/render/<selector>.png?bits=..&width=..&height=..
#                                                  PNG image
#
# Invalid bits or size → 400 {"error": ...}.  Unknown selector → 404 for /encode
# (explicit request for data) and 204 for /draw and /render (nothing to draw).
# =============================================================================

from flask import Flask, Response, jsonify, request

from LESV.SMM.constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, RENDER_DPI,
    MAX_RENDER_WIDTH, MAX_RENDER_HEIGHT,
)
from LESV.SGM.bitstream import InvalidBitString, parse_bits, random_bits, bits_to_str
from LESV.SGM.line_encoder import Scheme
from LESV.SViz.renderer import render
from LESV.SViz.surfaces import MatplotlibSurface
from LESV.SViz.visualizer_bridge import encode_dict, draw_list

app = Flask(__name__)


class InvalidDimension(ValueError):
    """width / height query parameter is not an integer or is out of range."""


def _dimension(name: str, default: int, limit: int) -> int:
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidDimension(f"{name} must be an integer, got {raw!r}") from None
    if not 1 <= value <= limit:
        raise InvalidDimension(f"{name} must be between 1 and {limit}, got {value}")
    return value


def _request_bits():
    return parse_bits(request.args.get("bits", ""))


@app.errorhandler(InvalidBitString)
@app.errorhandler(InvalidDimension)
def bad_request(e):
    return jsonify({"error": str(e)}), 400


@app.route('/py-bridge/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


@app.route('/py-bridge/random', methods=['GET'])
def random_sequence():
    return jsonify({'bits': bits_to_str(random_bits())})


@app.route('/py-bridge/encode/<selector>', methods=['GET'])
def encode_route(selector):
    scheme = Scheme.lookup(selector)
    if scheme is None:
        return jsonify({'error': f'unknown encoding scheme: {selector!r}'}), 404
    return jsonify(encode_dict(_request_bits(), scheme))


@app.route('/py-bridge/draw/<selector>', methods=['GET'])
def draw_route(selector):
    bits   = _request_bits()
    width  = _dimension('width', CANVAS_WIDTH, MAX_RENDER_WIDTH)
    height = _dimension('height', CANVAS_HEIGHT, MAX_RENDER_HEIGHT)
    scheme = Scheme.lookup(selector)
    if scheme is None:
        return Response(status=204)
    return jsonify(draw_list(bits, scheme, width, height))


@app.route('/py-bridge/render/<selector>.png', methods=['GET'])
def render_route(selector):
    bits   = _request_bits()
    width  = _dimension('width', CANVAS_WIDTH, MAX_RENDER_WIDTH)
    height = _dimension('height', CANVAS_HEIGHT, MAX_RENDER_HEIGHT)
    scheme = Scheme.lookup(selector)
    if scheme is None:
        return Response(status=204)
    surface = MatplotlibSurface(width, height, dpi=RENDER_DPI)
    render(scheme, bits, surface)
    return Response(surface.to_png(), mimetype='image/png')

