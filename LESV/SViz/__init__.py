# =============================================================================
# LESV/SViz/__init__.py — Signal Visualizer Module
# =============================================================================
#
# Draws encoded signals.  The renderer only talks to a small surface
# interface, so the same drawing code feeds a Tk canvas, an off-screen
# matplotlib figure, or a recorded draw list shipped to a browser canvas.
#
# Data flow:
#   UI:      bit string + selector + surface id
#   Python:  parse → encode → render onto the registered surface
#   Output:  grid + axis labels + bit labels + stepped waveform
#
# Sub-modules:
#   renderer.py           — geometry, plot points, stepped path, render()
#   surfaces.py           — Recording / Matplotlib / TkCanvas surfaces, registry
#   visualizer_bridge.py  — selector dispatch and JSON entry points
#   bridge_server.py      — Flask HTTP bridge for a browser page
#   input_cache.py        — last-input cache (one string)
# =============================================================================
