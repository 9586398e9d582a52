# =============================================================================
# SGM — Signal Generation Module
# Subfolder of LESV (Line Encoding Signal Visualizer)
# =============================================================================
#
# Turns user text into bits and bits into line-coded segments.
#
# Modules:
#   bitstream.py     — parse / validate bit strings, random test sequences
#   line_encoder.py  — the six scheme encoders and the encode() dispatcher
#
# Constants live in LESV/SMM/constants.py
# Verification tools live in LESV/SVM/
