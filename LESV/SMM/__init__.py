# =============================================================================
# LESV/SMM/__init__.py — Signal Mapping Module
# =============================================================================
#
# The SMM is the single source of truth for the visualizer: scheme selectors,
# signal levels, colours, plot geometry and input limits.
#
# All other LESV sub-modules import exclusively from here.
# Never define shared constants outside this module.
#
# Sub-modules:
#   constants.py  — all levels, selectors, colours and geometry
# =============================================================================
