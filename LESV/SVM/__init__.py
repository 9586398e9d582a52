# =============================================================================
# LESV/SVM/__init__.py — Signal Verification Module
# =============================================================================
#
# The SVM checks that encoded signals are what a receiver expects.
#
# Sub-modules:
#   line_decoder.py  — decodes segments back into bits, reports violations
#   validate.py      — automated self-check of the whole LESV stack
# =============================================================================
