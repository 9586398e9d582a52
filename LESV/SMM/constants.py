# =============================================================================
# constants.py — SMM Scheme Identifiers, Levels, Colours and Plot Geometry
# =============================================================================
#
# Every tunable the encoders, the renderer and the tools share lives here.
# DO NOT redefine any of these values inside another module.

# -----------------------------------------------------------------------------
# SIGNAL LEVELS
# -----------------------------------------------------------------------------

LEVEL_HIGH =  1      # +V
LEVEL_ZERO =  0      # rest / zero line
LEVEL_LOW  = -1      # -V
LEVELS     = frozenset({LEVEL_HIGH, LEVEL_ZERO, LEVEL_LOW})

# Initial encoder memory for each stateful scheme
NRZI_INITIAL_LEVEL      = LEVEL_LOW   # first '1' flips to +V
AMI_INITIAL_POLARITY    = LEVEL_LOW   # first mark is +V
DIFF_MANCHESTER_INITIAL = LEVEL_HIGH  # first '0' starts the bit at -V


# -----------------------------------------------------------------------------
# SCHEME SELECTORS
# These six strings are the ONLY legal single-scheme selectors.
# Order = display order (top to bottom in the all-schemes view).
# -----------------------------------------------------------------------------

SCHEME_NRZL            = "nrzl"
SCHEME_NRZI            = "nrzi"
SCHEME_AMI             = "ami"
SCHEME_PSEUDO          = "pseudo"
SCHEME_MANCHESTER      = "manchester"
SCHEME_DIFF_MANCHESTER = "diffmanchester"

SCHEME_ORDER = (
    SCHEME_NRZL,
    SCHEME_NRZI,
    SCHEME_AMI,
    SCHEME_PSEUDO,
    SCHEME_MANCHESTER,
    SCHEME_DIFF_MANCHESTER,
)

SCHEME_TITLES = {
    SCHEME_NRZL:            "NRZ-L",
    SCHEME_NRZI:            "NRZI",
    SCHEME_AMI:             "Bipolar AMI",
    SCHEME_PSEUDO:          "Pseudoternary",
    SCHEME_MANCHESTER:      "Manchester",
    SCHEME_DIFF_MANCHESTER: "Differential Manchester",
}

# Schemes that emit two half-segments per bit
HALF_BIT_SCHEMES = frozenset({SCHEME_MANCHESTER, SCHEME_DIFF_MANCHESTER})


# -----------------------------------------------------------------------------
# COLOURS  (#rrggbb or #rrggbbaa)
# -----------------------------------------------------------------------------

COLOR_ERROR = "#f87171"   # input validation message
COLOR_GRID = "#ffffff1a"   # white @ 10%
COLOR_TEXT = "#ffffff99"   # white @ 60%
SURFACE_BACKGROUND = "#1e1e2e"

SCHEME_COLORS = {
    SCHEME_NRZL:            "#ff6b6b",
    SCHEME_NRZI:            "#feca57",
    SCHEME_AMI:             "#48dbfb",
    SCHEME_PSEUDO:          "#ff9ff3",
    SCHEME_MANCHESTER:      "#1dd1a1",
    SCHEME_DIFF_MANCHESTER: "#a55eea",
}


# -----------------------------------------------------------------------------
# PLOT GEOMETRY  (pixels)
# -----------------------------------------------------------------------------

PADDING        = 50     # margin on all four sides of the plot area
CANVAS_HEIGHT  = 200    # surfaces have a fixed height ...
CANVAS_WIDTH   = 800    # ... and a width sized to their container
CONTAINER_GUTTER = 40   # container width minus this = surface width

GRID_LINE_WIDTH   = 1
GRID_DASH         = (5, 5)
SIGNAL_LINE_WIDTH = 3

AXIS_LABEL_OFFSET = 8    # axis labels end this far left of the plot area
AXIS_LABEL_NUDGE  = 4    # baseline sits this far below the reference line
BIT_LABEL_RISE    = 15   # bit digits sit this far above the plot area

# Fonts are (logical family, pixel size); each surface maps the family
AXIS_FONT = ("sans", 12)
BIT_FONT  = ("mono", 14)

AXIS_LABELS = (
    (LEVEL_HIGH, "+V"),
    (LEVEL_ZERO, "0"),
    (LEVEL_LOW,  "-V"),
)


# -----------------------------------------------------------------------------
# INPUT
# -----------------------------------------------------------------------------

DEFAULT_BITS     = "10110010"
RANDOM_MIN_BITS  = 4
RANDOM_MAX_BITS  = 11        # inclusive

MSG_EMPTY_INPUT   = "Please enter a binary string"
MSG_INVALID_INPUT = "Invalid input! Please enter only 0s and 1s"

# Last-input cache (single string, one file)
INPUT_CACHE_FILENAME = ".lesv_last_input"


# -----------------------------------------------------------------------------
# SURFACE IDENTIFIERS
# -----------------------------------------------------------------------------

SINGLE_SURFACE_ID = "canvas-single"


def surface_id(scheme: str) -> str:
    """Identifier of the dedicated surface for one scheme, e.g. 'canvas-ami'."""
    return f"canvas-{scheme}"


# -----------------------------------------------------------------------------
# BRIDGE SERVER
# -----------------------------------------------------------------------------

BRIDGE_HOST = "127.0.0.1"
BRIDGE_PORT = 5000
RENDER_DPI  = 100
MAX_RENDER_WIDTH  = 4000
MAX_RENDER_HEIGHT = 2000
