"""
Drawing generator constants.

Canvas size, padding, and styling constants for cutting files.
"""

# =============================================================================
# CANVAS AND LAYOUT CONSTANTS
# =============================================================================

# Fixed canvas in logical units (viewBox matches width/height)
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# Space kept free on every side for dimension lines and technical info
PADDING = 60

# Distance from the piece edge to the dimension line
DIMENSION_OFFSET = 30

# Registration marks sit this far in from each canvas corner
REGISTRATION_INSET = 20
REGISTRATION_SIZE = 10

# White contrast panel margin around the piece
CONTRAST_MARGIN = 5


# =============================================================================
# SVG STYLING
# =============================================================================

FONT_FAMILY = "Arial"

CUT_COLOR = "#000000"
CUT_STROKE_WIDTH = 3
CUT_PATH_STROKE_WIDTH = 2  # used with non-scaling-stroke on transformed paths

FOLD_COLOR = "#FF0000"
FOLD_STROKE_WIDTH = 1.5
FOLD_DASH = "8,4"

WARNING_COLOR = "#FF6600"
WARNING_DASH = "10,5"
MUTED_TEXT_COLOR = "#666666"

DIMENSION_COLOR = "#0000FF"
DIMENSION_STROKE_WIDTH = 2
DIMENSION_ARROW_SIZE = 6
DIMENSION_FONT_SIZE = 16

REGISTRATION_COLOR = "#000000"
THIN_LINE_WIDTH = 0.5

BORDER_COLOR = "#cccccc"
BORDER_WIDTH = 1
BORDER_DASH = "5,5"

# Scale bar
SCALE_BAR_LENGTH = 100
SCALE_BAR_SEGMENTS = 5
SCALE_BAR_HEIGHT = 8
SCALE_BAR_BOTTOM_OFFSET = 35

# Technical info block
TECH_INFO_X = 20
TECH_INFO_BOTTOM_OFFSET = 120
TECH_INFO_LINE_HEIGHT = 14
TECH_INFO_HEADING_SIZE = 12
TECH_INFO_FONT_SIZE = 10

# Pattern ids defined in every document
USEFUL_MATERIAL_PATTERN = "usefulMaterial"
WASTE_MATERIAL_PATTERN = "wasteMaterial"
FOLD_ARROW_MARKER = "foldArrow"
