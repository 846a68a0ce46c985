"""
Drawing generator constants.

Sheet size, layout regions and styling for seal ring drawings. Sheet
coordinates are abstract drawing units (1123 x 794, approximately A4
landscape at 96 dpi); views are laid out on an 800 x 500 view canvas that
is scaled uniformly onto the sheet.
"""

# =============================================================================
# SHEET AND LAYOUT CONSTANTS
# =============================================================================

# A4 landscape, in drawing units
SHEET_WIDTH = 1123
SHEET_HEIGHT = 794

# Physical size written into the SVG header
SHEET_WIDTH_MM = 297
SHEET_HEIGHT_MM = 210

# Border rule inset from the sheet edge
MARGIN = 16

# View canvas - all views and part tables are positioned in these units
VIEW_CANVAS_WIDTH = 800
VIEW_CANVAS_HEIGHT = 500

# Title block - anchored at the bottom right corner
TITLE_BLOCK_WIDTH = 400
TITLE_BLOCK_LABEL_WIDTH = 110
TITLE_BLOCK_ROW_HEIGHT = 26
TITLE_BLOCK_INSET = 24

# Notes block - anchored at the bottom left, grows upward
NOTES_X = 40
NOTES_BOTTOM = SHEET_HEIGHT - 96
NOTES_LINE_HEIGHT = 20

# Sheet title and creation date stamp
TITLE_Y = 62
DATE_STAMP_X = 24
DATE_STAMP_Y = 40


# =============================================================================
# VIEW GEOMETRY
# =============================================================================

# Dimension line arrowheads: stroke length and half-angle (degrees)
ARROW_SIZE = 5.0
ARROW_HALF_ANGLE = 30.0
DEFAULT_TEXT_OFFSET = 15.0

# O-ring section view: distance between the two cut ends
ORING_SECTION_HEIGHT = 100.0

# Backup ring side view body
BACKUP_SIDE_HEIGHT = 120.0
BACKUP_SIDE_WIDTH = 40.0

# View caption distance below a view
CAPTION_OFFSET = 30.0
CAPTION_FONT_SIZE = 14.0


# =============================================================================
# SVG STYLING
# =============================================================================

LINE_COLOR = "#000000"
OUTLINE_WIDTH = 2
THIN_LINE_WIDTH = 1
CENTERLINE_WIDTH = 0.5
CENTERLINE_DASH = "10,5"
HEADER_FILL = "#F3F4F6"
FONT_FAMILY = "Helvetica, Arial, sans-serif"
LABEL_FONT_SIZE = 12
HATCH_ID = "hatch"
ARROW_MARKER_ID = "arrow"
