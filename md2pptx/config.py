# md2pptx/config.py
import os

MAX_FILE_MB = float(os.getenv("MD2PPTX_MAX_FILE_MB", "20"))
ALLOWED_EXTS = {".pptx", ".potx"}

LOG_LEVEL = os.getenv("MD2PPTX_LOG_LEVEL", "WARNING")

# Slide-space geometry, in inches (16:9 canvas)
SLIDE_WIDTH = 10.0
SLIDE_HEIGHT = 5.625

TITLE_BOX = (0.5, 0.3, 9.0, 0.75)  # x, y, w, h
CONTENT_TOP = 1.2
BOTTOM_MARGIN = 0.25
MIN_REMAINING = 0.1

SINGLE_COLUMN = (0.5, 9.0)  # x, w
TWO_COLUMNS = ((0.5, 4.5), (5.2, 4.5))

TEXT_LINE_HEIGHT = 0.5
TEXT_SPACING = 0.1
IMAGE_HEIGHT = 3.0
IMAGE_SPACING = 0.2
TABLE_BASE_HEIGHT = 0.5
TABLE_ROW_HEIGHT = 0.5
SHAPE_DEFAULT_HEIGHT = 1.0
SHAPE_SPACING = 0.2

# Rendering
TITLE_FONT_SIZE = 32
BODY_FONT_SIZE = 18
MONOSPACE_FONT = "Courier New"
PREFERRED_LAYOUTS = ["Blank", "Title Only"]
