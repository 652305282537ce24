# md2pptx/layout.py
"""
Places a slide's elements onto the fixed 16:9 canvas.

The first column break splits content into two side-by-side columns; later breaks
are ignored and their content stays in the second column. Within a column elements
stack top to bottom until the vertical budget runs out, and anything left over is
dropped without complaint. The estimates are deliberately coarse.
"""
from typing import Any, Dict, List, Sequence, Tuple

from .config import (
    BOTTOM_MARGIN,
    CONTENT_TOP,
    IMAGE_HEIGHT,
    IMAGE_SPACING,
    MIN_REMAINING,
    SHAPE_DEFAULT_HEIGHT,
    SHAPE_SPACING,
    SINGLE_COLUMN,
    SLIDE_HEIGHT,
    TABLE_BASE_HEIGHT,
    TABLE_ROW_HEIGHT,
    TEXT_LINE_HEIGHT,
    TEXT_SPACING,
    TITLE_BOX,
    TWO_COLUMNS,
)
from .schemas import (
    Box,
    ColumnBreak,
    Image,
    PlacedSlide,
    PositionedElement,
    Shape,
    Slide,
    SlideElement,
    Table,
    TextBlock,
)


def split_columns(elements: Sequence[SlideElement]) -> List[List[SlideElement]]:
    idx = next((i for i, el in enumerate(elements) if isinstance(el, ColumnBreak)), None)
    if idx is None:
        return [list(elements)]
    left = list(elements[:idx])
    right = [el for el in elements[idx + 1:] if not isinstance(el, ColumnBreak)]
    return [left, right]


def _option(options: Dict[str, Any], *keys: str):
    for key in keys:
        value = options.get(key)
        if isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0:
            return float(value)
    return None


def _measure(el: SlideElement, w: float, remaining: float) -> Tuple[float, float, float]:
    """Return (width, height, cursor advance) for an element in a column of width w."""
    if isinstance(el, TextBlock):
        h = min(remaining, el.line_count * TEXT_LINE_HEIGHT)
        return w, h, h + TEXT_SPACING
    if isinstance(el, Image):
        return w, IMAGE_HEIGHT, IMAGE_HEIGHT + IMAGE_SPACING
    if isinstance(el, Table):
        h = TABLE_BASE_HEIGHT + TABLE_ROW_HEIGHT * len(el.rows)
        return w, h, h
    if isinstance(el, Shape):
        # size may be overridden by the author, the origin never is
        h = _option(el.options, "h", "height")
        if h is None:
            h = SHAPE_DEFAULT_HEIGHT
        width = _option(el.options, "w", "width")
        return (w if width is None else width), h, h + SHAPE_SPACING
    raise TypeError(f"Unplaceable element: {type(el).__name__}")


def layout_column(elements: Sequence[SlideElement], x: float, w: float, column: int = 0) -> List[PositionedElement]:
    placed: List[PositionedElement] = []
    y = CONTENT_TOP
    for el in elements:
        remaining = SLIDE_HEIGHT - y - BOTTOM_MARGIN
        if remaining <= MIN_REMAINING:
            break
        width, height, advance = _measure(el, w, remaining)
        placed.append(PositionedElement(element=el, x=x, y=y, width=width, height=height, column=column))
        y += advance
    return placed


def layout_slide(slide: Slide) -> PlacedSlide:
    columns = split_columns(slide.elements)
    boxes = [SINGLE_COLUMN] if len(columns) == 1 else list(TWO_COLUMNS)

    placed: List[PositionedElement] = []
    for column, (elements, (x, w)) in enumerate(zip(columns, boxes)):
        placed.extend(layout_column(elements, x, w, column))

    tx, ty, tw, th = TITLE_BOX
    return PlacedSlide(
        title=slide.title,
        title_box=Box(x=tx, y=ty, width=tw, height=th),
        notes=slide.notes,
        elements=placed,
    )


def layout_deck(slides: Sequence[Slide]) -> List[PlacedSlide]:
    return [layout_slide(s) for s in slides]
