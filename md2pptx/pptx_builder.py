# md2pptx/pptx_builder.py
import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE, PP_PLACEHOLDER
from pptx.oxml.ns import qn
from pptx.util import Inches, Pt

from .config import BODY_FONT_SIZE, MONOSPACE_FONT, PREFERRED_LAYOUTS, TITLE_FONT_SIZE
from .schemas import Box, Image, PlacedSlide, PositionedElement, Shape, StyledRun, Table, TextBlock
from .template_utils import find_preferred_layout, open_presentation

LOGGER = logging.getLogger(__name__)

SHAPE_TYPES = {
    "rectangle": MSO_SHAPE.RECTANGLE,
    "oval": MSO_SHAPE.OVAL,
    "ellipse": MSO_SHAPE.OVAL,
    "triangle": MSO_SHAPE.ISOSCELES_TRIANGLE,
}
BULLET_CHAR = "•"
BULLET_INDENT = Inches(0.3)


def _box_args(x: float, y: float, w: float, h: float):
    return Inches(x), Inches(y), Inches(w), Inches(h)


def _title_placeholder(slide):
    for shp in slide.placeholders:
        try:
            if shp.placeholder_format.type in (PP_PLACEHOLDER.TITLE, PP_PLACEHOLDER.CENTER_TITLE):
                return shp
        except ValueError:
            continue
    return None


def _set_title(slide, text: str, box: Box):
    left, top, width, height = _box_args(box.x, box.y, box.width, box.height)
    shp = _title_placeholder(slide)
    if shp is None:
        shp = slide.shapes.add_textbox(left, top, width, height)
    else:
        shp.left, shp.top, shp.width, shp.height = left, top, width, height
    tf = shp.text_frame
    tf.clear()
    tf.word_wrap = True
    run = tf.paragraphs[0].add_run()
    run.text = text
    run.font.size = Pt(TITLE_FONT_SIZE)
    run.font.bold = True


def _set_bullet(paragraph):
    pPr = paragraph._p.get_or_add_pPr()
    pPr.set("marL", str(int(BULLET_INDENT)))
    pPr.set("indent", str(-int(BULLET_INDENT)))
    pPr.append(pPr.makeelement(qn("a:buChar"), {"char": BULLET_CHAR}))


def _add_run(paragraph, styled: StyledRun):
    style = styled.style
    run = paragraph.add_run()
    run.text = styled.text
    font = run.font
    font.size = Pt(BODY_FONT_SIZE)
    if style.bold:
        font.bold = True
    if style.italic:
        font.italic = True
    if style.monospace:
        font.name = MONOSPACE_FONT
    if style.hyperlink is not None:
        run.hyperlink.address = style.hyperlink.url
        run.hyperlink._hlinkClick.set("tooltip", style.hyperlink.tooltip)


def _add_text_block(slide, pos: PositionedElement, block: TextBlock):
    shp = slide.shapes.add_textbox(*_box_args(pos.x, pos.y, pos.width, pos.height))
    tf = shp.text_frame
    tf.word_wrap = True
    paragraph = tf.paragraphs[0]
    bulleted = False
    for styled in block.runs:
        if styled.style.is_bullet and not bulleted:
            _set_bullet(paragraph)
            bulleted = True
        if styled.style.breaks_line:
            paragraph = tf.add_paragraph()
        elif styled.text:
            _add_run(paragraph, styled)


def _resolve_image(href: str, base_dir: Optional[Path]) -> Optional[Path]:
    if "://" in href:
        return None
    path = Path(href)
    if not path.is_absolute() and base_dir is not None:
        path = base_dir / path
    return path if path.is_file() else None


def _add_image(slide, pos: PositionedElement, image: Image, base_dir: Optional[Path]):
    path = _resolve_image(image.href, base_dir)
    if path is None:
        LOGGER.warning("Skipping image %r: not a readable local file", image.href)
        return
    try:
        slide.shapes.add_picture(str(path), *_box_args(pos.x, pos.y, pos.width, pos.height))
    except (OSError, ValueError) as e:
        LOGGER.warning("Skipping image %r: %s", image.href, e)


def _add_table(slide, pos: PositionedElement, table: Table):
    data = [table.headers] + table.rows
    cols = max([len(row) for row in data] + [1])
    shp = slide.shapes.add_table(len(data), cols, *_box_args(pos.x, pos.y, pos.width, pos.height))
    for r, row in enumerate(data):
        for c in range(cols):
            shp.table.cell(r, c).text = row[c] if c < len(row) else ""


def _color(value: Any) -> Optional[RGBColor]:
    if isinstance(value, dict):
        value = value.get("color")
    if not isinstance(value, str):
        return None
    try:
        return RGBColor.from_string(value.lstrip("#").upper())
    except ValueError:
        LOGGER.warning("Ignoring invalid color %r", value)
        return None


def _style_shape(shp, options: Dict[str, Any], fillable: bool):
    fill = _color(options.get("fill"))
    if fillable and fill is not None:
        shp.fill.solid()
        shp.fill.fore_color.rgb = fill
    line = options.get("line")
    line_color = _color(line)
    if line_color is not None:
        shp.line.color.rgb = line_color
    if isinstance(line, dict) and isinstance(line.get("width"), (int, float)):
        shp.line.width = Pt(line["width"])


def _add_shape(slide, pos: PositionedElement, shape: Shape):
    left, top, width, height = _box_args(pos.x, pos.y, pos.width, pos.height)
    if shape.kind == "line":
        shp = slide.shapes.add_connector(MSO_CONNECTOR.STRAIGHT, left, top, left + width, top + height)
        _style_shape(shp, shape.options, fillable=False)
        return
    shp = slide.shapes.add_shape(SHAPE_TYPES[shape.kind], left, top, width, height)
    _style_shape(shp, shape.options, fillable=True)
    text = shape.options.get("text")
    if isinstance(text, str):
        shp.text_frame.text = text


def _add_element(slide, pos: PositionedElement, base_dir: Optional[Path]):
    el = pos.element
    if isinstance(el, TextBlock):
        _add_text_block(slide, pos, el)
    elif isinstance(el, Image):
        _add_image(slide, pos, el, base_dir)
    elif isinstance(el, Table):
        _add_table(slide, pos, el)
    elif isinstance(el, Shape):
        _add_shape(slide, pos, el)


def build_presentation(
    slides: Sequence[PlacedSlide],
    template_bytes: Optional[bytes] = None,
    base_dir: Optional[Path] = None,
) -> bytes:
    prs = open_presentation(template_bytes)

    layout = find_preferred_layout(prs, PREFERRED_LAYOUTS)
    if layout is None:
        layout = prs.slide_layouts[len(prs.slide_layouts) - 1]

    for placed in slides:
        slide = prs.slides.add_slide(layout)
        _set_title(slide, placed.title, placed.title_box)

        for pos in placed.elements:
            _add_element(slide, pos, base_dir)

        # Speaker notes (optional)
        if placed.notes:
            notes_slide = slide.notes_slide
            notes_slide.notes_text_frame.clear()
            notes_slide.notes_text_frame.text = placed.notes

    bio = BytesIO()
    prs.save(bio)
    return bio.getvalue()
