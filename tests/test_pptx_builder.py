import io
import logging
import zipfile

import pytest

pytest.importorskip("pptx")
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE, MSO_SHAPE_TYPE
from pptx.oxml.ns import qn
from pptx.shapes.connector import Connector
from pptx.util import Inches

from md2pptx.convert import markdown_to_pptx
from md2pptx.layout import layout_slide
from md2pptx.pptx_builder import build_presentation
from md2pptx.schemas import Shape, Slide
from md2pptx.template_utils import find_preferred_layout, open_presentation


def _open(data: bytes):
    return Presentation(io.BytesIO(data))


def _texts(slide):
    return [s.text_frame.text for s in slide.shapes if s.has_text_frame]


def test_deck_has_titles_text_and_notes(deck_md):
    prs = _open(markdown_to_pptx(deck_md))
    assert len(prs.slides) == 2
    assert prs.slide_width == Inches(10)

    welcome = prs.slides[0]
    texts = _texts(welcome)
    assert "Welcome" in texts
    assert "Hello bold and a link here." in texts
    assert welcome.has_notes_slide
    assert welcome.notes_slide.notes_text_frame.text == "remember timeline"
    assert not prs.slides[1].has_notes_slide


def test_runs_keep_formatting_and_links(deck_md):
    prs = _open(markdown_to_pptx(deck_md))
    runs = [
        run
        for shape in prs.slides[0].shapes if shape.has_text_frame
        for p in shape.text_frame.paragraphs
        for run in p.runs
    ]
    link = next(r for r in runs if r.text == "a link")
    assert link.font.bold
    assert link.hyperlink.address == "https://example.com"
    point = next(r for r in runs if r.text == "point")
    assert point.font.italic


def test_bullets_are_marked(deck_md):
    prs = _open(markdown_to_pptx(deck_md))
    bulleted = [
        shape.text_frame.text
        for shape in prs.slides[0].shapes
        if shape.has_text_frame
        and shape.text_frame.paragraphs[0]._p.pPr is not None
        and shape.text_frame.paragraphs[0]._p.pPr.find(qn("a:buChar")) is not None
    ]
    assert bulleted == ["first point", "second point"]


def test_table_is_native_table(deck_md):
    prs = _open(markdown_to_pptx(deck_md))
    table = next(s for s in prs.slides[0].shapes if s.has_table).table
    assert [table.cell(0, c).text for c in range(2)] == ["A", "B"]
    assert [table.cell(1, c).text for c in range(2)] == ["1", "2"]


def test_shapes_are_drawn_with_fill(deck_md):
    prs = _open(markdown_to_pptx(deck_md))
    shape = next(s for s in prs.slides[1].shapes if s.shape_type == MSO_SHAPE_TYPE.AUTO_SHAPE)
    assert shape.auto_shape_type == MSO_SHAPE.RECTANGLE
    assert shape.fill.fore_color.rgb == RGBColor.from_string("FF0000")
    assert shape.width == Inches(2)
    assert shape.left == Inches(0.5)


def test_line_shape_is_a_connector():
    placed = layout_slide(Slide(title="L", elements=[Shape(kind="line", options={"h": 0.5, "line": {"color": "00FF00", "width": 2}})]))
    prs = _open(build_presentation([placed]))
    assert any(isinstance(s, Connector) for s in prs.slides[0].shapes)


def test_local_image_is_embedded(png_file):
    md = f"# Pic\n\n![pixel]({png_file.name})\n"
    prs = _open(markdown_to_pptx(md, base_dir=png_file.parent))
    pictures = [s for s in prs.slides[0].shapes if s.shape_type == MSO_SHAPE_TYPE.PICTURE]
    assert len(pictures) == 1


def test_missing_image_is_skipped_with_warning(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="md2pptx.pptx_builder"):
        prs = _open(markdown_to_pptx("# Pic\n\n![gone](nope.png)\n", base_dir=tmp_path))
    assert all(s.shape_type != MSO_SHAPE_TYPE.PICTURE for s in prs.slides[0].shapes)
    assert "nope.png" in caplog.text


def _template_bytes(potx: bool = False) -> bytes:
    prs = Presentation()
    prs.slides.add_slide(prs.slide_layouts[0])
    bio = io.BytesIO()
    prs.save(bio)
    data = bio.getvalue()
    if not potx:
        return data
    src = zipfile.ZipFile(io.BytesIO(data))
    out = io.BytesIO()
    with zipfile.ZipFile(out, "w") as dst:
        for item in src.infolist():
            payload = src.read(item.filename)
            if item.filename == "[Content_Types].xml":
                payload = payload.replace(b"presentationml.presentation.main+xml", b"presentationml.template.main+xml")
            dst.writestr(item, payload)
    return out.getvalue()


@pytest.mark.parametrize("potx", [False, True])
def test_template_slides_are_replaced(deck_md, potx):
    prs = _open(markdown_to_pptx(deck_md, template_bytes=_template_bytes(potx)))
    assert len(prs.slides) == 2
    assert "Welcome" in _texts(prs.slides[0])


def test_preferred_layout_respects_order():
    prs = open_presentation()
    assert find_preferred_layout(prs, ["Blank", "Title Only"]).name == "Blank"
    assert find_preferred_layout(prs, ["Title Only", "Blank"]).name == "Title Only"
    assert find_preferred_layout(prs, ["no such layout"]) is None


def test_hard_break_starts_new_paragraph():
    prs = _open(markdown_to_pptx("# T\n\nline one  \nline two\n\nsoft\nwrap\n"))
    body = [s.text_frame for s in prs.slides[0].shapes if s.has_text_frame][1:]
    assert [p.text for p in body[0].paragraphs] == ["line one", "line two"]
    assert [p.text for p in body[1].paragraphs] == ["soft wrap"]
