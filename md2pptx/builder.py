# md2pptx/builder.py
"""
Walks the block-token stream and assembles the ordered slide model.

A depth-1 heading opens a new slide; everything before the first one is dropped.
Paragraphs are checked for the authoring micro-syntaxes (speaker notes, standalone
images, embedded shapes) before falling back to formatted text.
"""
import json
import logging
import re
from typing import Iterable, List, Optional, Tuple

from .inline import resolve_runs
from .schemas import (
    ColumnBreak,
    Image,
    Shape,
    Slide,
    StyledRun,
    Table,
    TextBlock,
)
from .tokens import (
    BlockToken,
    HeadingToken,
    ListItem,
    ListToken,
    ParagraphToken,
    RuleToken,
    TableToken,
)

LOGGER = logging.getLogger(__name__)

NOTE_PATTERN = re.compile(r"^>\s*Note:\s*(.*)")
IMAGE_PATTERN = re.compile(r"^!\[([^\]]*)\]\(([^)]+)\)$")
SHAPE_PATTERN = re.compile(r"^!shape\[(.*)\]\((.*)\)$")

SHAPE_NAMES = {
    "rect": "rectangle",
    "oval": "oval",
    "ellipse": "ellipse",
    "line": "line",
    "triangle": "triangle",
}

CHECKED_GLYPH = "☑ "
UNCHECKED_GLYPH = "☐ "


class ShapeSyntaxError(ValueError):
    pass


def parse_shape(name: str, raw_options: str) -> Shape:
    kind = SHAPE_NAMES.get(name)
    if kind is None:
        raise ShapeSyntaxError(f"Invalid shape name: {name}")
    try:
        options = json.loads(raw_options)
    except json.JSONDecodeError as e:
        raise ShapeSyntaxError(f"Invalid shape options: {e}") from e
    if not isinstance(options, dict):
        raise ShapeSyntaxError(f"Shape options must be an object, got {type(options).__name__}")
    return Shape(kind=kind, options=options)


def _task_runs(item: ListItem, runs: List[StyledRun]) -> List[StyledRun]:
    glyph = CHECKED_GLYPH if item.checked else UNCHECKED_GLYPH
    if runs and runs[0].text:
        first = runs[0]
        return [first.model_copy(update={"text": glyph + first.text})] + runs[1:]
    return [StyledRun(text=glyph)] + runs


def _bullet_runs(runs: List[StyledRun]) -> List[StyledRun]:
    first = runs[0] if runs else StyledRun(text="")
    bulleted = first.model_copy(update={"style": first.style.model_copy(update={"is_bullet": True})})
    return [bulleted] + runs[1:]


class SlideModelBuilder:
    """
    Builds slides from block tokens. The current-slide accumulator lives inside a
    single build() call; diagnostics from the last build are kept on the instance.
    """

    def __init__(self) -> None:
        self.diagnostics: List[str] = []

    def build(self, tokens: Iterable[BlockToken]) -> List[Slide]:
        self.diagnostics = []
        slides: List[Slide] = []
        current: Optional[Slide] = None

        for tok in tokens:
            if isinstance(tok, HeadingToken):
                if tok.depth == 1:
                    if current is not None:
                        slides.append(current)
                    current = Slide(title=tok.text, elements=[])
            elif current is None:
                continue
            elif isinstance(tok, ParagraphToken):
                self._paragraph(current, tok)
            elif isinstance(tok, ListToken):
                self._list(current, tok)
            elif isinstance(tok, TableToken):
                current.elements.append(
                    Table(headers=list(tok.header), rows=[list(row) for row in tok.rows])
                )
            elif isinstance(tok, RuleToken):
                current.elements.append(ColumnBreak())

        if current is not None:
            slides.append(current)
        return slides

    def _report(self, message: str) -> None:
        LOGGER.error(message)
        self.diagnostics.append(message)

    def _paragraph(self, slide: Slide, tok: ParagraphToken) -> None:
        txt = tok.text.strip()

        note = NOTE_PATTERN.match(txt)
        if note:
            slide.notes = note.group(1).strip()
            return

        img = IMAGE_PATTERN.match(txt)
        if img:
            slide.elements.append(Image(alt=img.group(1), href=img.group(2)))
            return

        shape = SHAPE_PATTERN.match(txt)
        if shape:
            try:
                slide.elements.append(parse_shape(shape.group(1), shape.group(2)))
            except ShapeSyntaxError as e:
                self._report(f"{e} in {txt!r}")
            return

        runs = resolve_runs(tok.inline)
        if runs:
            slide.elements.append(TextBlock(runs=runs))

    def _list(self, slide: Slide, tok: ListToken) -> None:
        for item in tok.items:
            runs = resolve_runs(item.inline)
            if not runs:
                continue
            if item.is_task:
                runs = _task_runs(item, runs)
            else:
                runs = _bullet_runs(runs)
            slide.elements.append(TextBlock(runs=runs))


def build_slides(tokens: Iterable[BlockToken]) -> Tuple[List[Slide], List[str]]:
    builder = SlideModelBuilder()
    slides = builder.build(tokens)
    return slides, builder.diagnostics
