# md2pptx/convert.py
"""
End-to-end pipeline: markdown text -> slide model -> layout -> pptx bytes.
"""
from pathlib import Path
from typing import List, Optional, Tuple

from .builder import build_slides
from .layout import layout_deck
from .lexer import tokenize
from .pptx_builder import build_presentation
from .schemas import PlacedSlide, Slide


def parse_markdown(text: str) -> Tuple[List[Slide], List[str]]:
    return build_slides(tokenize(text))


def plan_deck(text: str) -> Tuple[List[PlacedSlide], List[str]]:
    slides, diagnostics = parse_markdown(text)
    return layout_deck(slides), diagnostics


def markdown_to_pptx(
    text: str,
    template_bytes: Optional[bytes] = None,
    base_dir: Optional[Path] = None,
) -> bytes:
    placed, _ = plan_deck(text)
    return build_presentation(placed, template_bytes=template_bytes, base_dir=base_dir)
