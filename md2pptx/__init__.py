"""
md2pptx - compile a markdown document into presentation slides.

- tokenize: markdown text -> block tokens (markdown-it-py)
- SlideModelBuilder / build_slides: block tokens -> Slide model
- layout_slide / layout_deck: Slide -> positioned elements
- build_presentation: positioned slides -> .pptx bytes (python-pptx)
"""

from .builder import SlideModelBuilder, build_slides
from .convert import markdown_to_pptx, parse_markdown, plan_deck
from .inline import resolve_runs
from .layout import layout_deck, layout_slide
from .lexer import tokenize
from .pptx_builder import build_presentation

__all__ = [
    "SlideModelBuilder",
    "build_slides",
    "build_presentation",
    "layout_deck",
    "layout_slide",
    "markdown_to_pptx",
    "parse_markdown",
    "plan_deck",
    "resolve_runs",
    "tokenize",
]
