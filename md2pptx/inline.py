# md2pptx/inline.py
"""
Flattens a nested inline token tree into an ordered list of styled text runs.
Each run's style is the union of every formatting span it sits inside.
"""
from typing import List, Optional, Sequence

from .schemas import Hyperlink, RunStyle, StyledRun
from .tokens import (
    Bold,
    CodeSpan,
    InlineToken,
    Italic,
    LineBreak,
    Link,
    OtherInline,
    PlainText,
)


def resolve_runs(tokens: Sequence[InlineToken], style: Optional[RunStyle] = None) -> List[StyledRun]:
    style = style or RunStyle()
    runs: List[StyledRun] = []

    for tok in tokens:
        if isinstance(tok, Bold):
            runs.extend(resolve_runs(tok.children, style.model_copy(update={"bold": True})))
        elif isinstance(tok, Italic):
            runs.extend(resolve_runs(tok.children, style.model_copy(update={"italic": True})))
        elif isinstance(tok, CodeSpan):
            runs.append(StyledRun(text=f" {tok.text} ", style=style.model_copy(update={"monospace": True})))
        elif isinstance(tok, Link):
            link = Hyperlink(url=tok.url, tooltip=tok.title or tok.url)
            runs.extend(resolve_runs(tok.children, style.model_copy(update={"hyperlink": link})))
        elif isinstance(tok, PlainText):
            # text wrapping overlapping spans carries its own sub-tree
            if tok.children is not None:
                runs.extend(resolve_runs(tok.children, style))
            else:
                runs.append(StyledRun(text=tok.text, style=style))
        elif isinstance(tok, LineBreak):
            runs.append(StyledRun(text="\n", style=style.model_copy(update={"breaks_line": True})))
        elif isinstance(tok, OtherInline):
            if tok.raw:
                runs.append(StyledRun(text=tok.raw))

    return runs


def plain_text(runs: Sequence[StyledRun]) -> str:
    return "".join(run.text for run in runs)
