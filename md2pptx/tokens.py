# md2pptx/tokens.py
"""
Block and inline token types handed from the markdown lexer to the slide builder.
Inline tokens form a strictly nested tree.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Bold:
    children: Tuple["InlineToken", ...] = ()


@dataclass(frozen=True)
class Italic:
    children: Tuple["InlineToken", ...] = ()


@dataclass(frozen=True)
class CodeSpan:
    text: str


@dataclass(frozen=True)
class Link:
    url: str
    title: Optional[str] = None
    children: Tuple["InlineToken", ...] = ()


@dataclass(frozen=True)
class PlainText:
    text: str
    children: Optional[Tuple["InlineToken", ...]] = None


@dataclass(frozen=True)
class LineBreak:
    pass


@dataclass(frozen=True)
class OtherInline:
    raw: str


InlineToken = Union[Bold, Italic, CodeSpan, Link, PlainText, LineBreak, OtherInline]


@dataclass(frozen=True)
class HeadingToken:
    depth: int
    text: str


@dataclass(frozen=True)
class ParagraphToken:
    text: str
    inline: Tuple[InlineToken, ...] = ()


@dataclass(frozen=True)
class ListItem:
    text: str
    inline: Tuple[InlineToken, ...] = ()
    is_task: bool = False
    checked: bool = False


@dataclass(frozen=True)
class ListToken:
    items: Tuple[ListItem, ...] = ()
    ordered: bool = False


@dataclass(frozen=True)
class TableToken:
    header: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RuleToken:
    pass


@dataclass(frozen=True)
class OtherBlockToken:
    kind: str


BlockToken = Union[
    HeadingToken, ParagraphToken, ListToken, TableToken, RuleToken, OtherBlockToken
]
