# md2pptx/lexer.py
"""
Adapter over markdown-it-py: turns its syntax tree into the block/inline tokens
consumed by the slide builder.
"""
import re
from typing import List, Optional, Tuple

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .tokens import (
    BlockToken,
    Bold,
    CodeSpan,
    HeadingToken,
    InlineToken,
    Italic,
    LineBreak,
    Link,
    ListItem,
    ListToken,
    OtherBlockToken,
    OtherInline,
    ParagraphToken,
    PlainText,
    RuleToken,
    TableToken,
)

TASK_MARKER = re.compile(r"^\[([ xX])\]\s+")


def _parser() -> MarkdownIt:
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def _raw(node: SyntaxTreeNode) -> str:
    if node.type == "image":
        return f"![{node.content}]({node.attrs.get('src', '')})"
    if node.children:
        inner = "".join(_raw(child) for child in node.children)
        return f"{node.markup}{inner}{node.markup}"
    return node.content


def _inline(nodes) -> Tuple[InlineToken, ...]:
    out: List[InlineToken] = []
    for node in nodes:
        if node.type == "text":
            out.append(PlainText(node.content))
        elif node.type == "strong":
            out.append(Bold(_inline(node.children)))
        elif node.type == "em":
            out.append(Italic(_inline(node.children)))
        elif node.type == "code_inline":
            out.append(CodeSpan(node.content))
        elif node.type == "link":
            title = node.attrs.get("title") or None
            out.append(Link(str(node.attrs.get("href", "")), title, _inline(node.children)))
        elif node.type == "softbreak":
            out.append(PlainText(" "))
        elif node.type == "hardbreak":
            out.append(LineBreak())
        else:
            out.append(OtherInline(_raw(node)))
    return tuple(out)


def _node_text(node: SyntaxTreeNode) -> str:
    if node.type in ("text", "code_inline"):
        return node.content
    if node.type in ("softbreak", "hardbreak"):
        return " "
    return "".join(_node_text(child) for child in node.children)


def _inline_child(node: SyntaxTreeNode) -> Optional[SyntaxTreeNode]:
    return next((child for child in node.children if child.type == "inline"), None)


def _paragraph_inlines(node: SyntaxTreeNode) -> List[SyntaxTreeNode]:
    found = []
    for child in node.children:
        if child.type == "paragraph":
            inline = _inline_child(child)
            if inline is not None:
                found.append(inline)
    return found


def _join_paragraphs(parts: List[Tuple[InlineToken, ...]]) -> Tuple[InlineToken, ...]:
    joined: List[InlineToken] = []
    for i, part in enumerate(parts):
        if i:
            joined.append(LineBreak())
        joined.extend(part)
    return tuple(joined)


def _heading(node: SyntaxTreeNode) -> HeadingToken:
    inline = _inline_child(node)
    return HeadingToken(depth=int(node.tag[1:]), text=_node_text(inline).strip() if inline else "")


def _blockquote(node: SyntaxTreeNode, lines: List[str]) -> ParagraphToken:
    start, end = node.map or (0, 0)
    raw = "\n".join(lines[start:end])
    inlines = _paragraph_inlines(node)
    return ParagraphToken(text=raw, inline=_join_paragraphs([_inline(i.children) for i in inlines]))


def _list_item(node: SyntaxTreeNode, md: MarkdownIt, env: dict) -> ListItem:
    # nested lists inside an item are not carried
    inlines = _paragraph_inlines(node)
    parts = [_inline(i.children) for i in inlines]
    text = "\n".join(i.content for i in inlines)
    is_task = checked = False

    m = TASK_MARKER.match(text)
    if m:
        is_task = True
        checked = m.group(1) in "xX"
        rest = inlines[0].content[m.end():]
        reparsed = SyntaxTreeNode(md.parseInline(rest, env))
        parts[0] = _inline(reparsed.children[0].children) if reparsed.children else ()
        text = text[m.end():]

    wrapper = PlainText(text, _join_paragraphs(parts))
    return ListItem(text=text, inline=(wrapper,), is_task=is_task, checked=checked)


def _cell_text(cell: SyntaxTreeNode) -> str:
    inline = _inline_child(cell)
    return inline.content.strip() if inline else ""


def _table(node: SyntaxTreeNode) -> TableToken:
    header: Tuple[str, ...] = ()
    rows: List[Tuple[str, ...]] = []
    for section in node.children:
        for tr in section.children:
            cells = tuple(_cell_text(cell) for cell in tr.children)
            if section.type == "thead":
                header = cells
            else:
                rows.append(cells)
    return TableToken(header=header, rows=tuple(rows))


def tokenize(text: str) -> List[BlockToken]:
    md = _parser()
    source = text or ""
    lines = source.splitlines()
    env: dict = {}
    root = SyntaxTreeNode(md.parse(source, env))
    tokens: List[BlockToken] = []

    for node in root.children:
        if node.type == "heading":
            tokens.append(_heading(node))
        elif node.type == "paragraph":
            inline = _inline_child(node)
            if inline is not None:
                tokens.append(ParagraphToken(text=inline.content, inline=_inline(inline.children)))
        elif node.type == "blockquote":
            tokens.append(_blockquote(node, lines))
        elif node.type in ("bullet_list", "ordered_list"):
            items = tuple(_list_item(item, md, env) for item in node.children if item.type == "list_item")
            tokens.append(ListToken(items=items, ordered=node.type == "ordered_list"))
        elif node.type == "table":
            tokens.append(_table(node))
        elif node.type == "hr":
            tokens.append(RuleToken())
        else:
            tokens.append(OtherBlockToken(kind=node.type))

    return tokens
