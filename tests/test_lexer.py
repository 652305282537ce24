from md2pptx.inline import plain_text, resolve_runs
from md2pptx.lexer import tokenize
from md2pptx.tokens import (
    HeadingToken,
    ListToken,
    OtherBlockToken,
    ParagraphToken,
    RuleToken,
    TableToken,
)


def test_headings_carry_depth_and_plain_text():
    tokens = tokenize("# Hello *world*\n\n## Sub\n")
    assert tokens == [HeadingToken(depth=1, text="Hello world"), HeadingToken(depth=2, text="Sub")]


def test_paragraph_keeps_raw_text_and_inline_tree():
    tok, = tokenize("Hello **bold and [a link](https://example.com) here**.\n")
    assert isinstance(tok, ParagraphToken)
    assert tok.text == "Hello **bold and [a link](https://example.com) here**."

    runs = resolve_runs(tok.inline)
    assert plain_text(runs) == "Hello bold and a link here."
    link_runs = [r for r in runs if r.style.hyperlink is not None]
    assert [r.text for r in link_runs] == ["a link"]
    assert link_runs[0].style.bold
    assert link_runs[0].style.hyperlink.url == "https://example.com"


def test_blockquote_becomes_paragraph_with_raw_source():
    tok, = tokenize("> Note: remember timeline\n")
    assert isinstance(tok, ParagraphToken)
    assert tok.text == "> Note: remember timeline"


def test_soft_wrap_is_a_space_not_a_break():
    tok, = tokenize("line one\nline two\n")
    runs = resolve_runs(tok.inline)
    assert not any(r.style.breaks_line for r in runs)
    assert plain_text(runs) == "line one line two"


def test_hard_break_becomes_line_break_run():
    tok, = tokenize("line one  \nline two\n")
    runs = resolve_runs(tok.inline)
    assert sum(r.style.breaks_line for r in runs) == 1
    assert plain_text(runs) == "line one\nline two"


def test_strikethrough_falls_back_to_raw_source():
    tok, = tokenize("keep ~~old~~ text\n")
    runs = resolve_runs(tok.inline)
    assert plain_text(runs) == "keep ~~old~~ text"


def test_list_items_and_task_markers():
    tok, = tokenize("- [x] shipped\n- [ ] pending\n- plain\n")
    assert isinstance(tok, ListToken)
    assert not tok.ordered
    shipped, pending, plain = tok.items
    assert shipped.is_task and shipped.checked and shipped.text == "shipped"
    assert pending.is_task and not pending.checked
    assert not plain.is_task
    assert plain_text(resolve_runs(shipped.inline)) == "shipped"


def test_ordered_list_is_flagged():
    tok, = tokenize("1. one\n2. two\n")
    assert tok.ordered
    assert [i.text for i in tok.items] == ["one", "two"]


def test_table_cells_are_raw_text():
    tok, = tokenize("| A | **B** |\n|---|---|\n| 1 | 2 |\n| 3 | 4 |\n")
    assert tok == TableToken(header=("A", "**B**"), rows=(("1", "2"), ("3", "4")))


def test_rule_and_other_blocks():
    tokens = tokenize("para\n\n---\n\n```\ncode\n```\n")
    assert isinstance(tokens[1], RuleToken)
    assert tokens[2] == OtherBlockToken(kind="fence")


def test_empty_input_yields_no_tokens():
    assert tokenize("") == []


def test_task_item_keeps_reference_links():
    md = "- [x] see [docs][d]\n- plain [docs][d]\n\n[d]: https://x.example\n"
    tok, = tokenize(md)
    task, plain = tok.items
    assert task.is_task and task.checked

    for item in (task, plain):
        links = [r for r in resolve_runs(item.inline) if r.style.hyperlink is not None]
        assert [r.text for r in links] == ["docs"]
        assert links[0].style.hyperlink.url == "https://x.example"
