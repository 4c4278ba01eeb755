"""Unit tests for the Markdown reader."""

from pathlib import Path
from textwrap import dedent

import pytest

from unittutor.doccheck.errors import DocCheckError, DocsDecodeError
from unittutor.doccheck.markdown import parse_document, parse_markdown, render_toc, slugify

# pylint: disable=magic-value-comparison

DOC = Path("doc.md")


def parse(text: str):
    """Parse dedented ``text`` as ``doc.md``."""
    return parse_markdown(DOC, dedent(text).lstrip("\n"))


# ============================================================================
#                               slugify
# ============================================================================


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Getting Started", "getting-started"),
        ("The AAA Pattern: Arrange, Act, Assert", "the-aaa-pattern-arrange-act-assert"),
        ("Don't over-mock", "dont-over-mock"),
        ("`pytest.raises` and friends", "pytestraises-and-friends"),
        ("snake_case stays", "snake_case-stays"),
        ("See [the docs](x.md) now", "see-the-docs-now"),
        ("Two  spaces", "two--spaces"),
        ("Ünïcode Wörds", "ünïcode-wörds"),
    ],
)
def test_slugify(text, expected):
    """Slugs follow GitHub's anchor rules."""
    assert slugify(text) == expected


# ============================================================================
#                               headings
# ============================================================================


def test_headings_levels_lines_and_anchors():
    """ATX headings are collected with level, text, line and anchor."""
    doc = parse(
        """
        # Title

        ## Section One ##
        text
        ###### Deep
        """
    )
    assert [(h.level, h.text, h.line, h.anchor) for h in doc.headings] == [
        (1, "Title", 1, "title"),
        (2, "Section One", 3, "section-one"),
        (6, "Deep", 5, "deep"),
    ]
    assert doc.title == "Title"


def test_duplicate_headings_get_numbered_anchors():
    """Repeated headings get -1, -2 suffixes like on GitHub."""
    doc = parse(
        """
        ## Example
        ## Example
        ## Example
        """
    )
    assert [h.anchor for h in doc.headings] == ["example", "example-1", "example-2"]


@pytest.mark.parametrize("line", ["#NoSpace", "####### seven", "    # indented code"])
def test_not_headings(line):
    """Missing space, more than six hashes or 4-space indent are not headings."""
    assert not parse_markdown(DOC, line + "\n").headings


def test_hash_in_text_is_kept():
    """A closing sequence needs leading whitespace, so C# keeps its hash."""
    assert parse("## Learning C#\n").headings[0].text == "Learning C#"


def test_setext_headings():
    """Underlined headings count too, at levels 1 and 2."""
    doc = parse("Title\n=====\n\nPart\n----\n")
    assert [(h.level, h.text, h.line) for h in doc.headings] == [
        (1, "Title", 1),
        (2, "Part", 4),
    ]


def test_document_without_headings_has_no_title():
    """title is None when there are no headings."""
    assert parse("plain text\n").title is None


# ============================================================================
#                               links
# ============================================================================


def test_inline_links_and_images():
    """Inline links, titled links and images are collected with line numbers."""
    doc = parse(
        """
        See [setup](01-setup.md) and [AAA](02-aaa.md#arrange "AAA").

        ![diagram](img/cycle.png)
        <https://example.com> is an autolink and is ignored.
        """
    )
    assert [(ln.text, ln.target, ln.line, ln.image) for ln in doc.links] == [
        ("setup", "01-setup.md", 1, False),
        ("AAA", "02-aaa.md#arrange", 1, False),
        ("diagram", "img/cycle.png", 3, True),
    ]


def test_reference_links_resolve_to_their_definitions():
    """`[text][label]` links are reported where they are used, with the defined target."""
    doc = parse(
        """
        Read [pytest] first.

        Then [the other page][local].

        [pytest]: https://docs.pytest.org
        [local]: ./other.md
        """
    )
    assert [(ln.text, ln.target, ln.line) for ln in doc.links] == [
        ("pytest", "https://docs.pytest.org", 1),
        ("the other page", "./other.md", 3),
    ]


def test_link_line_within_a_paragraph():
    """A link on a wrapped paragraph line reports that line, not the paragraph start."""
    doc = parse(
        """
        # Title

        A paragraph that
        wraps before [the link](target.md).
        """
    )
    assert [(ln.target, ln.line) for ln in doc.links] == [("target.md", 4)]


def test_links_in_code_spans_are_ignored():
    """Link syntax inside backticks is code, not a link."""
    doc = parse("Write `[text](target.md)` to link, or see [real](real.md).\n")
    assert [ln.target for ln in doc.links] == ["real.md"]


def test_angle_bracket_target():
    """<target> form is unwrapped."""
    assert parse("[a](<other.md>)\n").links[0].target == "other.md"


# ============================================================================
#                               code blocks
# ============================================================================


def test_fenced_blocks():
    """Fences record language, info, start line and content."""
    doc = parse(
        """
        Intro

        ```python title="x"
        x = 1
        ```

        ~~~
        plain
        ~~~
        """
    )
    first, second = doc.code_blocks
    assert (first.language, first.info, first.start_line) == (
        "python",
        'python title="x"',
        3,
    )
    assert first.source == "x = 1\n"
    assert first.first_source_line == 4
    assert first.closed
    assert (second.language, second.source, second.start_line) == ("", "plain\n", 7)


def test_headings_and_links_inside_fences_are_ignored():
    """Content of a fence is opaque."""
    doc = parse(
        """
        ```markdown
        # not a heading
        [not](a-link.md)
        ```
        """
    )
    assert not doc.headings
    assert not doc.links
    assert doc.code_blocks[0].language == "markdown"


def test_longer_fence_needs_longer_close():
    """A fence closes only with the same character and at least the same length."""
    doc = parse(
        """
        ````md
        ```python
        x = 1
        ```
        ````
        after
        """
    )
    assert len(doc.code_blocks) == 1
    assert doc.code_blocks[0].source == "```python\nx = 1\n```\n"


def test_tilde_fence_not_closed_by_backticks():
    """Fence characters must match."""
    doc = parse("~~~\nx\n```\n~~~\n")
    assert doc.code_blocks[0].source == "x\n```\n"


def test_unterminated_fence_runs_to_end():
    """An unclosed fence swallows the rest of the file and is flagged."""
    doc = parse("```python\nx = 1\n# Heading\n")
    block = doc.code_blocks[0]
    assert not block.closed
    assert block.source == "x = 1\n# Heading\n"
    assert not doc.headings


def test_indented_fence_content_is_unindented():
    """Fence indentation (e.g. inside a list item) is stripped from content."""
    doc = parse("1. item\n\n   ```python\n   def f():\n       return 1\n   ```\n")
    assert doc.code_blocks[0].source == "def f():\n    return 1\n"


def test_fence_in_nested_list_item():
    """A fence inside a second-level list item is a code block with its indent removed."""
    doc = parse_markdown(
        DOC,
        "- outer\n  - inner\n\n    ```python\n    # Setup\n    def broken(:\n    ```\n",
    )
    (block,) = doc.code_blocks
    assert (block.language, block.start_line, block.closed) == ("python", 4, True)
    assert block.source == "# Setup\ndef broken(:\n"


def test_fence_in_block_quote():
    """Quoted fences are found and closed by a quoted closing fence."""
    doc = parse_markdown(DOC, "> ```python\n> x = 1\n> ```\n")
    (block,) = doc.code_blocks
    assert block.source == "x = 1\n"
    assert block.closed


def test_indented_code_is_not_a_fence():
    """Four-space indented code is not a fenced block and is not checked."""
    assert not parse_markdown(DOC, "para\n\n    ```python\n    x = (\n    ```\n").code_blocks


def test_empty_fence():
    """An empty block has empty source."""
    assert parse("```\n```\n").code_blocks[0].source == ""


# ============================================================================
#                               parse_document / render_toc
# ============================================================================


def test_parse_document_reads_file(tmp_path):
    """parse_document reads UTF-8 from disk and records the path."""
    path = tmp_path / "lesson.md"
    path.write_text("# Leçon\n", encoding="utf-8")
    doc = parse_document(path)
    assert doc.path == path
    assert doc.title == "Leçon"


def test_parse_document_rejects_non_utf8(tmp_path):
    """A file in another encoding is a checker error naming the file."""
    path = tmp_path / "latin1.md"
    path.write_bytes("# Caf\u00e9\n".encode("latin-1"))
    with pytest.raises(DocsDecodeError) as excinfo:
        parse_document(path)
    assert isinstance(excinfo.value, DocCheckError)
    assert excinfo.value.path == path
    assert "UTF-8" in str(excinfo.value)


def test_render_toc():
    """Nested list of level 2-3 headings with anchors."""
    doc = parse(
        """
        # Title
        ## One
        ### One A
        #### Too deep
        ## Two
        """
    )
    assert render_toc(doc) == (
        "- [One](#one)\n"
        "  - [One A](#one-a)\n"
        "- [Two](#two)\n"
    )


def test_render_toc_empty():
    """No headings in range renders nothing."""
    assert render_toc(parse("# Only a title\n")) == ""
