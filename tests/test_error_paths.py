"""Error-path and malformed input tests.

Caller mistakes raise; malformed Markdown never does. Every unterminated
construct below degrades to something sensible in the tree.
"""

import pytest

from quire import ConfigError, InvalidInputError, Markdown, QuireError, parse
from quire.nodes import CodeBlock, HtmlBlock, MathBlock, Paragraph


class TestInvalidInput:
    """The source must be a string."""

    def test_none(self) -> None:
        with pytest.raises(InvalidInputError, match="got None"):
            parse(None)  # type: ignore[arg-type]

    def test_bytes(self) -> None:
        with pytest.raises(InvalidInputError, match="bytes"):
            parse(b"# hi")  # type: ignore[arg-type]

    def test_source_file_prefix(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse(None, source_file="posts/a.md")  # type: ignore[arg-type]
        assert str(exc_info.value).startswith("posts/a.md: ")
        assert exc_info.value.source_file == "posts/a.md"

    def test_is_quire_error(self) -> None:
        assert issubclass(InvalidInputError, QuireError)
        assert issubclass(ConfigError, QuireError)

    def test_markdown_parse_many_checks_each(self) -> None:
        with pytest.raises(InvalidInputError):
            Markdown().parse_many(["ok", None])  # type: ignore[list-item]

    def test_empty_string_is_valid(self) -> None:
        result = parse("")
        assert result.document.children == ()
        assert result.ok


class TestMarkdownErrors:
    """Misuse of the Markdown processor."""

    def test_render_without_renderer(self) -> None:
        md = Markdown()
        doc = md.parse("x").document
        with pytest.raises(QuireError, match="renderer"):
            md.render(doc)

    def test_call_without_renderer(self) -> None:
        with pytest.raises(QuireError):
            Markdown()("x")

    def test_bad_option(self) -> None:
        with pytest.raises(ConfigError):
            Markdown(duplicate_footnotes="error")


class TestMalformedInput:
    """Unterminated and odd constructs never raise."""

    def test_unclosed_fence(self) -> None:
        [block] = parse("```py\nx = 1").document.children
        assert isinstance(block, CodeBlock)
        assert block.lines == ("x = 1",)

    def test_unclosed_math(self) -> None:
        [block] = parse("\\[\na + b").document.children
        assert isinstance(block, MathBlock)
        assert block.content == "a + b"

    def test_html_to_end(self) -> None:
        [block] = parse("<div>\nrest").document.children
        assert isinstance(block, HtmlBlock)
        assert block.lines == ("<div>", "rest")

    def test_unclosed_comment_drops_rest(self) -> None:
        [block] = parse("keep\n<!-- open\nlost\nlost").document.children
        assert isinstance(block, Paragraph)
        assert block.children[0].content == "keep"

    @pytest.mark.parametrize(
        "source",
        [
            "[",
            "![",
            "![a](",
            "[^",
            "[^]",
            "$",
            "`",
            "\\",
            "*_*_",
            ">>",
            "#",
            "#######",
            "<",
            "<!--",
            "-->",
            "\r\n\r\n",
            "\x00",
        ],
    )
    def test_fragments(self, source: str) -> None:
        assert parse(source).document is not None
