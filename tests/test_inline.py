"""Inline scanner tests: precedence, verbatim spans and delimiter matching."""

from quire import ParseConfig, parse
from quire.nodes import (
    CodeSpan,
    Emphasis,
    EscapedLiteral,
    FootnoteReference,
    Image,
    Link,
    MathSpan,
    Text,
)


def _inlines(source: str, config: ParseConfig | None = None):
    [para] = parse(source, config=config).document.children
    return para.children


def _shape(nodes) -> list:
    """Structure of an inline tuple without locations."""
    out: list = []
    for node in nodes:
        match node:
            case Text(content=content):
                out.append(content)
            case Emphasis(kind=kind, children=children):
                out.append((kind, _shape(children)))
            case CodeSpan(code=code):
                out.append(("code", code))
            case MathSpan(content=content):
                out.append(("math", content))
            case Link(target=target, children=children):
                out.append(("link", target, _shape(children)))
            case Image(alt=alt, target=target, attributes=attributes):
                out.append(("image", alt, target, attributes))
            case FootnoteReference(label=label):
                out.append(("ref", label))
            case EscapedLiteral(char=char):
                out.append(("escaped", char))
    return out


class TestText:
    """Plain text handling."""

    def test_plain(self) -> None:
        assert _shape(_inlines("just words")) == ["just words"]

    def test_newlines_kept(self) -> None:
        assert _shape(_inlines("a\nb")) == ["a\nb"]

    def test_lone_specials_are_text(self) -> None:
        assert _shape(_inlines("wow! [brackets] cost $5")) == ["wow! [brackets] cost $5"]


class TestEscapes:
    """Backslash escapes."""

    def test_escaped_stars_fold_into_text(self) -> None:
        nodes = _inlines("\\*not emphasis\\*")
        assert _shape(nodes) == ["*not emphasis*"]
        assert len(nodes) == 1

    def test_backslash_before_letter_is_literal(self) -> None:
        assert _shape(_inlines("a\\b")) == ["a\\b"]

    def test_trailing_backslash(self) -> None:
        assert _shape(_inlines("end\\")) == ["end\\"]

    def test_escaped_backtick_and_dollar(self) -> None:
        assert _shape(_inlines("\\`x\\` \\$y\\$")) == ["`x` $y$"]

    def test_preserve_escapes(self) -> None:
        nodes = _inlines("\\*x\\*", ParseConfig(preserve_escapes=True))
        assert _shape(nodes) == [("escaped", "*"), "x", ("escaped", "*")]


class TestCodeSpans:
    """Code spans are verbatim."""

    def test_simple(self) -> None:
        assert _shape(_inlines("use `x*y` here")) == ["use ", ("code", "x*y"), " here"]

    def test_longer_run_contains_backtick(self) -> None:
        assert _shape(_inlines("``a`b``")) == [("code", "a`b")]

    def test_run_length_must_match(self) -> None:
        assert _shape(_inlines("``a`")) == ["``a`"]

    def test_unclosed(self) -> None:
        assert _shape(_inlines("`oops")) == ["`oops"]

    def test_markup_inside_kept(self) -> None:
        assert _shape(_inlines("`[a](b) $c$ \\*`")) == [("code", "[a](b) $c$ \\*")]


class TestMathSpans:
    """Inline $...$ math."""

    def test_simple(self) -> None:
        assert _shape(_inlines("so $x^2$ grows")) == ["so ", ("math", "x^2"), " grows"]

    def test_verbatim_content(self) -> None:
        assert _shape(_inlines("$a*b*c_d$")) == [("math", "a*b*c_d")]

    def test_empty_is_text(self) -> None:
        assert _shape(_inlines("$$")) == ["$$"]

    def test_code_span_wins_over_math(self) -> None:
        assert _shape(_inlines("`$x$`")) == [("code", "$x$")]


class TestImages:
    """Images and their attribute token."""

    def test_plain_image(self) -> None:
        assert _shape(_inlines("![cat](cat.png)")) == [("image", "cat", "cat.png", ())]

    def test_width_attribute(self) -> None:
        [image] = _inlines("![cat](cat.png){30}")
        assert image.attributes == (("width", "30"),)
        assert image.attribute_map == {"width": "30"}

    def test_percent_attribute(self) -> None:
        [image] = _inlines("![cat](cat.png){50%}")
        assert image.attribute_map == {"width": "50%"}

    def test_non_token_brace_stays_text(self) -> None:
        nodes = _inlines("![cat](cat.png){not a token}")
        assert _shape(nodes) == [("image", "cat", "cat.png", ()), "{not a token}"]

    def test_custom_attribute_key(self) -> None:
        [image] = _inlines("![a](b){x}", ParseConfig(image_attribute_key="class"))
        assert image.attribute_map == {"class": "x"}

    def test_bang_without_image(self) -> None:
        assert _shape(_inlines("hi! [x]")) == ["hi! [x]"]


class TestLinks:
    """Links and their recursive text."""

    def test_link(self) -> None:
        assert _shape(_inlines("[site](https://example.com)")) == [
            ("link", "https://example.com", ["site"])
        ]

    def test_text_parsed_recursively(self) -> None:
        assert _shape(_inlines("[a *b*](u)")) == [("link", "u", ["a ", ("bold", ["b"])])]

    def test_nested_brackets(self) -> None:
        assert _shape(_inlines("[a [b] c](u)")) == [("link", "u", ["a [b] c"])]

    def test_balanced_parens_in_target(self) -> None:
        assert _shape(_inlines("[w](https://en.wikipedia.org/wiki/A_(b))")) == [
            ("link", "https://en.wikipedia.org/wiki/A_(b)", ["w"])
        ]

    def test_brackets_without_target(self) -> None:
        assert _shape(_inlines("[just brackets]")) == ["[just brackets]"]


class TestFootnoteReferences:
    """[^label] references."""

    def test_reference(self) -> None:
        nodes = _inlines("Claim.[^1]\n\n[^1]: x")
        assert _shape(nodes) == ["Claim.", ("ref", "1")]

    def test_definition_marker_mid_line_is_text(self) -> None:
        assert _shape(_inlines("see [^a]: here")) == ["see [^a]: here"]

    def test_reference_line_number(self) -> None:
        ref = _inlines("first\nsecond [^n]")[-1]
        assert isinstance(ref, FootnoteReference)
        assert ref.location.lineno == 2


class TestEmphasis:
    """Delimiter runs: * is bold, _ is italic."""

    def test_bold(self) -> None:
        assert _shape(_inlines("*strong*")) == [("bold", ["strong"])]

    def test_italic(self) -> None:
        assert _shape(_inlines("_soft_")) == [("italic", ["soft"])]

    def test_double_run(self) -> None:
        assert _shape(_inlines("**x**")) == [("bold", ["x"])]

    def test_nesting(self) -> None:
        assert _shape(_inlines("*bold _and italic_*")) == [
            ("bold", ["bold ", ("italic", ["and italic"])])
        ]

    def test_unmatched_opener_is_literal(self) -> None:
        assert _shape(_inlines("**bold")) == ["**bold"]

    def test_one_span_and_one_literal(self) -> None:
        assert _shape(_inlines("*a* and *b")) == [("bold", ["a"]), " and *b"]

    def test_run_length_mismatch(self) -> None:
        assert _shape(_inlines("**a*")) == ["**a*"]

    def test_spaced_delimiters_do_not_match(self) -> None:
        assert _shape(_inlines("a * b * c")) == ["a * b * c"]

    def test_intraword_underscore(self) -> None:
        assert _shape(_inlines("snake_case_name")) == ["snake_case_name"]

    def test_abandoned_inner_opener(self) -> None:
        assert _shape(_inlines("*a _b* c_")) == [("bold", ["a _b"]), " c_"]

    def test_emphasis_spans_lines(self) -> None:
        assert _shape(_inlines("*one\ntwo*")) == [("bold", ["one\ntwo"])]
