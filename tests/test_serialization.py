"""Tests for quire.serialization: AST JSON round-trip."""

import json

import pytest

from quire import ParseConfig, parse
from quire.location import SourceLocation
from quire.nodes import Document, Image, Paragraph, Text
from quire.serialization import from_dict, from_json, to_dict, to_json

_LOC = SourceLocation(lineno=1, col_offset=1)

_POST = """\
# Title with $x$ and `code`

Body *bold* _it_ [link](u) ![img](i.png){30} note[^1] \\*.

>> ```py
>> a = 1
>> ```

\\[
E = mc^2
\\]

<div>
raw
</div>

[^1]: The *note*.
"""


class TestRoundTrip:
    """Documents survive to_json/from_json unchanged."""

    def test_full_post(self) -> None:
        doc = parse(_POST, source_file="post.md").document
        assert from_json(to_json(doc)) == doc

    def test_escaped_literals(self) -> None:
        doc = parse("\\*x\\*", config=ParseConfig(preserve_escapes=True)).document
        assert from_json(to_json(doc)) == doc

    def test_deterministic(self) -> None:
        assert to_json(parse(_POST).document) == to_json(parse(_POST).document)

    def test_indent(self) -> None:
        text = to_json(parse("x").document, indent=2)
        assert "\n  " in text
        assert json.loads(text)["_type"] == "Document"


class TestDictShape:
    """to_dict output."""

    def test_type_and_location(self) -> None:
        data = to_dict(Paragraph(location=_LOC, children=(Text(location=_LOC, content="hi"),)))
        assert data["_type"] == "Paragraph"
        assert data["location"]["lineno"] == 1
        assert data["children"][0] == {
            "_type": "Text",
            "content": "hi",
            "location": data["children"][0]["location"],
        }

    def test_image_attributes_rebuild_as_pairs(self) -> None:
        image = Image(location=_LOC, alt="a", target="t", attributes=(("width", "30"),))
        rebuilt = from_dict(to_dict(image))
        assert rebuilt == image
        assert rebuilt.attribute_map == {"width": "30"}


class TestErrors:
    """Malformed serialized input."""

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"content": "x"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Table"})

    def test_from_json_requires_document(self) -> None:
        text = json.dumps(to_dict(Text(location=_LOC, content="x")))
        with pytest.raises(ValueError, match="Expected Document"):
            from_json(text)

    def test_empty_document(self) -> None:
        doc = Document(location=_LOC, children=())
        assert from_json(to_json(doc)) == doc
