"""JSON form of a Quire document tree.

Every node becomes a dict tagged with ``_type`` (the class name); locations
become ``SourceLocation``-tagged dicts; child tuples become lists. Reading
the dict back rebuilds the same frozen nodes, so ``from_json(to_json(doc))
== doc`` holds for any parsed document.

Typical uses are caching parsed posts between site builds and checking what
text actually reached the tree (comment stripping, verbatim blocks).

Example:
    from quire import parse
    from quire.serialization import to_json, from_json

    doc = parse("# Hello *World*").document
    assert from_json(to_json(doc)) == doc

Thread Safety:
    Pure functions with no shared state.

"""

import json
from dataclasses import fields
from typing import Any

from quire.location import SourceLocation
from quire.nodes import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    EscapedLiteral,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    HtmlBlock,
    Image,
    Link,
    MathBlock,
    MathSpan,
    Node,
    Paragraph,
    Text,
)

_LOCATION_TAG = "SourceLocation"

# Tag -> class, for every node type that can appear in a tree
_NODE_TYPES: dict[str, type[Node]] = {
    cls.__name__: cls
    for cls in (
        Document,
        Heading,
        Paragraph,
        CodeBlock,
        MathBlock,
        HtmlBlock,
        BlockQuote,
        FootnoteDefinition,
        Text,
        Emphasis,
        CodeSpan,
        MathSpan,
        Link,
        Image,
        FootnoteReference,
        EscapedLiteral,
    )
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a node (and everything below it) to plain JSON types.

    Args:
        node: Any node from a Quire tree.

    Returns:
        Dict with a ``_type`` tag plus one key per dataclass field.

    """
    data: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        data[f.name] = _encode(getattr(node, f.name))
    return data


def _encode(value: Any) -> Any:
    match value:
        case Node():
            return to_dict(value)
        case SourceLocation():
            return {
                "_type": _LOCATION_TAG,
                "lineno": value.lineno,
                "col_offset": value.col_offset,
                "end_lineno": value.end_lineno,
                "source_file": value.source_file,
            }
        case tuple():
            return [_encode(item) for item in value]
        case _:
            return value


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node from the output of to_dict().

    Raises:
        ValueError: If ``_type`` is missing or names no known node type.

    """
    tag = data.get("_type")
    if tag is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(tag)
    if node_cls is None:
        msg = f"Unknown node type: {tag!r}"
        raise ValueError(msg)

    kwargs = {f.name: _decode(data[f.name]) for f in fields(node_cls) if f.name in data}
    return node_cls(**kwargs)


def _decode(value: Any) -> Any:
    if isinstance(value, list):
        # Child sequences and image attribute pairs are tuples on nodes
        return tuple(_decode(item) for item in value)
    if not isinstance(value, dict):
        return value

    tag = value.get("_type")
    if tag == _LOCATION_TAG:
        return SourceLocation(
            lineno=value["lineno"],
            col_offset=value["col_offset"],
            end_lineno=value.get("end_lineno"),
            source_file=value.get("source_file"),
        )
    if tag is not None:
        return from_dict(value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document. Keys are sorted so equal trees give equal text."""
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from to_json() output.

    Raises:
        ValueError: If the JSON root is not a Document.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
