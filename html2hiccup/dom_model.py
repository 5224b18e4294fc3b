"""Simple element tree model fed to the Hiccup transcoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


class StructureError(ValueError):
    """Raised when a tree does not have the element/text shape."""


@dataclass
class TextNode:
    content: str


@dataclass
class ElementNode:
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)


Node = ElementNode | TextNode


def check_element(node: object) -> ElementNode:
    """Check one element's own fields (not its subtree) and return it."""
    if not isinstance(node, ElementNode):
        raise StructureError(f"expected ElementNode, got {type(node).__name__}")
    if not isinstance(node.tag, str) or not node.tag:
        raise StructureError(f"element tag must be a non-empty string, got {node.tag!r}")
    for key, value in node.attributes.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise StructureError(f"<{node.tag}> attribute {key!r}={value!r} is not a string pair")
    return node


def validate_tree(node: Node) -> None:
    if isinstance(node, TextNode):
        if not isinstance(node.content, str):
            raise StructureError(f"text node content must be a string, got {node.content!r}")
        return
    check_element(node)
    for child in node.children:
        validate_tree(child)


def node_to_dict(node: Node) -> Any:
    """Render a tree as JSON-compatible data; text children become bare strings."""
    if isinstance(node, TextNode):
        return node.content
    return {
        "tag": node.tag,
        "attributes": dict(node.attributes),
        "children": [node_to_dict(child) for child in node.children],
    }
