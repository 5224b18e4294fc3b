"""Render an element tree as Hiccup-style nested-vector notation.

``<div id="main" class="a b" title="x">hi</div>`` becomes
``[div#main.a.b {:title "x"} "hi"]``. The ``id`` attribute always moves into
the tag header; ``class`` moves there too when shorthand is enabled and the
value is representable as ``.segment`` tokens. Whitespace-only text children
are dropped.
"""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

from .dom_model import ElementNode, Node, StructureError, TextNode, check_element
from .edn import keyword, quote_string

# Characters that cannot appear inside a ``.segment`` of the tag header.
SHORTHAND_FORBIDDEN = "/"

# HTML whitespace is ASCII only; U+00A0 and other Unicode spaces are content.
HTML_WHITESPACE = " \t\n\f\r"
_HTML_WHITESPACE_RE = re.compile("[" + re.escape(HTML_WHITESPACE) + "]+")


def is_blank(text: str) -> bool:
    return not text.strip(HTML_WHITESPACE)


def split_classes(class_value: str) -> List[str]:
    stripped = class_value.strip(HTML_WHITESPACE)
    return _HTML_WHITESPACE_RE.split(stripped) if stripped else []


def class_shorthand_eligible(node: ElementNode, use_shorthand: bool) -> bool:
    if not use_shorthand:
        return False
    class_value = node.attributes.get("class")
    if class_value is None or is_blank(class_value):
        return False
    return not any(ch in class_value for ch in SHORTHAND_FORBIDDEN)


def format_tag_header(node: ElementNode, use_class_shorthand: bool) -> str:
    header = node.tag
    element_id = node.attributes.get("id")
    if element_id is not None:
        header += f"#{element_id}"
    if use_class_shorthand:
        class_value = node.attributes.get("class")
        if class_value is not None:
            header += "." + ".".join(split_classes(class_value))
    return header


def format_attr_map(attributes: Dict[str, str], remove_class: bool) -> str:
    """Return `` {:k "v" ...}`` for the attributes left after the header, or ``""``."""
    tokens: List[str] = []
    for name, value in attributes.items():
        if name == "id" or (remove_class and name == "class"):
            continue
        tokens.append(f"{keyword(name)} {quote_string(value)}")
    if not tokens:
        return ""
    return " {" + " ".join(tokens) + "}"


def format_children(children: Sequence[Node], use_shorthand: bool) -> str:
    parts: List[str] = []
    for child in children:
        if isinstance(child, TextNode):
            if not isinstance(child.content, str):
                raise StructureError(f"text node content must be a string, got {child.content!r}")
            if not is_blank(child.content):
                parts.append(" " + quote_string(child.content))
        elif isinstance(child, ElementNode):
            parts.append(" " + convert(child, use_shorthand=use_shorthand))
        else:
            raise StructureError(f"child must be TextNode or ElementNode, got {type(child).__name__}")
    return "".join(parts)


def convert(node: ElementNode, *, use_shorthand: bool = True) -> str:
    """Return the notation string for ``node`` and its subtree."""
    check_element(node)
    eligible = class_shorthand_eligible(node, use_shorthand)
    return (
        "["
        + format_tag_header(node, eligible)
        + format_attr_map(node.attributes, eligible)
        + format_children(node.children, use_shorthand)
        + "]"
    )


__all__ = [
    "class_shorthand_eligible",
    "convert",
    "format_attr_map",
    "format_children",
    "format_tag_header",
]
