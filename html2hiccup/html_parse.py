"""BeautifulSoup glue: parse HTML text into the element tree model."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .dom_model import ElementNode, Node, TextNode

DOCUMENT_TAG = "[document]"


def _convert_tag(tag: Tag) -> ElementNode:
    children: List[Node] = []
    for child in tag.contents:
        if isinstance(child, Tag):
            children.append(_convert_tag(child))
            continue
        # Comment, Doctype, CData, ProcessingInstruction and Declaration are
        # all PreformattedString subclasses.
        if isinstance(child, PreformattedString):
            continue
        if isinstance(child, NavigableString):
            children.append(TextNode(str(child)))
    return ElementNode(tag=tag.name, attributes=dict(tag.attrs), children=children)


def parse_html(text: str) -> ElementNode:
    """Parse ``text`` and return a synthetic ``[document]`` root element."""
    soup = BeautifulSoup(text, "html.parser", multi_valued_attributes=None)
    return _convert_tag(soup)


def _element_children(node: ElementNode) -> List[ElementNode]:
    return [child for child in node.children if isinstance(child, ElementNode)]


def _frame_level(document: ElementNode, skip_document_frame: bool) -> ElementNode:
    """Return the element whose children are the conversion candidates."""
    level = document
    if not skip_document_frame:
        return level
    elements = _element_children(level)
    if len(elements) == 1 and elements[0].tag == "html":
        level = elements[0]
        body = next((child for child in _element_children(level) if child.tag == "body"), None)
        if body is None:
            return level
        return body
    if len(elements) == 1 and elements[0].tag == "body":
        return elements[0]
    return level


def top_level_elements(document: ElementNode, *, skip_document_frame: bool = True) -> List[ElementNode]:
    level = _frame_level(document, skip_document_frame)
    elements = _element_children(level)
    if skip_document_frame and level.tag == "html":
        # <html> without <body>: its content sits beside <head>.
        elements = [element for element in elements if element.tag != "head"]
    return elements


def select_root(document: ElementNode, *, skip_document_frame: bool = True) -> Optional[ElementNode]:
    """Pick the element to convert.

    With ``skip_document_frame`` the ``<html>``/``<body>`` wrapper is skipped
    and the body's first element is returned. Without it the first top-level
    element of the document (usually ``<html>``) is returned. ``None`` means
    the input has no element at all.
    """
    elements = top_level_elements(document, skip_document_frame=skip_document_frame)
    return elements[0] if elements else None


__all__ = ["DOCUMENT_TAG", "parse_html", "select_root", "top_level_elements"]
