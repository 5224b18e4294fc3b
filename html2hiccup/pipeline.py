"""HTML text to Hiccup notation, end to end."""

from __future__ import annotations

from .html_parse import parse_html, top_level_elements
from .models import ConverterConfig
from .transcoder import convert


def convert_html(text: str, config: ConverterConfig | None = None) -> str:
    """Parse ``text`` and convert the selected root element.

    Returns ``""`` when the input holds no element. With ``config.all_roots``
    every top-level element is converted, one per line.
    """
    config = config or ConverterConfig()
    document = parse_html(text)
    elements = top_level_elements(document, skip_document_frame=config.skip_document_frame)
    if not config.all_roots:
        elements = elements[:1]
    return "\n".join(convert(element, use_shorthand=config.use_shorthand) for element in elements)


__all__ = ["convert_html"]
