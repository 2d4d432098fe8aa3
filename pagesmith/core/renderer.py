"""Render a page by substituting placeholders into an HTML template.

The template is parsed into a document tree, every text node containing
``{{title}}`` or ``{{content}}`` is rewritten and the tree is serialized
back to HTML. Attribute values and tag names are never inspected.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bs4 import BeautifulSoup, NavigableString
from bs4.builder import ParserRejectedMarkup
from bs4.element import PreformattedString

from .errors import ParseError, SerializeError, TemplateReadError

logger = logging.getLogger(__name__)

TITLE_TOKEN = "{{title}}"
CONTENT_TOKEN = "{{content}}"
PARSER = "html5lib"


def read_template(template_path: str | Path) -> str:
    path = Path(template_path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateReadError(path, exc) from exc


def parse_template(markup: str) -> BeautifulSoup:
    # html5lib never rejects input; missing html/head/body elements are implied.
    try:
        return BeautifulSoup(markup, PARSER)
    except ParserRejectedMarkup as exc:
        raise ParseError(exc) from exc


def load_template(template_path: str | Path) -> BeautifulSoup:
    return parse_template(read_template(template_path))


def _is_text_node(node: object) -> bool:
    # Comments, doctypes and CDATA are PreformattedString subclasses.
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def replace_placeholders(document: BeautifulSoup, title: str, content: str) -> int:
    """Replace every token in every text node of ``document``.

    ``{{title}}`` is replaced before ``{{content}}``, so a title holding
    ``{{content}}`` receives the content as well. Returns the number of
    text nodes rewritten.
    """
    targets = [
        node
        for node in document.descendants
        if _is_text_node(node) and (TITLE_TOKEN in node or CONTENT_TOKEN in node)
    ]
    for node in targets:
        new_text = str(node).replace(TITLE_TOKEN, title).replace(CONTENT_TOKEN, content)
        # Keep the node class so script/style text stays unescaped on output.
        node.replace_with(type(node)(new_text))
    return len(targets)


def serialize(document: BeautifulSoup) -> str:
    try:
        return document.decode(formatter="minimal")
    except (UnicodeError, ValueError) as exc:
        raise SerializeError(exc) from exc


def _fill(document: BeautifulSoup, title: str, content: str) -> str:
    replaced = replace_placeholders(document, title, content)
    logger.debug("Substituted placeholders in %d text node(s)", replaced)
    return serialize(document)


def render_markup(markup: str, title: str, content: str) -> str:
    """Render an in-memory template."""
    return _fill(parse_template(markup), title, content)


def render(template_path: str | Path, title: str, content: str) -> str:
    """Load ``template_path`` and render it with ``title`` and ``content``.

    Raises :class:`TemplateReadError`, :class:`ParseError` or
    :class:`SerializeError`; no partial output is returned.
    """
    html = _fill(load_template(template_path), title, content)
    logger.info("Generated HTML from %s (%d chars)", template_path, len(html))
    return html
