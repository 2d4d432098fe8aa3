"""Starter files and folders for a scanned site."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from jinja2 import DictLoader, Environment, select_autoescape

from .errors import FileWriteError, InvalidCategoryName
from .models import SiteStructure
from .scanner import ASSETS_DIRNAME, INDEX_FILENAME, is_hidden_name
from .storage import write_page

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "default.html"

_TEMPLATES = {
    "index.html": """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ site_name }}</title>
</head>
<body>
  <header><h1>{{ site_name }}</h1></header>
  <main>
{%- if categories %}
    <ul class="categories">
{%- for category in categories %}
      <li><a href="{{ category }}/">{{ category }}</a></li>
{%- endfor %}
    </ul>
{%- else %}
    <p>Welcome to {{ site_name }}.</p>
{%- endif %}
  </main>
</body>
</html>
""",
    "default.html": """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{% raw %}{{title}}{% endraw %} | {{ site_name }}</title>
</head>
<body>
  <header><a href="/index.html">{{ site_name }}</a></header>
  <main>
    <h1>{% raw %}{{title}}{% endraw %}</h1>
    <article>{% raw %}{{content}}{% endraw %}</article>
  </main>
</body>
</html>
""",
}


def _env() -> Environment:
    return Environment(
        loader=DictLoader(_TEMPLATES),
        autoescape=select_autoescape(["html", "xml"]),
        keep_trailing_newline=True,
    )


def slugify_filename(name: str) -> str:
    slug = re.sub(r"[^a-zA-Z0-9-]+", "-", name).strip("-").lower()
    return slug or "page"


def page_filename(title: str) -> str:
    """Suggest an output filename for a page titled ``title``."""
    return f"{slugify_filename(title)}.html"


def create_index(structure: SiteStructure) -> Path:
    """Write a starter ``index.html`` linking every category.

    Never overwrites an existing file.
    """
    html = _env().get_template("index.html").render(
        site_name=structure.project_name,
        categories=list(structure.categories),
    )
    target = structure.root_path / INDEX_FILENAME
    write_page(target, html, overwrite=False)
    logger.info("Created index for %s", structure.project_name)
    return target


def create_default_template(
    structure: SiteStructure, template_name: str = DEFAULT_TEMPLATE_NAME
) -> Path:
    """Write a starter page template holding the ``{{title}}``/``{{content}}`` tokens."""
    html = _env().get_template("default.html").render(site_name=structure.project_name)
    target = structure.template_path(template_name)
    write_page(target, html, overwrite=False)
    logger.info("Created template %s", target)
    return target


def validate_category_name(name: str) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise InvalidCategoryName(name, "name is empty")
    if "\x00" in cleaned:
        raise InvalidCategoryName(name, "name contains a NUL character")
    if "/" in cleaned or "\\" in cleaned or cleaned in {".", ".."}:
        raise InvalidCategoryName(name, "name must be a single folder name")
    if cleaned == ASSETS_DIRNAME:
        raise InvalidCategoryName(name, f"'{ASSETS_DIRNAME}' is reserved")
    if is_hidden_name(cleaned):
        raise InvalidCategoryName(name, "hidden folders are not categories")
    return cleaned


def create_category(structure: SiteStructure, name: str) -> Path:
    """Create a new category folder directly inside the scanned root."""
    folder = structure.root_path / validate_category_name(name)
    try:
        folder.mkdir()
    except (OSError, ValueError) as exc:
        raise FileWriteError(folder, "create", exc) from exc
    logger.info("Created category %s", folder.name)
    return folder
