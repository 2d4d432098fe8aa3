from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from pagesmith.core import generator
from pagesmith.core.errors import FileWriteError, InvalidCategoryName
from pagesmith.core.renderer import render
from pagesmith.core.scanner import classify


def test_slugify_filename_generates_safe_names() -> None:
    assert generator.slugify_filename("My Test Page!") == "my-test-page"
    assert generator.slugify_filename("   ") == "page"


def test_page_filename_uses_title_slug() -> None:
    assert generator.page_filename("Hello, World") == "hello-world.html"
    assert generator.page_filename("") == "page.html"


def test_create_index_links_categories(tmp_path: Path) -> None:
    site = tmp_path / "garden"
    site.mkdir()
    (site / "roses").mkdir()
    (site / "R&D").mkdir()
    (site / "assets").mkdir()

    path = generator.create_index(classify(site))

    html = path.read_text(encoding="utf-8")
    assert path == site.absolute() / "index.html"
    assert "<title>garden</title>" in html
    assert '<a href="roses/">roses</a>' in html
    assert "R&amp;D" in html
    assert "assets/" not in html
    assert classify(site).index_path == path


def test_create_index_without_categories(tmp_path: Path) -> None:
    html = generator.create_index(classify(tmp_path)).read_text(encoding="utf-8")
    assert "<p>Welcome to" in html


def test_create_index_never_overwrites(tmp_path: Path) -> None:
    structure = classify(tmp_path)
    (tmp_path / "index.html").write_text("mine", encoding="utf-8")

    with pytest.raises(FileWriteError):
        generator.create_index(structure)
    assert (tmp_path / "index.html").read_text(encoding="utf-8") == "mine"


def test_default_template_renders(tmp_path: Path) -> None:
    structure = classify(tmp_path)

    template = generator.create_default_template(structure)
    raw = template.read_text(encoding="utf-8")
    html = render(template, "First Post", "Hello there")

    assert template.name == "default.html"
    assert "{{title}}" in raw and "{{content}}" in raw
    assert "<h1>First Post</h1>" in html
    assert "<article>Hello there</article>" in html
    assert "{{" not in html


def test_create_default_template_with_custom_name(tmp_path: Path) -> None:
    template = generator.create_default_template(classify(tmp_path), "page.html")
    assert template == tmp_path.absolute() / "page.html"
    assert template.exists()


def test_create_category(tmp_path: Path) -> None:
    folder = generator.create_category(classify(tmp_path), "  recipes ")

    assert folder.is_dir()
    assert folder.name == "recipes"
    assert classify(tmp_path).categories == ("recipes",)


@pytest.mark.parametrize("name", ["", "   ", "assets", ".drafts", "a/b", "a\\b", "..", "bad\x00name"])
def test_create_category_rejects_names_that_are_not_categories(tmp_path: Path, name: str) -> None:
    with pytest.raises(InvalidCategoryName):
        generator.create_category(classify(tmp_path), name)
    assert classify(tmp_path).categories == ()


def test_create_category_reports_existing_folder(tmp_path: Path) -> None:
    (tmp_path / "news").mkdir()

    with pytest.raises(FileWriteError) as excinfo:
        generator.create_category(classify(tmp_path), "news")
    assert excinfo.value.stage == "create"
