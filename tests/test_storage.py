from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from pagesmith.core.errors import FileWriteError
from pagesmith.core.storage import write_page


def test_write_page_creates_parent_folders(tmp_path: Path) -> None:
    target = tmp_path / "tech" / "post.html"

    written = write_page(target, "<p>café</p>")

    assert written == target
    assert target.read_text(encoding="utf-8") == "<p>café</p>"


def test_write_page_overwrites_by_default(tmp_path: Path) -> None:
    target = tmp_path / "post.html"
    target.write_text("old", encoding="utf-8")

    write_page(target, "new")

    assert target.read_text(encoding="utf-8") == "new"


def test_write_page_can_refuse_to_overwrite(tmp_path: Path) -> None:
    target = tmp_path / "index.html"
    target.write_text("keep me", encoding="utf-8")

    with pytest.raises(FileWriteError) as excinfo:
        write_page(target, "replacement", overwrite=False)

    assert excinfo.value.stage == "create"
    assert target.read_text(encoding="utf-8") == "keep me"


def test_create_failure_is_reported(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(FileWriteError) as excinfo:
        write_page(blocker / "post.html", "<p>x</p>")

    assert excinfo.value.stage == "create"
    assert "Failed to create" in str(excinfo.value)


def test_write_failure_is_reported(tmp_path: Path) -> None:
    with pytest.raises(FileWriteError) as excinfo:
        write_page(tmp_path / "post.html", "<p>\ud800</p>")

    assert excinfo.value.stage == "write"
    assert "Failed to write" in str(excinfo.value)


def test_invalid_path_is_a_create_failure(tmp_path: Path) -> None:
    with pytest.raises(FileWriteError) as excinfo:
        write_page(tmp_path / "bad\x00name.html", "<p>x</p>")

    assert excinfo.value.stage == "create"
