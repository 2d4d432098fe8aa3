from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from pagesmith.settings import SettingsManager, app_data_dir


def test_defaults_are_written_on_first_load(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"

    settings = SettingsManager(path)

    assert settings.template_name == "default.html"
    assert settings.get("last_open_dir") == ""
    assert json.loads(path.read_text(encoding="utf-8"))["template_name"] == "default.html"


def test_set_persists_values(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    SettingsManager(path).set("template_name", "post.html")

    assert SettingsManager(path).template_name == "post.html"


def test_corrupt_settings_fall_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    settings = SettingsManager(path)

    assert settings.template_name == "default.html"
    assert json.loads(path.read_text(encoding="utf-8"))["template_name"] == "default.html"


def test_app_data_dir_honours_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGESMITH_HOME", str(tmp_path / "home"))

    target = app_data_dir()

    assert target == tmp_path / "home"
    assert target.is_dir()
    assert SettingsManager().path == target / "settings.json"
