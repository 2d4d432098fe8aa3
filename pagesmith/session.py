"""Coordinates scans and renders for the currently selected project."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Optional

from .core import generator, renderer, scanner, storage
from .core.errors import NoProjectSelected
from .core.models import SiteStructure

logger = logging.getLogger(__name__)


def render_page(
    structure: SiteStructure,
    title: str,
    content: str,
    template_name: str = generator.DEFAULT_TEMPLATE_NAME,
) -> str:
    """Render the template that lives in the root of ``structure``."""
    return renderer.render(structure.template_path(template_name), title, content)


class Session:
    """Holds the last successful scan; every render reads from it."""

    def __init__(self, template_name: str = generator.DEFAULT_TEMPLATE_NAME) -> None:
        self.template_name = template_name
        self._structure: Optional[SiteStructure] = None
        self._lock = threading.Lock()

    @property
    def structure(self) -> Optional[SiteStructure]:
        return self._structure

    def require_structure(self) -> SiteStructure:
        structure = self._structure
        if structure is None:
            raise NoProjectSelected()
        return structure

    @property
    def template_path(self) -> Path:
        return self.require_structure().template_path(self.template_name)

    def scan(self, directory: str | Path) -> SiteStructure:
        """Classify ``directory`` and make it the current project.

        On failure the previously selected project is kept.
        """
        structure = scanner.classify(directory)
        with self._lock:
            self._structure = structure
        return structure

    def rescan(self) -> SiteStructure:
        return self.scan(self.require_structure().root_path)

    def render(self, title: str, content: str) -> str:
        with self._lock:
            structure = self.require_structure()
            return render_page(structure, title, content, self.template_name)

    def generate_page(self, title: str, content: str, output_path: str | Path) -> Path:
        """Render and save a page; nothing is written if rendering fails."""
        html = self.render(title, content)
        return storage.write_page(output_path, html)

    def suggested_output_path(self, title: str) -> Path:
        return self.require_structure().root_path / generator.page_filename(title)

    def create_index(self) -> Path:
        path = generator.create_index(self.require_structure())
        self.rescan()
        return path

    def create_default_template(self) -> Path:
        return generator.create_default_template(self.require_structure(), self.template_name)

    def create_category(self, name: str) -> Path:
        path = generator.create_category(self.require_structure(), name)
        self.rescan()
        return path
