"""Data models for the page generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple


@dataclass(frozen=True)
class SiteStructure:
    """Snapshot of a single directory scan.

    ``categories`` keeps directory enumeration order and never holds
    ``assets`` or a dot-prefixed name.
    """

    root_path: Path
    index_path: Optional[Path] = None
    categories: Tuple[str, ...] = field(default_factory=tuple)
    assets_path: Optional[Path] = None

    @property
    def project_name(self) -> str:
        return self.root_path.name or str(self.root_path)

    @property
    def missing_index(self) -> bool:
        return self.index_path is None

    def template_path(self, template_name: str) -> Path:
        return self.root_path / template_name

    def describe(self) -> str:
        index_status = str(self.index_path) if self.index_path else "not found"
        assets_status = str(self.assets_path) if self.assets_path else "not found"
        return (
            "SiteStructure:\n"
            f"  Root: {self.root_path}\n"
            f"  Index: {index_status}\n"
            f"  Assets: {assets_status}\n"
            f"  Categories: [{', '.join(self.categories)}]"
        )

    def __str__(self) -> str:
        return self.describe()
