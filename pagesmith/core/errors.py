"""Exception types raised by the scanner, renderer and writers.

Every exception carries a message suitable for showing to the user as-is.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal


class PagesmithError(Exception):
    """Base class for all expected failures."""


class ScanError(PagesmithError):
    pass


class NotADirectory(ScanError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} is not a directory")
        self.path = path


class DirectoryReadError(ScanError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to read directory {path}: {reason}")
        self.path = path


class RenderError(PagesmithError):
    pass


class TemplateReadError(RenderError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to read template {path}: {reason}")
        self.path = path


class ParseError(RenderError):
    def __init__(self, reason: object) -> None:
        super().__init__(f"Failed to parse template: {reason}")


class SerializeError(RenderError):
    def __init__(self, reason: object) -> None:
        super().__init__(f"Failed to serialize HTML: {reason}")


class NoProjectSelected(PagesmithError):
    def __init__(self) -> None:
        super().__init__("No project selected")


WriteStage = Literal["create", "write"]


class FileWriteError(PagesmithError):
    """Output could not be created (``stage="create"``) or written (``stage="write"``)."""

    def __init__(self, path: Path, stage: WriteStage, reason: object) -> None:
        verb = "create" if stage == "create" else "write"
        super().__init__(f"Failed to {verb} {path}: {reason}")
        self.path = path
        self.stage = stage


class InvalidCategoryName(PagesmithError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid category name {name!r}: {reason}")
        self.name = name
