"""Classify one directory level into a :class:`SiteStructure`."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

from .errors import DirectoryReadError, NotADirectory
from .models import SiteStructure

logger = logging.getLogger(__name__)

INDEX_FILENAME = "index.html"
ASSETS_DIRNAME = "assets"


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def classify(path: str | Path) -> SiteStructure:
    """Scan the immediate children of ``path``.

    Entries whose metadata cannot be read are skipped rather than reported.
    Raises :class:`NotADirectory` or :class:`DirectoryReadError`.
    """
    root = Path(path)
    try:
        root = root.expanduser()
    except RuntimeError:
        # Unknown user in a "~name" prefix; keep the path as given.
        pass
    root = root.absolute()
    try:
        is_dir = root.is_dir()
    except (OSError, ValueError):
        is_dir = False
    if not is_dir:
        raise NotADirectory(root)

    index_path: Optional[Path] = None
    assets_path: Optional[Path] = None
    categories: List[str] = []

    try:
        with os.scandir(root) as entries:
            for entry in entries:
                name = entry.name
                try:
                    is_file = entry.is_file()
                    is_dir = not is_file and entry.is_dir()
                except OSError as exc:
                    logger.debug("Skipping unreadable entry %s: %s", entry.path, exc)
                    continue

                if is_file:
                    if name == INDEX_FILENAME:
                        index_path = root / name
                elif is_dir:
                    if name == ASSETS_DIRNAME:
                        assets_path = root / name
                    elif not is_hidden_name(name):
                        categories.append(name)
    except OSError as exc:
        raise DirectoryReadError(root, exc) from exc

    structure = SiteStructure(
        root_path=root,
        index_path=index_path,
        categories=tuple(categories),
        assets_path=assets_path,
    )
    logger.info("%s", structure.describe())
    return structure
