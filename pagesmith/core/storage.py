"""Write generated pages to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import FileWriteError

logger = logging.getLogger(__name__)


def write_page(path: str | Path, html: str, overwrite: bool = True) -> Path:
    """Write ``html`` to ``path`` as UTF-8, creating parent folders.

    Raises :class:`FileWriteError` with ``stage="create"`` when the file
    cannot be opened (or already exists and ``overwrite`` is false) and
    ``stage="write"`` when writing its contents fails.
    """
    path = Path(path)
    mode = "w" if overwrite else "x"
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = path.open(mode, encoding="utf-8", newline="")
    except (OSError, ValueError) as exc:
        raise FileWriteError(path, "create", exc) from exc
    with fh:
        try:
            fh.write(html)
        except (OSError, UnicodeEncodeError) as exc:
            raise FileWriteError(path, "write", exc) from exc
    logger.info("Wrote %s", path)
    return path
