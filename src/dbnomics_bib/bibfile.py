# file: src/dbnomics_bib/bibfile.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def append_bib_entries(entries: Iterable[str], path: Path) -> Path:
    """
    Append rendered entries to a .bib file, one blank line between entries.

    Atomic write: existing content + new entries go to a temp file in the
    same directory, which then replaces the target.
    """
    new_entries = [entry.strip() for entry in entries if entry.strip()]
    if not new_entries:
        raise ValueError("No bibliography entries to write.")

    path = Path(path)
    ensure_dir(path.parent)

    existing = path.read_text(encoding="utf-8").rstrip() if path.exists() else ""
    blocks = ([existing] if existing else []) + new_entries

    tmp = path.with_suffix(path.suffix + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        f.write("\n\n".join(blocks) + "\n")
    os.replace(tmp, path)

    logger.info("[bib] wrote %s entr%s to %s", len(new_entries), "y" if len(new_entries) == 1 else "ies", path)
    return path
