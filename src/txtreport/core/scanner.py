# src/txtreport/core/scanner.py
import logging
from pathlib import Path
from typing import List, Optional

import pathspec

from txtreport.core.patterns import build_match_spec, matches

logger = logging.getLogger(__name__)

class InvalidDirectoryError(ValueError):
    """Raised when the input path is empty, missing, or not a directory."""

def validate_directory(raw: Optional[str]) -> Path:
    if raw is None or not raw.strip():
        raise InvalidDirectoryError("No directory given")

    try:
        directory = Path(raw.strip()).expanduser()
    except RuntimeError as e:
        # "~someone/..." with no such user
        raise InvalidDirectoryError(f"Cannot expand {raw.strip()!r}: {e}") from e

    if not directory.exists():
        raise InvalidDirectoryError(f"Directory not found: {directory}")
    if not directory.is_dir():
        raise InvalidDirectoryError(f"Not a directory: {directory}")
    return directory

def find_text_files(directory: Path, spec: Optional[pathspec.PathSpec] = None) -> List[Path]:
    """
    Lists regular files directly inside `directory` whose names match `spec`.
    Subdirectories are not descended into. OSError from the listing propagates.
    """
    if spec is None:
        spec = build_match_spec()

    found = [
        item for item in directory.iterdir()
        if item.is_file() and matches(spec, item)
    ]
    found.sort(key=lambda p: p.name)
    logger.debug("Found %d matching file(s) in %s", len(found), directory)
    return found
