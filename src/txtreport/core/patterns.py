# src/txtreport/core/patterns.py
from pathlib import Path
from typing import Iterable, Optional
import pathspec
from txtreport.config import DEFAULT_PATTERNS

def build_match_spec(patterns: Optional[Iterable[str]] = None) -> pathspec.PathSpec:
    """
    Creates a PathSpec from gitwildmatch patterns.
    Falls back to DEFAULT_PATTERNS when no patterns are given.
    """
    lines = list(patterns) if patterns else list(DEFAULT_PATTERNS)
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)

def matches(spec: pathspec.PathSpec, path: Path) -> bool:
    # Discovery is non-recursive, so only the base name is relevant
    return spec.match_file(path.name)
