# src/txtreport/models.py
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class CountRecord:
    """Immutable per-file result: line/word counts, or an error message with zero counts."""
    file_name: str
    line_count: int
    word_count: int
    error_message: Optional[str] = None

    @property
    def has_error(self) -> bool:
        return bool(self.error_message)

    @classmethod
    def failed(cls, file_name: str, message: str) -> "CountRecord":
        return cls(file_name=file_name, line_count=0, word_count=0, error_message=message)
