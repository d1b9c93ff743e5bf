# === diagnostics.py ===
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticKind(Enum):
    SOURCE_UNREADABLE = "source_unreadable"
    MALFORMED_RECORD = "malformed_record"
    DUPLICATE_KEY = "duplicate_key"


@dataclass(frozen=True)
class Diagnostic:
    """One skipped record or unreadable source reported by a load pass."""

    kind: DiagnosticKind
    line: Optional[int]  # 1-based; None for source-level problems
    detail: str

    def __str__(self):
        where = f"line {self.line}" if self.line is not None else "source"
        return f"{self.kind.value} ({where}): {self.detail}"
