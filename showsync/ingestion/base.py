"""Base adapter interface for schedule ingestion."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from showsync.models.showtime import CSV_COLUMNS, REQUIRED_COLUMNS


@dataclass
class ParsedBatch:
    """Bundles the output from an adapter's parse method."""

    source: str
    headers: list[str] = field(default_factory=list)
    rows: list[dict[str, str]] = field(default_factory=list)
    structural_errors: list[str] = field(default_factory=list)

    @property
    def missing_required(self) -> list[str]:
        return [column for column in REQUIRED_COLUMNS if column not in self.headers]

    @property
    def missing_optional(self) -> list[str]:
        return [
            column for column in CSV_COLUMNS
            if column not in self.headers and column not in REQUIRED_COLUMNS
        ]

    def warnings(self) -> list[str]:
        """Non-blocking notes to carry into the preview."""
        if not self.missing_optional:
            return []
        return [
            f"CSV is missing optional column(s): {', '.join(self.missing_optional)}. "
            "These fields will be empty."
        ]


class BaseAdapter(ABC):
    """Abstract base class for schedule upload adapters."""

    @abstractmethod
    def parse(self, file_path: Path) -> ParsedBatch:
        """Parse a file and return its header and rows."""
        ...

    @abstractmethod
    def validate(self, data: ParsedBatch) -> list[str]:
        """Validate parsed data. Returns a list of validation error messages."""
        ...
