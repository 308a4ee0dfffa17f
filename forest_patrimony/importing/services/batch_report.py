"""Per-request accumulation of import outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..types import BatchOutcome, ImportRowError


@dataclass
class BatchReport:
    """Created/updated/skipped counters plus ordered row errors.

    A report is atomic per row only; nothing here spans rows.
    """

    created: int = 0
    updated: int = 0
    skipped: int = 0
    errors: list[ImportRowError] = field(default_factory=list)

    def record_created(self) -> None:
        self.created += 1

    def record_updated(self) -> None:
        self.updated += 1

    def record_skipped(self, row_number: int, code: str | None, message: str) -> None:
        self.skipped += 1
        self.errors.append({"row": row_number, "code": code or None, "error": message})

    @property
    def processed(self) -> int:
        return self.created + self.updated + self.skipped

    def as_dict(self) -> BatchOutcome:
        return {
            "created": self.created,
            "updated": self.updated,
            "skipped": self.skipped,
            "errors": [dict(error) for error in self.errors],
        }
