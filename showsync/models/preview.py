"""Reconciliation preview and apply result models."""

from typing import Literal

from pydantic import Field

from showsync.models.enums import ApplyFailureReason
from showsync.models.showtime import FieldDiff, ShowtimeRecord, _CamelModel


class AddAction(_CamelModel):
    """A showtime in the upload that is not on the active schedule."""

    type: Literal["add"] = "add"
    data: ShowtimeRecord


class UpdateAction(_CamelModel):
    """A matched showtime whose fields changed."""

    type: Literal["update"] = "update"
    existing_id: int
    data: ShowtimeRecord
    diffs: list[FieldDiff] = Field(min_length=1)


class ArchiveAction(_CamelModel):
    """An active showtime missing from the upload."""

    type: Literal["archive"] = "archive"
    existing_id: int
    data: ShowtimeRecord


class ReconciliationPreview(_CamelModel):
    """Proposed changes to the active schedule, awaiting confirmation."""

    adds: list[AddAction] = Field(default_factory=list)
    updates: list[UpdateAction] = Field(default_factory=list)
    archives: list[ArchiveAction] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.adds or self.updates or self.archives)

    def counts(self) -> dict[str, int]:
        return {
            "adds": len(self.adds),
            "updates": len(self.updates),
            "archives": len(self.archives),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)


class ApplyResult(_CamelModel):
    """Outcome of applying a preview to the store."""

    success: bool
    created: int = 0
    updated: int = 0
    archived: int = 0
    failed_ids: list[int] = Field(default_factory=list)
    failure: ApplyFailureReason | None = None
    message: str = ""
