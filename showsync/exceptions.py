"""Custom exceptions for ShowSync."""


class ShowSyncError(Exception):
    """Base exception for schedule reconciliation errors."""


class MalformedTimestampError(ShowSyncError):
    """Raised when a timestamp value cannot be parsed into an instant."""

    def __init__(self, value: str, field: str | None = None):
        self.value = value
        self.field = field
        where = f" in '{field}'" if field else ""
        super().__init__(f"Malformed timestamp{where}: {value!r}")


class ScheduleImportError(ShowSyncError):
    """Raised when an uploaded file cannot be read as a schedule batch."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"Import error from {source}: {message}")


class PreviewValidationError(ShowSyncError):
    """Raised when a saved preview payload does not have the expected shape."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("Invalid preview: " + "; ".join(errors))


class StaleApplyError(ShowSyncError):
    """Raised when a preview references showtimes that changed since it was built.

    The whole apply is rolled back; the caller should reconcile again.
    """

    def __init__(self, missing_ids: list[int], changed_ids: list[int] | None = None):
        self.missing_ids = missing_ids
        self.changed_ids = changed_ids or []
        parts = []
        if self.missing_ids:
            parts.append(f"not found: {', '.join(str(i) for i in self.missing_ids)}")
        if self.changed_ids:
            parts.append(f"changed: {', '.join(str(i) for i in self.changed_ids)}")
        super().__init__(
            "Showtimes were modified or deleted since the preview was generated "
            f"({'; '.join(parts)})"
        )

    @property
    def stale_ids(self) -> list[int]:
        return sorted(set(self.missing_ids) | set(self.changed_ids))
