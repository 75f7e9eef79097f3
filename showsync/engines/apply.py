"""Apply a confirmed reconciliation preview to the store."""

import logging
import sqlite3
from datetime import datetime
from typing import TYPE_CHECKING

from showsync.exceptions import MalformedTimestampError, StaleApplyError
from showsync.models.audit import AuditEntry
from showsync.models.enums import ApplyFailureReason
from showsync.models.preview import ApplyResult, ReconciliationPreview

if TYPE_CHECKING:
    from showsync.db.repository import ShowtimeRepository

logger = logging.getLogger(__name__)

RERUN_HINT = "Nothing was changed. Upload the CSV again to get a fresh preview."


class ApplyExecutor:
    """Commits a preview through the repository and reports a structured result."""

    def __init__(self, repo: "ShowtimeRepository"):
        self.repo = repo

    def apply(self, preview: ReconciliationPreview) -> ApplyResult:
        """Apply every add, update and archive, or none of them."""
        if preview.is_empty:
            return ApplyResult(success=True, message="Nothing to apply.")

        try:
            self.repo.apply_preview(preview)
        except StaleApplyError as exc:
            logger.warning("Stale preview: %s", exc)
            reason = ApplyFailureReason.NOT_FOUND if exc.missing_ids else ApplyFailureReason.CHANGED
            return ApplyResult(
                success=False,
                failed_ids=exc.stale_ids,
                failure=reason,
                message=f"{exc}. {RERUN_HINT}",
            )
        except (sqlite3.Error, MalformedTimestampError) as exc:
            logger.error("Apply failed: %s", exc)
            return ApplyResult(
                success=False,
                failure=ApplyFailureReason.ERROR,
                message=f"Failed to apply changes: {exc}. Nothing was changed.",
            )

        counts = preview.counts()
        try:
            self.repo.save_audit_entry(AuditEntry(
                timestamp=datetime.now(),
                engine="ApplyExecutor",
                operation="apply",
                inputs=counts,
                output={"success": True},
                notes="; ".join(preview.warnings) or None,
            ))
        except sqlite3.Error as exc:
            # Changes are already committed at this point.
            logger.warning("Applied preview but could not write audit entry: %s", exc)
        return ApplyResult(
            success=True,
            created=counts["adds"],
            updated=counts["updates"],
            archived=counts["archives"],
            message=(
                f"Applied {counts['adds']} add(s), {counts['updates']} update(s), "
                f"{counts['archives']} archive(s)."
            ),
        )
