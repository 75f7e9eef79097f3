"""Tests for the plain-text preview report."""

from conftest import make_record
from showsync.models.enums import ShowtimeField
from showsync.models.preview import AddAction, ArchiveAction, ReconciliationPreview, UpdateAction
from showsync.models.showtime import FieldDiff
from showsync.reports.preview import PreviewReportGenerator


class TestPreviewReport:
    def test_empty_preview(self):
        text = PreviewReportGenerator().render(ReconciliationPreview())
        assert "=== Reconciliation Preview ===" in text
        assert "No changes." in text
        assert "--- Add ---" not in text

    def test_all_sections(self):
        preview = ReconciliationPreview(
            adds=[AddAction(data=make_record(movie_title="Wonka", auditorium=""))],
            updates=[UpdateAction(
                existing_id=1,
                data=make_record(auditorium="Auditorium 5"),
                diffs=[FieldDiff(field=ShowtimeField.AUDITORIUM, old_value="Auditorium 1", new_value="Auditorium 5")],
            )],
            archives=[ArchiveAction(existing_id=2, data=make_record(movie_title="Oppenheimer"))],
            warnings=["Row 3 (Barbie) skipped"],
        )
        text = PreviewReportGenerator().render(preview)

        assert "Adds:      1" in text
        assert "Updates:   1" in text
        assert "Archives:  1" in text
        assert "+ Wonka @ 2025-03-15T20:00:00Z (Downtown Cinema 7, --)" in text
        assert "~ #1 Dune: Part Two" in text
        assert 'auditorium: "Auditorium 1" -> "Auditorium 5"' in text
        assert "- #2 Oppenheimer" in text
        assert "Warnings:" in text
        assert "Row 3 (Barbie) skipped" in text
        assert "No changes." not in text
