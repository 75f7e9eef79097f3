"""Report generation for ShowSync."""

from showsync.reports.preview import PreviewReportGenerator

__all__ = ["PreviewReportGenerator"]
