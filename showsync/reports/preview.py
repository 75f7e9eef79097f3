"""Reconciliation preview report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from showsync.models.preview import ReconciliationPreview

TEMPLATE_DIR = Path(__file__).parent / "templates"


class PreviewReportGenerator:
    """Renders a preview as plain text for review before applying."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, preview: ReconciliationPreview) -> str:
        template = self.env.get_template("preview.txt")
        return template.render(preview=preview, counts=preview.counts())
