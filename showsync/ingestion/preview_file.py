"""Loads a preview saved by `showsync upload --output` for the apply step."""

import json
from pathlib import Path

from pydantic import ValidationError

from showsync.exceptions import PreviewValidationError, ScheduleImportError
from showsync.models.preview import ReconciliationPreview


def validate_payload(payload: object) -> list[str]:
    """Check the preview shape. Returns a list of error messages (empty if valid)."""
    if not isinstance(payload, dict):
        return ["Preview must be a JSON object with adds, updates, and archives arrays."]

    errors: list[str] = []
    for bucket in ("adds", "updates", "archives"):
        if not isinstance(payload.get(bucket), list):
            errors.append(f'Missing or invalid "{bucket}" array.')
    if errors:
        return errors

    for index, add in enumerate(payload["adds"]):
        if not isinstance(add, dict) or not isinstance(add.get("data"), dict):
            errors.append(f'Add entry at index {index} is missing "data" object.')

    for bucket, label in (("updates", "Update"), ("archives", "Archive")):
        for index, entry in enumerate(payload[bucket]):
            existing_id = entry.get("existingId") if isinstance(entry, dict) else None
            if not isinstance(existing_id, int) or isinstance(existing_id, bool):
                errors.append(f'{label} entry at index {index} is missing a valid "existingId" (number).')
            elif not isinstance(entry.get("data"), dict):
                errors.append(f'{label} entry at index {index} is missing "data" object.')

    return errors


class PreviewFileAdapter:
    """Reads preview JSON back into a ReconciliationPreview."""

    def parse(self, file_path: Path) -> ReconciliationPreview:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            payload = json.loads(file_path.read_text())
        except json.JSONDecodeError as exc:
            raise ScheduleImportError(
                file_path.name, f"Invalid JSON. Expected a reconciliation preview ({exc})."
            ) from exc

        errors = validate_payload(payload)
        if errors:
            raise PreviewValidationError(errors)

        try:
            return ReconciliationPreview.model_validate(payload)
        except ValidationError as exc:
            raise PreviewValidationError([
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            ]) from exc
