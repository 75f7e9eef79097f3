"""Typer CLI interface for ShowSync."""

from pathlib import Path

import typer

from showsync.config import DB_ENV_VAR, DEFAULT_DB_PATH
from showsync.logs import configure_logging
from showsync.models.enums import ShowtimeField, SortOrder, TimestampPolicy

app = typer.Typer(
    name="showsync",
    help="ShowSync: reconcile partner showtime uploads against the active schedule.",
)

DB_OPTION = typer.Option(
    DEFAULT_DB_PATH,
    "--db",
    envvar=DB_ENV_VAR,
    help="Path to the SQLite database file",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """ShowSync: reconcile partner showtime uploads against the active schedule."""
    configure_logging(verbose)


def _open_repository(db: Path):
    """Open (creating if needed) the schedule database. Returns (conn, repo)."""
    from showsync.db.repository import ShowtimeRepository
    from showsync.db.schema import create_schema

    db.parent.mkdir(parents=True, exist_ok=True)
    conn = create_schema(db)
    return conn, ShowtimeRepository(conn)


def _apply_preview(repo, preview, yes: bool) -> None:
    """Confirm with the user, then apply. Exits 1 on failure."""
    from showsync.engines.apply import ApplyExecutor

    if preview.is_empty:
        typer.echo("Nothing to apply.")
        return

    if not yes and not typer.confirm("Apply these changes to the active schedule?"):
        typer.echo("Aborted. Nothing was changed.")
        raise typer.Exit(0)

    result = ApplyExecutor(repo).apply(preview)
    if not result.success:
        typer.echo(f"Error: {result.message}", err=True)
        if result.failed_ids:
            typer.echo(
                f"  Showtime id(s): {', '.join(str(i) for i in result.failed_ids)} ({result.failure})",
                err=True,
            )
        raise typer.Exit(1)
    typer.echo(result.message)


@app.command()
def upload(
    csv_file: Path = typer.Argument(..., help="Partner showtime CSV file"),
    db: Path = DB_OPTION,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Save the preview as JSON for `showsync apply`",
    ),
    on_bad_timestamp: TimestampPolicy = typer.Option(
        TimestampPolicy.SKIP,
        "--on-bad-timestamp",
        help="Skip rows with unparseable timestamps, or abort the whole upload",
    ),
    apply_changes: bool = typer.Option(
        False,
        "--apply",
        help="Apply the preview after confirmation",
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Preview how a partner CSV changes the active schedule.

    Nothing is written to the database unless --apply is given and the
    change is confirmed.
    """
    from showsync.engines.reconciliation import ScheduleReconciler
    from showsync.exceptions import MalformedTimestampError, ScheduleImportError
    from showsync.ingestion.csv_schedule import CsvScheduleAdapter
    from showsync.reports.preview import PreviewReportGenerator

    adapter = CsvScheduleAdapter()
    try:
        batch = adapter.parse(csv_file)
    except (FileNotFoundError, ScheduleImportError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    errors = adapter.validate(batch)
    if errors:
        for error in errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(1)

    conn, repo = _open_repository(db)
    try:
        existing = repo.get_active_showtimes()
        try:
            preview = ScheduleReconciler(on_bad_timestamp).reconcile(batch.rows, existing)
        except MalformedTimestampError as exc:
            typer.echo(f"Error: {exc}. Nothing was changed.", err=True)
            raise typer.Exit(1)
        preview.warnings = batch.warnings() + preview.warnings

        typer.echo(PreviewReportGenerator().render(preview))

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(preview.to_json())
            typer.echo(f"Preview saved to {output}")

        if apply_changes:
            _apply_preview(repo, preview, yes)
    finally:
        conn.close()


@app.command()
def apply(
    preview_file: Path = typer.Argument(..., help="Preview JSON written by `showsync upload --output`"),
    db: Path = DB_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Apply a saved preview to the active schedule in one transaction."""
    from showsync.exceptions import PreviewValidationError, ScheduleImportError
    from showsync.ingestion.preview_file import PreviewFileAdapter
    from showsync.reports.preview import PreviewReportGenerator

    try:
        preview = PreviewFileAdapter().parse(preview_file)
    except PreviewValidationError as exc:
        for error in exc.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(1)
    except (FileNotFoundError, ScheduleImportError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(PreviewReportGenerator().render(preview))

    conn, repo = _open_repository(db)
    try:
        _apply_preview(repo, preview, yes)
    finally:
        conn.close()


@app.command(name="list")
def list_cmd(
    db: Path = DB_OPTION,
    sort: ShowtimeField = typer.Option(ShowtimeField.START_TIME, "--sort", "-s", help="Field to sort by"),
    order: SortOrder = typer.Option(SortOrder.ASC, "--order", help="Sort direction"),
    title_filter: str = typer.Option("", "--filter", "-f", help="Only titles containing this text"),
) -> None:
    """Show the active schedule."""
    from rich.console import Console
    from rich.table import Table

    conn, repo = _open_repository(db)
    try:
        showtimes = repo.list_showtimes(sort=sort, order=order, title_filter=title_filter)
    finally:
        conn.close()

    if not showtimes:
        typer.echo("No active showtimes.")
        return

    table = Table(title=f"Active schedule ({len(showtimes)})")
    for heading in ("ID", "Movie", "Theater", "Auditorium", "Start", "End", "Lang", "Format", "Rating"):
        table.add_column(heading)
    for showtime in showtimes:
        record = showtime.record
        table.add_row(
            str(showtime.id),
            record.movie_title,
            record.theater_name,
            record.auditorium,
            record.start_time,
            record.end_time,
            record.language,
            record.format,
            record.rating,
        )
    Console().print(table)


@app.command()
def seed(db: Path = DB_OPTION) -> None:
    """Reset the database to the sample schedule."""
    from showsync.db.sample_data import SAMPLE_SCHEDULE

    conn, repo = _open_repository(db)
    try:
        count = repo.seed(SAMPLE_SCHEDULE)
    finally:
        conn.close()
    typer.echo(f"Seeded {count} showtime(s) into {db.name}")


@app.command()
def clear(
    db: Path = DB_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Hard-delete every showtime, active and archived."""
    if not yes and not typer.confirm("Delete ALL showtimes, including archived ones?"):
        typer.echo("Aborted. Nothing was changed.")
        raise typer.Exit(0)

    conn, repo = _open_repository(db)
    try:
        deleted = repo.clear()
    finally:
        conn.close()
    typer.echo(f"Deleted {deleted} showtime(s).")


if __name__ == "__main__":
    app()
