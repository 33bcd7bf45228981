"""CLI commands for the wedding memories site."""

import asyncio
from pathlib import Path

import httpx
import typer

from src.config.settings import settings
from src.memories.features.export_photos.exporter import PhotoExporter
from src.memories.repository.read_models import SqlSubmissionReadModel
from src.qr.generator import qr_filename, render_qr_png, submit_url
from src.rsvp.repository.read_models import SqlRSVPReadModel
from src.stats.aggregation import compute_rsvp_stats, compute_submission_stats

app = typer.Typer(help="CLI commands for the wedding memories site")


@app.command()
def export_photos(
    destination: Path = typer.Option(
        Path("wedding_memories"),
        "--out",
        "-o",
        help="Directory the photos are written to",
    ),
    table: int | None = typer.Option(None, "--table", "-t", help="Only this table's photos"),
):
    """Download every submitted photo, one at a time."""

    async def _export():
        submissions = await SqlSubmissionReadModel().list_submissions(table_number=table)
        exporter = PhotoExporter(
            http_client_class=httpx.AsyncClient,
            delay_seconds=settings.export_delay_seconds,
        )
        return submissions, await exporter.export_to_directory(submissions, destination)

    submissions, report = asyncio.run(_export())

    if not submissions:
        typer.secho("No photos to download", fg=typer.colors.YELLOW)
        return

    typer.secho(f"Saved {len(report.written)} photos to {destination}", fg=typer.colors.GREEN)
    if report.failed:
        typer.secho(f"{len(report.failed)} photos failed:", fg=typer.colors.RED)
        for submission_id in report.failed:
            typer.secho(f"  - {submission_id}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def qr_codes(
    tables: int = typer.Option(10, "--tables", "-n", help="Number of tables"),
    destination: Path = typer.Option(Path("qr_codes"), "--out", "-o"),
    general: bool = typer.Option(True, help="Also write the table-less link"),
):
    """Write one QR code PNG per table linking to the submit page."""
    destination.mkdir(parents=True, exist_ok=True)
    numbers: list[int | None] = list(range(1, tables + 1))
    if general:
        numbers.insert(0, None)

    for table_number in numbers:
        url = submit_url(settings.public_url, table_number)
        (destination / qr_filename(table_number)).write_bytes(render_qr_png(url))
        typer.secho(f"  {qr_filename(table_number)} -> {url}", fg=typer.colors.CYAN)

    typer.secho(f"Wrote {len(numbers)} QR codes to {destination}", fg=typer.colors.GREEN)


@app.command()
def stats():
    """Print submission and RSVP totals straight from the database."""

    async def _load():
        submissions = await SqlSubmissionReadModel().list_submissions()
        rsvps = await SqlRSVPReadModel().list_rsvps()
        return compute_submission_stats(submissions), compute_rsvp_stats(rsvps)

    submission_stats, rsvp_stats = asyncio.run(_load())

    typer.secho(f"Memories: {submission_stats.total}", fg=typer.colors.GREEN)
    if submission_stats.by_table:
        for table_number in submission_stats.tables:
            count = submission_stats.by_table[table_number]
            typer.secho(f"  Table {table_number}: {count}", fg=typer.colors.BLUE)
    else:
        typer.secho("  No table data yet", fg=typer.colors.BLUE)

    typer.echo()
    typer.secho(f"RSVPs: {rsvp_stats.total}", fg=typer.colors.GREEN)
    typer.secho(f"  Attending: {rsvp_stats.attending}", fg=typer.colors.BLUE)
    typer.secho(f"  Not attending: {rsvp_stats.not_attending}", fg=typer.colors.BLUE)
    typer.secho(f"  Maybe: {rsvp_stats.maybe}", fg=typer.colors.BLUE)
    typer.secho(f"  Total guests: {rsvp_stats.total_guests}", fg=typer.colors.CYAN)


if __name__ == "__main__":
    app()
