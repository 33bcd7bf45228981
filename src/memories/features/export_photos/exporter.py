"""
Bulk photo export.

Photos are fetched one at a time with a pause in between so the image host
is not hammered; a photo that fails to download is logged and skipped.
"""

import asyncio
import io
import logging
import re
import zipfile
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path
from uuid import UUID

import httpx

from src.memories.dtos import SubmissionDTO

logger = logging.getLogger(__name__)

DEFAULT_DELAY_SECONDS = 0.5

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9]")


def export_filename(submission: SubmissionDTO) -> str:
    guest = _UNSAFE_CHARS.sub("_", submission.guest_name) if submission.guest_name else "guest"
    table = f"_table{submission.table_number}" if submission.table_number else ""
    return f"memory_{guest}{table}_{str(submission.id)[:8]}.jpg"


@dataclass
class ExportReport:
    written: list[str] = field(default_factory=list)
    failed: list[UUID] = field(default_factory=list)


PhotoSink = Callable[[str, bytes], None]


class PhotoExporter:
    def __init__(
        self,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._http_client_class = http_client_class
        self._delay_seconds = delay_seconds
        self._sleep = sleep

    async def export(self, submissions: list[SubmissionDTO], sink: PhotoSink) -> ExportReport:
        """Download every photo in order and hand it to `sink(filename, data)`."""
        report = ExportReport()
        async with self._http_client_class(follow_redirects=True) as client:
            for index, submission in enumerate(submissions):
                if index:
                    await self._sleep(self._delay_seconds)
                filename = export_filename(submission)
                try:
                    response = await client.get(submission.photo_url)
                    response.raise_for_status()
                    sink(filename, response.content)
                except Exception as e:
                    logger.error(f"Download error for {submission.id}: {e}")
                    report.failed.append(submission.id)
                    continue
                report.written.append(filename)
        logger.info(f"Exported {len(report.written)} photos, {len(report.failed)} failed")
        return report

    async def export_to_directory(
        self, submissions: list[SubmissionDTO], destination: Path
    ) -> ExportReport:
        destination.mkdir(parents=True, exist_ok=True)

        def write(filename: str, data: bytes) -> None:
            (destination / filename).write_bytes(data)

        return await self.export(submissions, write)

    async def export_to_zip(self, submissions: list[SubmissionDTO]) -> tuple[bytes, ExportReport]:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:

            def write(filename: str, data: bytes) -> None:
                archive.writestr(filename, data)

            report = await self.export(submissions, write)
        return buffer.getvalue(), report
