import io
import zipfile
from uuid import UUID

import httpx
import pytest

from src.memories.features.export_photos.exporter import PhotoExporter, export_filename
from src.memories.tests.inmemory_models import make_submission

SUBMISSION_ID = UUID("1a2b3c4d-0000-4000-8000-000000000000")


def make_exporter(handler, sleeps: list[float], delay: float = 0.5) -> PhotoExporter:
    transport = httpx.MockTransport(handler)

    async def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)

    return PhotoExporter(
        http_client_class=lambda **kwargs: httpx.AsyncClient(transport=transport, **kwargs),
        delay_seconds=delay,
        sleep=fake_sleep,
    )


@pytest.mark.parametrize(
    "guest_name, table_number, expected",
    [
        ("Ali", 3, "memory_Ali_table3_1a2b3c4d.jpg"),
        ("Mary-Jane O'Neil", None, "memory_Mary_Jane_O_Neil_1a2b3c4d.jpg"),
        (None, 7, "memory_guest_table7_1a2b3c4d.jpg"),
        (None, None, "memory_guest_1a2b3c4d.jpg"),
    ],
)
def test_export_filename(guest_name, table_number, expected):
    submission = make_submission(guest_name=guest_name, table_number=table_number, id=SUBMISSION_ID)
    assert export_filename(submission) == expected


@pytest.mark.asyncio
async def test_export_downloads_sequentially_with_delay():
    submissions = [make_submission(minutes=-i, guest_name=f"G{i}") for i in range(3)]
    requested: list[str] = []
    sleeps: list[float] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append(str(request.url))
        return httpx.Response(200, content=b"jpeg:" + str(request.url).encode())

    written: dict[str, bytes] = {}
    exporter = make_exporter(handler, sleeps)

    report = await exporter.export(submissions, lambda name, data: written.__setitem__(name, data))

    assert requested == [s.photo_url for s in submissions]
    assert sleeps == [0.5, 0.5]
    assert report.failed == []
    assert report.written == [export_filename(s) for s in submissions]
    assert written[export_filename(submissions[0])] == b"jpeg:" + submissions[0].photo_url.encode()


@pytest.mark.asyncio
async def test_export_continues_after_a_failed_download():
    ok_first, broken, ok_last = (make_submission(guest_name=n) for n in ("A", "B", "C"))

    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == broken.photo_url:
            return httpx.Response(404)
        return httpx.Response(200, content=b"img")

    sleeps: list[float] = []
    exporter = make_exporter(handler, sleeps)

    archive, report = await exporter.export_to_zip([ok_first, broken, ok_last])

    assert report.failed == [broken.id]
    assert report.written == [export_filename(ok_first), export_filename(ok_last)]
    assert len(sleeps) == 2
    with zipfile.ZipFile(io.BytesIO(archive)) as zf:
        assert sorted(zf.namelist()) == sorted(report.written)


@pytest.mark.asyncio
async def test_export_to_directory(tmp_path):
    submission = make_submission(guest_name="Ali", table_number=2)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"photo-bytes")

    exporter = make_exporter(handler, [])
    report = await exporter.export_to_directory([submission], tmp_path / "out")

    assert (tmp_path / "out" / report.written[0]).read_bytes() == b"photo-bytes"


@pytest.mark.asyncio
async def test_export_nothing():
    sleeps: list[float] = []
    exporter = make_exporter(lambda request: httpx.Response(500), sleeps)

    report = await exporter.export([], lambda name, data: None)

    assert report.written == [] and report.failed == []
    assert sleeps == []
