from __future__ import annotations

from pathlib import Path

import pytest

from pdfpagex import (
    CountError,
    OperationConfig,
    PageOperations,
    PdfIOError,
    aio,
    get_page_count,
)

from conftest import SAMPLE_WIDTHS

pytestmark = pytest.mark.anyio


async def test_async_operations_match_sync(sample_pdf: Path, tmp_path: Path) -> None:
    info = await aio.get_pdf_info(sample_pdf)
    assert info.page_count == len(SAMPLE_WIDTHS)

    parts = await aio.split_pdf(sample_pdf, tmp_path / "pages")
    assert len(parts) == 5
    assert (tmp_path / "pages" / "page_5.pdf").exists()

    merged = await aio.merge_pdfs(reversed(parts))
    assert await aio.get_page_count(merged) == 5

    extracted = await aio.extract_pages(merged, [1, 1])
    assert get_page_count(extracted) == 2

    rotated = await aio.rotate_pdf(sample_pdf, 90, [1], tmp_path / "rotated.pdf")
    assert (tmp_path / "rotated.pdf").read_bytes() == rotated


async def test_async_errors_propagate(tmp_path: Path) -> None:
    with pytest.raises(CountError) as excinfo:
        await aio.get_page_count(tmp_path / "missing.pdf")
    assert isinstance(excinfo.value.__cause__, PdfIOError)


async def test_async_accepts_configured_operations(sample_pdf: Path, tmp_path: Path) -> None:
    ops = PageOperations(OperationConfig(split_filename_template="p{number}.pdf"))

    await aio.split_pdf(sample_pdf, tmp_path, operations=ops)

    assert (tmp_path / "p1.pdf").exists()
