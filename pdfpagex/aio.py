"""Awaitable counterparts of the :mod:`pdfpagex` operations.

The blocking work runs in a worker thread so that callers inside an event
loop are not stalled while files are read, parsed and written.
"""

from __future__ import annotations

from functools import partial
from typing import Iterable, List, Optional, Sequence

import anyio.to_thread

from .operations import PageOperations
from .types import DocumentInfo
from .utils import PathLike, PdfSource


async def get_pdf_info(
    source: PdfSource, *, operations: Optional[PageOperations] = None
) -> DocumentInfo:
    ops = operations or PageOperations.from_env()
    return await anyio.to_thread.run_sync(ops.get_pdf_info, source)


async def merge_pdfs(
    sources: Iterable[PdfSource],
    output_path: PathLike | None = None,
    *,
    operations: Optional[PageOperations] = None,
) -> bytes:
    ops = operations or PageOperations.from_env()
    return await anyio.to_thread.run_sync(ops.merge_pdfs, list(sources), output_path)


async def split_pdf(
    source: PdfSource,
    output_dir: PathLike | None = None,
    *,
    operations: Optional[PageOperations] = None,
) -> List[bytes]:
    ops = operations or PageOperations.from_env()
    return await anyio.to_thread.run_sync(ops.split_pdf, source, output_dir)


async def extract_pages(
    source: PdfSource,
    page_numbers: Sequence[int],
    output_path: PathLike | None = None,
    *,
    operations: Optional[PageOperations] = None,
) -> bytes:
    ops = operations or PageOperations.from_env()
    return await anyio.to_thread.run_sync(
        ops.extract_pages, source, page_numbers, output_path
    )


async def get_page_count(
    source: PdfSource, *, operations: Optional[PageOperations] = None
) -> int:
    ops = operations or PageOperations.from_env()
    return await anyio.to_thread.run_sync(ops.get_page_count, source)


async def rotate_pdf(
    source: PdfSource,
    degrees: int,
    page_numbers: Optional[Sequence[int]] = None,
    output_path: PathLike | None = None,
    *,
    operations: Optional[PageOperations] = None,
) -> bytes:
    ops = operations or PageOperations.from_env()
    call = partial(ops.rotate_pdf, source, degrees, page_numbers, output_path)
    return await anyio.to_thread.run_sync(call)


__all__ = [
    "get_pdf_info",
    "merge_pdfs",
    "split_pdf",
    "extract_pages",
    "get_page_count",
    "rotate_pdf",
]
