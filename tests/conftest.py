from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Page N of the sample document is 100 + 10 * N points wide, so pages can be
# told apart after they have been copied around.
SAMPLE_WIDTHS = [110, 120, 130, 140, 150]


@pytest.fixture()
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        widths: Sequence[int] = (72,),
        metadata: dict[str, str] | None = None,
        rotations: Sequence[int] | None = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for width in widths:
            writer.add_blank_page(width=width, height=200)
        if rotations is not None:
            for page, angle in zip(writer.pages, rotations):
                if angle:
                    page.rotate(angle)
        if metadata is not None:
            writer.add_metadata(metadata)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory(
        "sample.pdf",
        widths=SAMPLE_WIDTHS,
        metadata={
            "/Title": "Sample",
            "/Author": "pdfpagex-tests",
            "/Subject": "Fixtures",
            "/Creator": "pytest",
            "/CreationDate": "D:20240102030405",
        },
    )


@pytest.fixture()
def sample_bytes(sample_pdf: Path) -> bytes:
    return sample_pdf.read_bytes()


@pytest.fixture()
def empty_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("empty.pdf", widths=())


@pytest.fixture()
def sample_pdfs(pdf_factory: Callable[..., Path]) -> list[Path]:
    pdf1 = pdf_factory("one.pdf", widths=(300, 310), metadata={"/Title": "Document One"})
    pdf2 = pdf_factory("two.pdf", widths=(400,))
    return [pdf1, pdf2]


@pytest.fixture()
def not_a_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "not.pdf"
    path.write_text("not a pdf")
    return path
