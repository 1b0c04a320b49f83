"""pypdf backend implementation for pdfpagex."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, List, Optional, Sequence

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import NameObject, NumberObject

from ..exceptions import PageRangeError, PdfLoadError
from ..types import DocumentMetadata
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger("pdfpagex.backends.pypdf")


@dataclass
class PypdfDocument(BackendDocument):
    reader: Optional[PdfReader] = None
    writer: Optional[PdfWriter] = None

    @property
    def pages(self) -> Sequence[PageObject]:
        if self.writer is not None:
            return self.writer.pages
        if self.reader is not None:
            return self.reader.pages
        return []


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _date(getter: Callable[[], Optional[datetime]], field: str) -> Optional[datetime]:
    try:
        return getter()
    except (ValueError, TypeError) as exc:
        LOGGER.warning("Ignoring unparsable %s in document info: %s", field, exc)
        return None


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def __init__(self, password: Optional[str] = None) -> None:
        self.password = password

    def load(self, data: bytes) -> PypdfDocument:
        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise PdfLoadError(f"Corrupted or invalid PDF data. Error: {exc}") from exc
        except Exception as exc:
            raise PdfLoadError(f"Unexpected error reading PDF: {exc}") from exc

        encrypted = reader.is_encrypted
        if encrypted:
            self._decrypt(reader)

        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise PdfLoadError(f"Unable to read the page tree: {exc}") from exc

        LOGGER.debug("Loaded PDF with %d page(s) from %d bytes", num_pages, len(data))
        return PypdfDocument(file_size=len(data), is_encrypted=encrypted, reader=reader)

    def _decrypt(self, reader: PdfReader) -> None:
        password = self.password or ""
        LOGGER.debug("Attempting to decrypt encrypted PDF")
        try:
            result = reader.decrypt(password)
        except Exception as exc:
            raise PdfLoadError(f"Unable to decrypt encrypted PDF: {exc}") from exc
        if result == 0:
            if password:
                raise PdfLoadError("Failed to decrypt PDF with supplied password.")
            raise PdfLoadError("PDF is encrypted. Supply a password to process this file.")

    def create(self) -> PypdfDocument:
        return PypdfDocument(writer=PdfWriter())

    def page_count(self, document: PypdfDocument) -> int:
        return len(document.pages)

    def page_indices(self, document: PypdfDocument) -> List[int]:
        return list(range(self.page_count(document)))

    def copy_pages(
        self,
        source: PypdfDocument,
        destination: PypdfDocument,
        indices: Sequence[int],
    ) -> List[PageObject]:
        # pypdf clones pages into the writer on add_page, duplicates included.
        return [self.get_page(source, index) for index in indices]

    def add_page(self, destination: PypdfDocument, page: PageObject) -> PageObject:
        return self._writer(destination).add_page(page)

    def get_pages(self, document: PypdfDocument) -> List[PageObject]:
        return list(self._writer(document).pages)

    def get_page(self, document: PypdfDocument, index: int) -> PageObject:
        count = self.page_count(document)
        if not 0 <= index < count:
            raise PageRangeError(index, count)
        return document.pages[index]

    def get_rotation(self, page: PageObject) -> int:
        return int(page.rotation)

    def set_rotation(self, page: PageObject, angle: int) -> None:
        page[NameObject("/Rotate")] = NumberObject(angle)

    def save(self, document: PypdfDocument) -> bytes:
        buffer = io.BytesIO()
        self._writer(document).write(buffer)
        return buffer.getvalue()

    def metadata(self, document: PypdfDocument) -> DocumentMetadata:
        info = document.reader.metadata if document.reader is not None else None
        if info is None:
            return DocumentMetadata()
        return DocumentMetadata(
            title=_text(info.title),
            author=_text(info.author),
            subject=_text(info.subject),
            creator=_text(info.creator),
            producer=_text(info.producer),
            creation_date=_date(lambda: info.creation_date, "creation date"),
            modification_date=_date(lambda: info.modification_date, "modification date"),
        )

    def _writer(self, document: PypdfDocument) -> PdfWriter:
        if document.writer is None:
            if document.reader is None:
                document.writer = PdfWriter()
            else:
                document.writer = PdfWriter(clone_from=document.reader)
        return document.writer


__all__ = ["PypdfBackend", "PypdfDocument"]
