"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Protocol, Sequence

from ..types import DocumentMetadata


@dataclass
class BackendDocument:
    """An operation-scoped document owned by a backend.

    Handles are never shared between operations; the facade creates, uses
    and drops them within a single call.
    """

    file_size: int = 0
    is_encrypted: bool = False


class PDFBackend(Protocol):
    """Protocol defining the document model capabilities the facade relies on.

    Page indices are zero-based at this boundary.
    """

    def load(self, data: bytes) -> BackendDocument:
        """Parse *data* and return a document handle."""

    def create(self) -> BackendDocument:
        """Return a new, empty document handle."""

    def page_count(self, document: BackendDocument) -> int:
        """Return the number of pages in *document*."""

    def page_indices(self, document: BackendDocument) -> List[int]:
        """Return every page index of *document* in order."""

    def copy_pages(
        self, source: BackendDocument, destination: BackendDocument, indices: Sequence[int]
    ) -> List[Any]:
        """Return copies of the pages at *indices*, in the given order and multiplicity."""

    def add_page(self, destination: BackendDocument, page: Any) -> Any:
        """Append *page* to *destination*."""

    def get_pages(self, document: BackendDocument) -> List[Any]:
        """Return the pages of *document* prepared for in-place modification."""

    def get_page(self, document: BackendDocument, index: int) -> Any:
        """Return the page at *index*."""

    def get_rotation(self, page: Any) -> int:
        """Return the rotation of *page* in degrees."""

    def set_rotation(self, page: Any, angle: int) -> None:
        """Set the rotation of *page* to *angle* degrees."""

    def save(self, document: BackendDocument) -> bytes:
        """Serialize *document* and return the PDF bytes."""

    def metadata(self, document: BackendDocument) -> DocumentMetadata:
        """Return the document information entries of *document*."""
