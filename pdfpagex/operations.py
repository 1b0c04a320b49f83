"""Page-level PDF operations built on a pluggable :class:`PDFBackend`.

Every operation follows the same shape: resolve the input to bytes, let the
backend do the structural work, return the serialized bytes and optionally
persist them. Any failure along the way is re-raised as the operation's own
error type with the original exception chained.
"""

from __future__ import annotations

import logging
import operator
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar

from .backends import PDFBackend, PypdfBackend
from .config import OperationConfig
from .exceptions import (
    CountError,
    ExtractError,
    InfoError,
    MergeError,
    PdfOperationError,
    PdfValidationError,
    RotateError,
    SplitError,
)
from .types import DocumentInfo, OperationResult
from .utils import PathLike, PdfSource, ensure_path, persist_output, resolve_input

LOGGER = logging.getLogger("pdfpagex.operations")

T = TypeVar("T")


@contextmanager
def _wrap_errors(error_cls: Type[PdfOperationError]) -> Iterator[None]:
    try:
        yield
    except PdfOperationError:
        raise
    except Exception as exc:
        LOGGER.error("%s: %s", error_cls.prefix, exc)
        raise error_cls(str(exc)) from exc


def _as_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise PdfValidationError(f"{label} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise PdfValidationError(f"{label} must be an integer, got {value!r}") from exc


def _to_indices(page_numbers: Iterable[Any]) -> List[int]:
    """Convert one-based page numbers to zero-based indices, order and duplicates kept."""

    return [_as_int(number, "Page number") - 1 for number in page_numbers]


class PageOperations:
    """Facade exposing the page operations for one configuration and backend."""

    def __init__(
        self,
        config: Optional[OperationConfig] = None,
        *,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.config = config or OperationConfig()
        self.backend: PDFBackend = backend or PypdfBackend(password=self.config.password)

    @classmethod
    def from_env(cls) -> "PageOperations":
        """Return an instance configured from the ``PDFPAGEX_*`` environment variables."""

        return cls(OperationConfig.from_env())

    def _persist(self, data: bytes, destination: PathLike | None) -> None:
        persist_output(
            data,
            destination,
            abort_on_failure=self.config.abort_on_persist_failure,
        )

    def get_pdf_info(self, source: PdfSource) -> DocumentInfo:
        """Return :class:`DocumentInfo` for *source*.

        Metadata entries the document does not define are reported as ``None``.

        Raises:
            InfoError: If the document cannot be read or loaded.
        """

        with _wrap_errors(InfoError):
            document = self.backend.load(resolve_input(source))
            metadata = self.backend.metadata(document)
            info = DocumentInfo(
                page_count=self.backend.page_count(document),
                title=metadata.title,
                author=metadata.author,
                subject=metadata.subject,
                creator=metadata.creator,
                producer=metadata.producer,
                creation_date=metadata.creation_date,
                modification_date=metadata.modification_date,
                file_size=document.file_size,
                is_encrypted=document.is_encrypted,
            )
        LOGGER.info("PDF info: pages=%s, title=%r", info.page_count, info.title)
        return info

    def merge_pdfs(
        self,
        sources: Iterable[PdfSource],
        output_path: PathLike | None = None,
    ) -> bytes:
        """Concatenate every page of *sources*, in order, into one PDF.

        Args:
            sources: Paths or byte buffers to merge. Must not be empty.
            output_path: Optional file the merged PDF is also written to.

        Raises:
            MergeError: If any input fails to load or the output cannot be
                written. No partial result is returned.
        """

        with _wrap_errors(MergeError):
            inputs = list(sources)
            if not inputs:
                raise PdfValidationError("No input PDFs provided")

            merged = self.backend.create()
            for position, source in enumerate(inputs, start=1):
                LOGGER.debug("Processing input PDF %d of %d", position, len(inputs))
                document = self.backend.load(resolve_input(source))
                pages = self.backend.copy_pages(
                    document, merged, self.backend.page_indices(document)
                )
                for page in pages:
                    self.backend.add_page(merged, page)

            data = self.backend.save(merged)
            self._persist(data, output_path)

        LOGGER.info("Merged %d PDFs (%d bytes)", len(inputs), len(data))
        return data

    def split_pdf(
        self,
        source: PdfSource,
        output_dir: PathLike | None = None,
    ) -> List[bytes]:
        """Split *source* into single-page PDFs, one per source page in order.

        With *output_dir* each page is also written as ``page_<N>.pdf``.
        A document without pages yields an empty list.

        Raises:
            SplitError: If loading, serializing or writing any page fails.
        """

        with _wrap_errors(SplitError):
            document = self.backend.load(resolve_input(source))
            directory = ensure_path(output_dir) if output_dir is not None else None
            parts: List[bytes] = []

            for index in self.backend.page_indices(document):
                single = self.backend.create()
                for page in self.backend.copy_pages(document, single, [index]):
                    self.backend.add_page(single, page)
                data = self.backend.save(single)
                parts.append(data)

                if directory is not None:
                    destination = directory / self.config.split_filename(index + 1)
                    LOGGER.debug("Writing page %d to %s", index + 1, destination)
                    self._persist(data, destination)

        LOGGER.info("Split PDF into %d page(s)", len(parts))
        return parts

    def extract_pages(
        self,
        source: PdfSource,
        page_numbers: Sequence[int],
        output_path: PathLike | None = None,
    ) -> bytes:
        """Copy the one-based *page_numbers* of *source* into a new PDF.

        Order and duplicates are preserved: ``[3, 1, 1]`` yields three pages.

        Raises:
            ExtractError: If a page number is out of range or the document
                cannot be processed.
        """

        with _wrap_errors(ExtractError):
            indices = _to_indices(page_numbers)
            document = self.backend.load(resolve_input(source))
            extracted = self.backend.create()
            for page in self.backend.copy_pages(document, extracted, indices):
                self.backend.add_page(extracted, page)

            data = self.backend.save(extracted)
            self._persist(data, output_path)

        LOGGER.info("Extracted %d page(s)", len(indices))
        return data

    def get_page_count(self, source: PdfSource) -> int:
        """Return the number of pages in *source*."""

        with _wrap_errors(CountError):
            document = self.backend.load(resolve_input(source))
            return self.backend.page_count(document)

    def rotate_pdf(
        self,
        source: PdfSource,
        degrees: int,
        page_numbers: Optional[Sequence[int]] = None,
        output_path: PathLike | None = None,
    ) -> bytes:
        """Add *degrees* to the rotation of the selected pages of *source*.

        The new rotation is ``(current + degrees) % 360``. When *page_numbers*
        is ``None`` every page is rotated; each listed occurrence is applied,
        so an empty list leaves the document unrotated.

        Raises:
            RotateError: If a page number is out of range or the document
                cannot be processed.
        """

        with _wrap_errors(RotateError):
            amount = _as_int(degrees, "Rotation")
            indices = None if page_numbers is None else _to_indices(page_numbers)
            document = self.backend.load(resolve_input(source))

            pages = self.backend.get_pages(document)
            if indices is not None:
                pages = [self.backend.get_page(document, index) for index in indices]

            for page in pages:
                current = self.backend.get_rotation(page)
                self.backend.set_rotation(page, (current + amount) % 360)

            data = self.backend.save(document)
            self._persist(data, output_path)

        LOGGER.info("Rotated %d page(s) by %d degrees", len(pages), amount)
        return data


def _default_operations() -> PageOperations:
    return PageOperations.from_env()


def get_pdf_info(source: PdfSource) -> DocumentInfo:
    """Return :class:`DocumentInfo` for *source*."""

    return _default_operations().get_pdf_info(source)


def merge_pdfs(sources: Iterable[PdfSource], output_path: PathLike | None = None) -> bytes:
    """Merge *sources* into a single PDF and return its bytes."""

    return _default_operations().merge_pdfs(sources, output_path)


def split_pdf(source: PdfSource, output_dir: PathLike | None = None) -> List[bytes]:
    """Split *source* into one PDF per page."""

    return _default_operations().split_pdf(source, output_dir)


def extract_pages(
    source: PdfSource,
    page_numbers: Sequence[int],
    output_path: PathLike | None = None,
) -> bytes:
    """Extract the one-based *page_numbers* of *source* into a new PDF."""

    return _default_operations().extract_pages(source, page_numbers, output_path)


def get_page_count(source: PdfSource) -> int:
    """Return the number of pages in *source*."""

    return _default_operations().get_page_count(source)


def rotate_pdf(
    source: PdfSource,
    degrees: int,
    page_numbers: Optional[Sequence[int]] = None,
    output_path: PathLike | None = None,
) -> bytes:
    """Rotate pages of *source* by *degrees*."""

    return _default_operations().rotate_pdf(source, degrees, page_numbers, output_path)


def attempt(operation: Callable[..., T], *args: Any, **kwargs: Any) -> OperationResult[T]:
    """Run *operation* and capture its :class:`PdfOperationError` as a result value.

    Example:
        >>> result = attempt(merge_pdfs, ["a.pdf", "b.pdf"])
        >>> if not result.success:
        ...     print(result.error)
    """

    try:
        value = operation(*args, **kwargs)
    except PdfOperationError as exc:
        return OperationResult(success=False, error=exc)
    return OperationResult(success=True, value=value)


__all__ = [
    "PageOperations",
    "get_pdf_info",
    "merge_pdfs",
    "split_pdf",
    "extract_pages",
    "get_page_count",
    "rotate_pdf",
    "attempt",
]
