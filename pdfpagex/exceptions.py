"""Custom exceptions raised by :mod:`pdfpagex`."""

from __future__ import annotations


class PdfPageXError(Exception):
    """Base exception for all errors raised by :mod:`pdfpagex`."""


class PdfIOError(PdfPageXError, OSError):
    """Raised when a source file cannot be read or an output cannot be written."""


class PdfLoadError(PdfPageXError):
    """Raised when bytes cannot be loaded as a PDF document."""


class PageRangeError(PdfPageXError, IndexError):
    """Raised when a page index falls outside the document."""

    def __init__(self, index: int, page_count: int) -> None:
        self.index = index
        self.page_count = page_count
        super().__init__(
            f"Page {index + 1} is out of range for a document with {page_count} page(s)"
        )


class PdfValidationError(PdfPageXError, ValueError):
    """Raised when an argument has an unsupported type or value."""


class PdfOperationError(PdfPageXError):
    """Base class for the errors surfaced by the public operations.

    The message always reads ``"<prefix>: <original message>"`` and the
    original exception is available as ``__cause__``.
    """

    prefix = "Failed to process PDF"
    operation = "process"

    def __init__(self, message: str) -> None:
        self.detail = message
        super().__init__(f"{self.prefix}: {message}")


class InfoError(PdfOperationError):
    prefix = "Failed to get PDF info"
    operation = "info"


class MergeError(PdfOperationError):
    prefix = "Failed to merge PDFs"
    operation = "merge"


class SplitError(PdfOperationError):
    prefix = "Failed to split PDF"
    operation = "split"


class ExtractError(PdfOperationError):
    prefix = "Failed to extract pages"
    operation = "extract"


class CountError(PdfOperationError):
    prefix = "Failed to get page count"
    operation = "count"


class RotateError(PdfOperationError):
    prefix = "Failed to rotate PDF"
    operation = "rotate"


__all__ = [
    "PdfPageXError",
    "PdfIOError",
    "PdfLoadError",
    "PageRangeError",
    "PdfValidationError",
    "PdfOperationError",
    "InfoError",
    "MergeError",
    "SplitError",
    "ExtractError",
    "CountError",
    "RotateError",
]
