"""
pdfpagex - page-level PDF operations.

Load a PDF from a path or from bytes, then merge, split, extract, rotate or
inspect its pages. Every operation returns the resulting PDF bytes and can
optionally write them to disk.

Quick Start:
    >>> from pdfpagex import merge_pdfs, extract_pages
    >>> merged = merge_pdfs(["a.pdf", "b.pdf"], "merged.pdf")
    >>> picked = extract_pages(merged, [3, 1, 1])

Async callers can use the same functions from :mod:`pdfpagex.aio`.
"""

from pdfpagex.config import OperationConfig
from pdfpagex.exceptions import (
    CountError,
    ExtractError,
    InfoError,
    MergeError,
    PageRangeError,
    PdfIOError,
    PdfLoadError,
    PdfOperationError,
    PdfPageXError,
    PdfValidationError,
    RotateError,
    SplitError,
)
from pdfpagex.operations import (
    PageOperations,
    attempt,
    extract_pages,
    get_page_count,
    get_pdf_info,
    merge_pdfs,
    rotate_pdf,
    split_pdf,
)
from pdfpagex.types import DocumentInfo, DocumentMetadata, OperationResult

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Operations
    "get_pdf_info",
    "merge_pdfs",
    "split_pdf",
    "extract_pages",
    "get_page_count",
    "rotate_pdf",
    "attempt",
    "PageOperations",
    "OperationConfig",
    # Data types
    "DocumentInfo",
    "DocumentMetadata",
    "OperationResult",
    # Exceptions
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
    # Version info
    "__version__",
]
