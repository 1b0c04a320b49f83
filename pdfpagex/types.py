"""
Type definitions and dataclasses for pdfpagex.

This module defines data structures returned by the public operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from .exceptions import PdfOperationError

T = TypeVar("T")


@dataclass(frozen=True)
class DocumentMetadata:
    """Document information dictionary entries as reported by a backend."""

    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    creation_date: Optional[datetime] = None
    modification_date: Optional[datetime] = None


@dataclass(frozen=True)
class DocumentInfo:
    """
    PDF document information and metadata.

    Attributes:
        page_count: Number of pages in the PDF
        title: PDF title metadata
        author: PDF author metadata
        subject: PDF subject metadata
        creator: PDF creator application
        producer: PDF producer application
        creation_date: Creation timestamp, if recorded
        modification_date: Modification timestamp, if recorded
        file_size: Size of the source document in bytes
        is_encrypted: Whether the source document is encrypted
    """

    page_count: int
    title: Optional[str] = None
    author: Optional[str] = None
    subject: Optional[str] = None
    creator: Optional[str] = None
    producer: Optional[str] = None
    creation_date: Optional[datetime] = None
    modification_date: Optional[datetime] = None
    file_size: int = 0
    is_encrypted: bool = False


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """
    Outcome of an operation run through :func:`pdfpagex.attempt`.

    Attributes:
        success: Whether the operation completed
        value: The operation's return value when it succeeded
        error: The operation error when it failed
    """

    success: bool
    value: Optional[T] = None
    error: Optional[PdfOperationError] = None

    def unwrap(self) -> Any:
        """Return ``value`` or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __str__(self) -> str:
        if self.success:
            return "OperationResult(success=True)"
        return f"OperationResult(success=False, error='{self.error}')"


__all__ = ["DocumentMetadata", "DocumentInfo", "OperationResult"]
