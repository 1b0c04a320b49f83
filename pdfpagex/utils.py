"""Input and output helpers shared by the :mod:`pdfpagex` operations."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from .exceptions import PdfIOError, PdfValidationError

LOGGER = logging.getLogger("pdfpagex.io")

PathLike = Union[str, os.PathLike]
PdfSource = Union[PathLike, bytes, bytearray, memoryview]


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` for *path* with the user home expanded."""

    return Path(path).expanduser()


def resolve_input(source: PdfSource) -> bytes:
    """Return the PDF bytes referenced by *source*.

    Paths are read in full; byte buffers are returned unchanged. No format
    sniffing happens here, malformed content is detected by the backend.

    Raises:
        PdfIOError: If the file cannot be read.
        PdfValidationError: If *source* is neither a path nor a byte buffer.
    """

    if isinstance(source, bytes):
        return source
    if isinstance(source, (bytearray, memoryview)):
        return bytes(source)
    if not isinstance(source, (str, os.PathLike)):
        raise PdfValidationError(
            f"Expected a file path or bytes, got {type(source).__name__}"
        )

    pdf_path = ensure_path(source)
    LOGGER.debug("Reading PDF from %s", pdf_path)
    try:
        with pdf_path.open("rb") as handle:
            return handle.read()
    except OSError as exc:
        LOGGER.error("Unable to read PDF %s: %s", pdf_path, exc)
        raise PdfIOError(f"Unable to read {pdf_path}: {exc.strerror or exc}") from exc


def persist_output(
    data: bytes,
    destination: PathLike | None,
    *,
    abort_on_failure: bool = True,
) -> bool:
    """Write *data* to *destination* when one is given.

    Returns ``True`` when a file was written. With ``abort_on_failure`` unset
    a write failure is logged and ``False`` is returned instead of raising.

    Raises:
        PdfIOError: If the write fails and ``abort_on_failure`` is set.
    """

    if destination is None:
        return False

    output_path = ensure_path(destination)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("wb") as handle:
            handle.write(data)
    except OSError as exc:
        if abort_on_failure:
            LOGGER.error("Failed to write PDF to %s: %s", output_path, exc)
            raise PdfIOError(
                f"Unable to write {output_path}: {exc.strerror or exc}"
            ) from exc
        LOGGER.warning("Failed to write PDF to %s, keeping result in memory: %s", output_path, exc)
        return False

    LOGGER.debug("Wrote %d bytes to %s", len(data), output_path)
    return True


__all__ = ["PathLike", "PdfSource", "ensure_path", "resolve_input", "persist_output"]
