from __future__ import annotations

from pathlib import Path

import pytest

from pdfpagex import (
    MergeError,
    OperationConfig,
    OperationResult,
    PdfIOError,
    PdfValidationError,
    attempt,
    get_page_count,
    merge_pdfs,
)
from pdfpagex.config import ABORT_ENV_VAR, PASSWORD_ENV_VAR
from pdfpagex.utils import ensure_path, persist_output, resolve_input


def test_resolve_input_passes_bytes_through() -> None:
    data = b"%PDF-1.7"
    assert resolve_input(data) is data
    assert resolve_input(bytearray(data)) == data
    assert resolve_input(memoryview(data)) == data


def test_resolve_input_reads_paths(tmp_path: Path) -> None:
    path = tmp_path / "doc.pdf"
    path.write_bytes(b"content")

    assert resolve_input(path) == b"content"
    assert resolve_input(str(path)) == b"content"


def test_resolve_input_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PdfIOError) as excinfo:
        resolve_input(tmp_path / "missing.pdf")
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_resolve_input_rejects_other_types() -> None:
    with pytest.raises(PdfValidationError):
        resolve_input(3.14)  # type: ignore[arg-type]


def test_persist_output_creates_parents(tmp_path: Path) -> None:
    destination = tmp_path / "nested" / "dir" / "out.pdf"

    assert persist_output(b"data", destination) is True
    assert destination.read_bytes() == b"data"


def test_persist_output_without_destination() -> None:
    assert persist_output(b"data", None) is False


def test_persist_output_failure_policy(tmp_path: Path) -> None:
    with pytest.raises(PdfIOError):
        persist_output(b"data", tmp_path)

    assert persist_output(b"data", tmp_path, abort_on_failure=False) is False


def test_ensure_path_expands_home() -> None:
    assert ensure_path("~/file.pdf") == Path.home() / "file.pdf"


def test_config_defaults() -> None:
    config = OperationConfig()
    assert config.abort_on_persist_failure is True
    assert config.password is None
    assert config.split_filename(7) == "page_7.pdf"


@pytest.mark.parametrize(
    ("value", "expected"),
    [("0", False), ("false", False), ("no", False), ("1", True), ("YES", True), (" on ", True)],
)
def test_config_from_env(value: str, expected: bool) -> None:
    config = OperationConfig.from_env({ABORT_ENV_VAR: value, PASSWORD_ENV_VAR: "pw"})
    assert config.abort_on_persist_failure is expected
    assert config.password == "pw"


def test_config_from_process_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ABORT_ENV_VAR, "off")
    monkeypatch.delenv(PASSWORD_ENV_VAR, raising=False)

    config = OperationConfig.from_env()

    assert config.abort_on_persist_failure is False
    assert config.password is None


def test_module_functions_honour_env(
    monkeypatch: pytest.MonkeyPatch, sample_pdfs: list[Path], tmp_path: Path
) -> None:
    monkeypatch.setenv(ABORT_ENV_VAR, "false")

    data = merge_pdfs(sample_pdfs, tmp_path)

    assert get_page_count(data) == 3


def test_attempt_success(sample_pdf: Path) -> None:
    result = attempt(get_page_count, sample_pdf)

    assert isinstance(result, OperationResult)
    assert result.success is True
    assert result.value == 5
    assert result.error is None
    assert result.unwrap() == 5


def test_attempt_failure() -> None:
    result = attempt(merge_pdfs, [])

    assert result.success is False
    assert isinstance(result.error, MergeError)
    assert "success=False" in str(result)
    with pytest.raises(MergeError):
        result.unwrap()
