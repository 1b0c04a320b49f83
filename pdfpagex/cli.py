"""
Command-line interface for pdfpagex.
"""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import replace
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pdfpagex import __version__
from pdfpagex.config import OperationConfig
from pdfpagex.exceptions import PdfPageXError
from pdfpagex.operations import PageOperations
from pdfpagex.utils import ensure_path

console = Console()

_RANGE_TOKEN = re.compile(r"^(\d+)\s*-\s*(\d+)$")


def parse_page_list(spec: str) -> List[int]:
    """Parse ``"3,1,1"`` or ``"1-3,5"`` into page numbers, keeping order and duplicates."""

    if not spec or not spec.strip():
        raise ValueError("Page list cannot be empty")

    pages: List[int] = []
    for token in spec.split(","):
        token = token.strip()
        match = _RANGE_TOKEN.match(token)
        if match:
            start, end = int(match.group(1)), int(match.group(2))
            if start > end:
                raise ValueError(f"Invalid range '{token}': start must be <= end")
            pages.extend(range(start, end + 1))
        elif token.isdigit():
            pages.append(int(token))
        else:
            raise ValueError(f"Invalid page token: '{token}'")
    return pages


def _page_list_option(ctx, param, value: Optional[str]) -> Optional[List[int]]:
    if value is None:
        return None
    try:
        return parse_page_list(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    logger = logging.getLogger("pdfpagex")
    logger.handlers[:] = [handler]
    logger.setLevel(level)


def _fail(exc: Exception) -> None:
    console.print(f"\n[bold red]✗ Error:[/bold red] {exc}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.option(
    "--keep-on-write-error",
    is_flag=True,
    help="Report output write failures without aborting the operation",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, keep_on_write_error: bool) -> None:
    """
    pdfpagex - page-level PDF operations: info, merge, split, extract, rotate.
    """
    _configure_logging(verbose)
    config = OperationConfig.from_env()
    if keep_on_write_error:
        config = replace(config, abort_on_persist_failure=False)
    ctx.obj = PageOperations(config)


@cli.command(name="info")
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def show_info(operations: PageOperations, input_pdf: str) -> None:
    """
    Display information about a PDF file.

    Example:

        pdfpagex info input.pdf
    """
    try:
        info = operations.get_pdf_info(input_pdf)
    except PdfPageXError as exc:
        _fail(exc)
    else:
        table = Table(title=f"PDF Information: {ensure_path(input_pdf).name}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("Pages", str(info.page_count))
        table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")
        for label, value in (
            ("Title", info.title),
            ("Author", info.author),
            ("Subject", info.subject),
            ("Creator", info.creator),
            ("Producer", info.producer),
            ("Created", info.creation_date),
            ("Modified", info.modification_date),
        ):
            if value:
                table.add_row(label, str(value))

        console.print()
        console.print(table)
        console.print()


@cli.command(name="count")
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def count_pages(operations: PageOperations, input_pdf: str) -> None:
    """
    Print the number of pages in a PDF file.
    """
    try:
        console.print(operations.get_page_count(input_pdf))
    except PdfPageXError as exc:
        _fail(exc)


@cli.command(name="merge")
@click.argument("input_pdfs", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", required=True, help="Merged PDF path", type=click.Path())
@click.pass_obj
def merge(operations: PageOperations, input_pdfs: tuple, output: str) -> None:
    """
    Merge PDF files, in the given order, into one PDF.

    Example:

        pdfpagex merge a.pdf b.pdf -o merged.pdf
    """
    try:
        data = operations.merge_pdfs(list(input_pdfs), output)
    except PdfPageXError as exc:
        _fail(exc)
    else:
        console.print(
            f"\n[bold green]✓ Merged {len(input_pdfs)} files[/bold green] → {output} "
            f"[dim]({len(data)} bytes)[/dim]"
        )


@cli.command(name="split")
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir", "-o",
    default="./output",
    help="Output directory for page_<N>.pdf files",
    type=click.Path(file_okay=False),
)
@click.pass_obj
def split(operations: PageOperations, input_pdf: str, output_dir: str) -> None:
    """
    Split a PDF into one file per page.

    Example:

        pdfpagex split input.pdf -o pages
    """
    try:
        parts = operations.split_pdf(input_pdf, output_dir)
    except PdfPageXError as exc:
        _fail(exc)
    else:
        console.print(f"\n[bold green]✓ Successfully split into {len(parts)} files[/bold green]")
        console.print(f"[dim]Output directory: {ensure_path(output_dir).resolve()}[/dim]")


@cli.command(name="extract")
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--pages", "-p",
    required=True,
    callback=_page_list_option,
    help="Pages to extract in order, e.g. '3,1,1' or '2-4'",
)
@click.option("--output", "-o", required=True, help="Output PDF path", type=click.Path())
@click.pass_obj
def extract(operations: PageOperations, input_pdf: str, pages: List[int], output: str) -> None:
    """
    Extract pages, in the given order, into a new PDF.

    Example:

        pdfpagex extract input.pdf -p 3,1,1 -o picked.pdf
    """
    try:
        operations.extract_pages(input_pdf, pages, output)
    except PdfPageXError as exc:
        _fail(exc)
    else:
        console.print(f"\n[bold green]✓ Extracted {len(pages)} page(s)[/bold green] → {output}")


@cli.command(name="rotate")
@click.argument("input_pdf", type=click.Path(exists=True, dir_okay=False))
@click.option("--degrees", "-d", required=True, type=int, help="Degrees to add, e.g. 90 or -90")
@click.option(
    "--pages", "-p",
    default=None,
    callback=_page_list_option,
    help="Pages to rotate (default: all pages)",
)
@click.option("--output", "-o", required=True, help="Output PDF path", type=click.Path())
@click.pass_obj
def rotate(
    operations: PageOperations,
    input_pdf: str,
    degrees: int,
    pages: Optional[List[int]],
    output: str,
) -> None:
    """
    Rotate pages of a PDF.

    Example:

        pdfpagex rotate input.pdf -d 90 -p 1,3 -o rotated.pdf
    """
    try:
        operations.rotate_pdf(input_pdf, degrees, pages, output)
    except PdfPageXError as exc:
        _fail(exc)
    else:
        target = "all pages" if pages is None else f"{len(pages)} page(s)"
        console.print(f"\n[bold green]✓ Rotated {target} by {degrees}°[/bold green] → {output}")


if __name__ == "__main__":
    cli()
