from __future__ import annotations

import json
import logging
import pathlib
from typing import Optional

import typer
import structlog
from rich.console import Console
from rich.table import Table

from .books import book_options
from .codec.formatter import format_compact
from .codec.record import CertificateNumber
from .config import load_config, CertnoConfig
from .display import serial_label, volume_label
from .lookup import UnrecognizedCertificateNumber, decode, detect_form, normalize_lookup_key, require_recognized

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="certno: marriage certificate number codec")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"certno {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to certno.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
    )
    ctx.obj = {"config": load_config(config) if config else CertnoConfig()}
    if verbose:
        log.info("verbose_enabled")


@app.command()
def parse(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Certificate number, hyphenated or compact"),
    as_json: bool = typer.Option(False, "--json", help="Print the fields as JSON"),
):
    """Split a certificate number into its fields."""
    cfg: CertnoConfig = ctx.obj["config"]
    record = decode(value, cfg.office, cfg.compact)

    if as_json:
        console.print_json(json.dumps(record.to_dict()))
        return

    table = Table(title=value)
    table.add_column("Field")
    table.add_column("Value")
    for name, field_value in record.to_dict().items():
        table.add_row(name, field_value)
    table.add_row("Vol. No", volume_label(record))
    table.add_row("Serial No", serial_label(record))
    console.print(table)
    if record.is_default():
        console.print("[yellow]Nothing recognized; showing defaults[/yellow]")


@app.command("format")
def format_(
    ctx: typer.Context,
    book: str = typer.Option("I", "--book", help="Book numeral (I..L)"),
    volume: str = typer.Option("", "--volume"),
    letter: str = typer.Option("", "--letter"),
    volume_year: str = typer.Option("", "--volume-year"),
    serial: str = typer.Option("", "--serial"),
    serial_year: str = typer.Option("", "--serial-year"),
    page: str = typer.Option("", "--page"),
):
    """Build the compact certificate number from its fields."""
    record = CertificateNumber(
        book_number=book,
        volume_number=volume,
        volume_letter=letter,
        volume_year=volume_year,
        serial_number=serial,
        serial_year=serial_year,
        page_number=page,
    )
    console.print(format_compact(record, ctx.obj["config"].office))


@app.command()
def check(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="Certificate number to validate"),
):
    """Check the prefix and print the lookup key."""
    office = ctx.obj["config"].office
    try:
        trimmed = require_recognized(value, office)
    except UnrecognizedCertificateNumber as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    console.print(f"{detect_form(trimmed, office)}: {normalize_lookup_key(trimmed)}")


@app.command()
def books():
    """List the book numerals I..L."""
    table = Table(title="Books")
    table.add_column("No.", justify="right")
    table.add_column("Book")
    for ordinal, numeral in book_options():
        table.add_row(str(ordinal), numeral)
    console.print(table)
