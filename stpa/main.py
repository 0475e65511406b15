from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import config
from .pipeline.assemble import DocumentAssembler
from .pipeline.fields import download_filename
from .pipeline.ingest import list_records, load_record, slug_for_record
from .pipeline.run import render_record, run_batch
from .pipeline.template import build_template
from .pipeline.terbilang import spell_currency

app = typer.Typer(
    help=(
        "STPA (Surat Tanda Penerimaan Aduan) document generator. "
        "Run `stpa template` once to build the letterhead before rendering."
    )
)


def _setup(verbose: bool, out: Optional[Path], template: Optional[Path]) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if out:
        config.set_out_dir(out)
    if template:
        config.set_template_path(template)


@app.command()
def render(
    record: Path = typer.Argument(..., help="Case record JSON file"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    template: Optional[Path] = typer.Option(None, "--template", help="Template PDF"),
    preview: bool = typer.Option(False, "--preview", help="Also write a PNG preview"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render one record over the letterhead built by `stpa template`."""
    _setup(verbose, out, template)
    case = load_record(record)
    slug = slug_for_record(case, fallback=record.stem)
    result = render_record(case, DocumentAssembler(), slug=slug, preview=preview)
    typer.echo(f"{result.page.document_number} -> {result.pdf_path}")
    typer.echo(f"Download name: {download_filename(case, slug)}")
    if result.preview_path:
        typer.echo(f"Preview: {result.preview_path}")
    for warning in result.page.warnings:
        typer.echo(f"WARNING: {warning}")


@app.command()
def batch(
    directory: Path = typer.Argument(..., help="Directory of case record JSON files"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    template: Optional[Path] = typer.Option(None, "--template", help="Template PDF"),
    preview: bool = typer.Option(False, "--preview", help="Also write PNG previews"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    _setup(verbose, out, template)
    paths = list_records(directory)
    if not paths:
        typer.echo("No records to render")
        return
    results = run_batch(paths, preview=preview)
    typer.echo(f"READY: {len(results['READY'])}")
    typer.echo(f"FAILED: {len(results['FAILED'])}")
    for slug in results["FAILED"]:
        typer.echo(f"FAILED: {slug}")


@app.command()
def template(
    out: Optional[Path] = typer.Option(None, "--out", help="Where to write the template PDF"),
    logo: Optional[Path] = typer.Option(None, "--logo", help="Letterhead logo image"),
) -> None:
    path = build_template(out or config.TEMPLATE_PATH, logo_path=logo)
    typer.echo(f"Template written to {path}")


@app.command()
def terbilang(amount: int = typer.Argument(..., help="Amount in Rupiah")) -> None:
    typer.echo(spell_currency(amount))


if __name__ == "__main__":
    app()
