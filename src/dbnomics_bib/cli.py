# file: src/dbnomics_bib/cli.py
from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from src.dbnomics_bib.bibfile import append_bib_entries
from src.dbnomics_bib.builder import CitationBuilder
from src.dbnomics_bib.client import MetadataClient
from src.dbnomics_bib.config import load_config
from src.dbnomics_bib.errors import CitationError
from src.dbnomics_bib.ids import parse_series_id
from src.dbnomics_bib.models import CitationRecord, CitationRequest

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


class OutputFormat(str, Enum):
    BIBLATEX = "biblatex"
    BIBTEX = "bibtex"
    RECORD = "record"


def _resolve_request(
    provider: Optional[str],
    dataset: Optional[str],
    series: Optional[str],
    series_id: Optional[str],
) -> CitationRequest:
    if series_id:
        if provider or dataset or series:
            raise typer.BadParameter("Use either --id or PROVIDER DATASET [--series], not both.")
        return parse_series_id(series_id)
    if not provider or not dataset:
        raise typer.BadParameter("PROVIDER and DATASET are required unless --id is given.")
    return CitationRequest(provider=provider, dataset=dataset, series=series)


def _record_table(record: CitationRecord) -> Table:
    table = Table(title=f"Citation {record.key}")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("key", record.key)
    for name, value in record.fields().items():
        table.add_row(name, value)
    return table


@app.command()
def cite(
    provider: Optional[str] = typer.Argument(None, help="DBnomics provider code, e.g. ECB."),
    dataset: Optional[str] = typer.Argument(None, help="Dataset code, e.g. MIR."),
    series: Optional[str] = typer.Option(
        None,
        "--series",
        "-s",
        help="Series code; omit to cite the whole dataset.",
        show_default=False,
    ),
    series_id: Optional[str] = typer.Option(
        None,
        "--id",
        help="Full id PROVIDER/DATASET[/SERIES] instead of positional codes.",
        show_default=False,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.BIBLATEX,
        "--format",
        "-f",
        case_sensitive=False,
        help="biblatex, bibtex, or record (field table).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Append the entry to this .bib file.",
        show_default=False,
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0.1,
        help="Request timeout in seconds (default: DBNOMICS_TIMEOUT or none).",
        show_default=False,
    ),
) -> None:
    """
    Generate a bibliography entry for a DBnomics series or dataset.
    """
    try:
        request = _resolve_request(provider, dataset, series, series_id)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    if output is not None and output_format is OutputFormat.RECORD:
        raise typer.BadParameter("--output needs a text format (bibtex or biblatex).")

    try:
        config = load_config(timeout=timeout)
    except ValueError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(1) from e

    builder = CitationBuilder(client=MetadataClient(config=config))
    supported = builder.supported_formats()
    if output_format.value not in supported:
        console.print(
            f"[red]Format {output_format.value} unavailable.[/red] Supported: {', '.join(supported)}"
        )
        raise typer.Exit(1)

    try:
        result = builder.build(request, format=output_format.value)
    except CitationError as e:
        console.print(f"[red]Citation failed:[/red] {e}")
        raise typer.Exit(1) from e

    if isinstance(result, CitationRecord):
        console.print(_record_table(result))
        return

    if output is not None:
        if output.suffix == "":
            output = output.with_suffix(".bib")
        destination = append_bib_entries([result], output)
        console.print(f"[green]Entry appended to[/green] {destination}")
    else:
        console.print(result, markup=False, highlight=False, soft_wrap=True)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    app()


if __name__ == "__main__":
    main()
