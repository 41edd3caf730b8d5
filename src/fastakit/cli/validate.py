"""fastakit validate -- check a FASTA file line by line."""

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

from fastakit import validation
from fastakit.exceptions import FastaFileNotFoundError

console = Console()


def validate_cmd(
    path: Path = typer.Argument(..., help="Path to a FASTA file"),
    output_json: bool = typer.Option(False, "--json", help="Output JSON"),
    strict_blank_lines: bool = typer.Option(
        False, "--strict-blank-lines", help="Treat blank lines as errors",
    ),
    allow_empty_records: bool = typer.Option(
        False, "--allow-empty-records", help="Accept descriptions with no sequence lines",
    ),
):
    """Validate every line of a FASTA file and report the first error."""
    try:
        report = validation.validate_file(
            path,
            allow_blank_lines=False if strict_blank_lines else None,
            require_sequence=False if allow_empty_records else None,
        )
    except (FastaFileNotFoundError, OSError) as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(code=1)

    if output_json:
        typer.echo(report.model_dump_json(indent=2))
    elif report.valid:
        console.print(Panel(
            f"[bold]Records:[/bold]        {report.records}\n"
            f"[bold]Sequence lines:[/bold] {report.sequence_lines}\n"
            f"[bold]Symbols:[/bold]        {report.symbols}",
            title="[green]Valid FASTA[/green]",
            border_style="green",
        ))
    else:
        err = report.error
        location = f"line {err.line_number}"
        if err.column is not None:
            location += f", column {err.column}"
        console.print(Panel(
            f"[bold]Location:[/bold] {location}\n"
            f"[bold]Error:[/bold]    {err.message}",
            title="[red]Invalid FASTA[/red]",
            border_style="red",
        ))

    if not report.valid:
        raise typer.Exit(code=1)
