"""CLI entry point."""

import logging

import typer

from fastakit.cli.validate import validate_cmd
from fastakit.config import config

app = typer.Typer(
    name="fastakit",
    help="fastakit -- FASTA parsing and IUPAC nucleotide validation",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging before running a subcommand."""
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


app.command(name="validate")(validate_cmd)


if __name__ == "__main__":
    app()
