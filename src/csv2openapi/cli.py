from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from csv2openapi.convert import ConvertOptions, convert_file
from csv2openapi.errors import Csv2OpenAPIError

app = typer.Typer(help="Infer a schema from a CSV file and emit an OpenAPI description.")

USAGE = "Usage: csv2openapi {your}.csv"

logger = logging.getLogger("csv2openapi")


def _configure_logging(verbose: bool) -> None:
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[csv2openapi] %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command()
def main(
    csv_file: Optional[Path] = typer.Argument(None, help="Input CSV file (first line is the header)"),
    fmt: str = typer.Option("yaml", "--format", "-f", envvar="CSV2OPENAPI_FORMAT", help="Output format: yaml|json"),
    outdir: Path = typer.Option(Path("."), "--outdir", "-o", envvar="CSV2OPENAPI_OUTDIR", help="Directory for the output file"),
    delimiter: str = typer.Option(",", "--delimiter", "-d", envvar="CSV2OPENAPI_DELIMITER", help="Field delimiter"),
    strict: bool = typer.Option(False, "--strict", envvar="CSV2OPENAPI_STRICT", help="Abort on malformed rows instead of skipping them"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the document instead of writing it"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-column inference"),
):
    """Generate <name>.yaml (or .json) describing a GET endpoint for <name>.csv."""
    if csv_file is None:
        # No input: usage on stderr, exit status stays 0
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=0)

    _configure_logging(verbose)

    if delimiter == "\\t":
        delimiter = "\t"

    try:
        options = ConvertOptions(
            fmt=fmt.lower(),
            outdir=outdir,
            delimiter=delimiter,
            strict=strict,
            dry_run=dry_run,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    try:
        result = convert_file(csv_file, options)
    except Csv2OpenAPIError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=e.exit_code)

    if dry_run:
        typer.echo(result.text, nl=False)
        return

    typer.echo(f"OpenAPI specification generated and saved as {result.output_path}")


if __name__ == "__main__":
    app()
