"""
herbafric: CLI for turning herbal-remedy documents into disease records.

Usage:
  herbafric extract [OPTIONS] SRC OUT_JSON
  herbafric search [OPTIONS] RECORDS_JSON QUERY
  herbafric count HERBS_CSV

Examples:
  herbafric extract remedies.txt conditions.json
  herbafric extract documents/ conditions.json --csv herbs.csv -v
  herbafric search conditions.json malaria
  herbafric count herbs.csv
"""

import logging
from pathlib import Path

import typer
from tqdm import tqdm

from herbafric import load_extractor
from herbafric.io.export import export_count, export_herbs_csv, export_json
from herbafric.io.loader import iter_documents, load_records
from herbafric.schemas import Extraction
from herbafric.search import search_diseases

app = typer.Typer(help=__doc__, no_args_is_help=True)


def setup_logging(verbose: int):
    """Set up logging based on verbosity level."""
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:  # verbose >= 2
        level = logging.DEBUG

    logging.basicConfig(level=level, format="%(levelname)s:%(name)s:%(message)s")


@app.command("extract", help="Extract disease records from a document or directory.")
def extract(
    src: Path = typer.Argument(..., help="Input .txt/.md document or directory"),
    out_json: Path = typer.Argument(..., help="Output JSON file for disease records"),
    csv: Path = typer.Option(
        None, "--csv", help="Also write a flat one-row-per-herb CSV"
    ),
    config: Path = typer.Option(
        None, "--config", "-c", help="YAML file with extractor settings"
    ),
    workers: int = typer.Option(
        None, "--workers", "-w", min=1, help="Parse disease blocks in parallel"
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    ),
) -> None:
    """Run the extractor over SRC and write `{"diseases": [...]}` to OUT_JSON."""
    setup_logging(verbose)

    overrides = {"workers": workers} if workers is not None else {}
    extractor = load_extractor(config, **overrides)

    diseases = []
    documents = list(iter_documents(src))
    for path, text in tqdm(documents, desc="Extracting", disable=verbose == 0):
        found = extractor(text).diseases
        logging.info(f"{path.name}: {len(found)} diseases")
        diseases.extend(found)
    extraction = Extraction(diseases=diseases)

    if not extraction.diseases:
        logging.warning("No diseases were parsed. Check the input format.")
    export_json(extraction, out_json)
    if csv is not None:
        export_herbs_csv(extraction, csv)
    typer.echo(f"Wrote {len(extraction.diseases)} diseases to {out_json}")


@app.command("search", help="Look up diseases by name or symptoms.")
def search(
    records_json: Path = typer.Argument(..., help="JSON written by `extract`"),
    query: str = typer.Argument(..., help="Case-insensitive search text"),
    show_herbs: bool = typer.Option(
        False, "--herbs/--no-herbs", help="List herbs under each disease"
    ),
) -> None:
    """Print the diseases whose name or symptoms contain QUERY."""
    matches = search_diseases(load_records(records_json).diseases, query)
    if not matches:
        typer.echo("No diseases found matching your search")
        raise typer.Exit(code=1)
    for disease in matches:
        typer.echo(disease.name)
        if show_herbs:
            for herb in disease.herbs:
                typer.echo(f"  - {herb.name}")


@app.command("count", help="Compute herb frequency counts from a herbs CSV.")
def count(
    herbs_csv: Path = typer.Argument(..., help="CSV written by `extract --csv`"),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)",
    ),
) -> None:
    """Read an existing herbs CSV and export `<stem>-counts.csv`."""
    setup_logging(verbose)
    out = export_count(herbs_csv)
    typer.echo(f"Wrote {out}")


if __name__ == "__main__":
    app()
