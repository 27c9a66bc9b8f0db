"""Helpers shared by the command-line entry points."""

import logging
import sys

import click

from ..io.cities import CITIES_FILENAME, find_cities_csv, load_cities
from ..model.columns import load_column_config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger("sunrisesunset").setLevel(logging.DEBUG if verbose else logging.WARNING)


def load_records(cities, columns):
    """Load the cities dataset or exit with status 1."""
    path = cities or find_cities_csv()
    if path is None:
        click.echo(f"ERROR: {CITIES_FILENAME} not found.", err=True)
        click.echo("Place the file next to the package or in the current directory, or pass --cities.", err=True)
        sys.exit(1)

    records = load_cities(path, load_column_config(columns))
    if not records:
        click.echo(f"ERROR: no cities could be loaded from {path}", err=True)
        sys.exit(1)
    return records
