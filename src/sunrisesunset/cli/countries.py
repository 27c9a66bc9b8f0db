from collections import Counter

import click

from ..model.location import countries
from .common import load_records, setup_logging


@click.command()
@click.option("--cities", type=click.Path(exists=True, dir_okay=False), help="Cities CSV path")
@click.option("--columns", type=click.Path(exists=True, dir_okay=False), help="Column configuration YAML")
@click.option("--verbose", is_flag=True, help="Log skipped rows")
def main(cities, columns, verbose):
  setup_logging(verbose)
  records = load_records(cities, columns)
  counts = Counter(r.country for r in records)
  names = countries(records)
  width = max((len(n) for n in names), default=7)
  click.echo("Country".ljust(width) + " | Cities")
  click.echo("-" * width + "-|-------")
  for n in names:
    click.echo(n.ljust(width) + f" | {counts[n]:,}")
  click.echo(f"Total cities: {len(records):,}, countries: {len(names)}")


if __name__ == "__main__":
  main()
