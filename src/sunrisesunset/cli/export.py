import logging

import click

from ..core.daylight import SolarCalculationError, solar_times
from ..io.schema import SunTimesRow
from ..io.write_jsonl import write_jsonl
from ..model.location import filter_by_country
from .common import load_records, setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option("--date", "on_date", required=True, type=click.DateTime(formats=["%Y-%m-%d"]))
@click.option("--out", required=True, type=click.Path(dir_okay=False))
@click.option("--country", default=None)
@click.option("--cities", type=click.Path(exists=True, dir_okay=False))
@click.option("--columns", type=click.Path(exists=True, dir_okay=False))
@click.option("--verbose", is_flag=True)
def main(on_date, out, country, cities, columns, verbose):
  """Write sunrise/sunset for every city on one date as JSON lines."""
  setup_logging(verbose)
  d = on_date.date()
  records = filter_by_country(load_records(cities, columns), country)
  skipped = 0

  def rows():
    nonlocal skipped
    for rec in records:
      try:
        t = solar_times(rec.latitude, rec.longitude, d)
      except SolarCalculationError as e:
        logger.warning(f"Skipping {rec.name}: {e}")
        skipped += 1
        continue
      yield SunTimesRow(
        city=rec.name,
        country=rec.country,
        latitude=rec.latitude,
        longitude=rec.longitude,
        date=d,
        sunrise=t.sunrise,
        sunset=t.sunset,
        utc_offset_hours=t.utc_offset_hours,
      )

  written = write_jsonl(rows(), out)
  click.echo(f"Wrote {written:,} rows to {out} ({skipped:,} without sunrise/sunset)")


if __name__ == "__main__":
  main()
