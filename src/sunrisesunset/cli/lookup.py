from datetime import date
import sys

import click

from ..core.daylight import SolarCalculationError, solar_times
from ..model.location import filter_by_country, search
from .common import load_records, setup_logging

TIME_FMT = "%Y-%m-%d %H:%M"
NOTE = "Note: Times are approximate and do not account for time zone/UTC offsets."


def _check_year(ctx, param, value):
  if value is not None and not 1800 < value.year < 9999:
    raise click.BadParameter("Invalid year")
  return value


@click.command()
@click.option("--city", required=True, help="City name (case-insensitive, partial names allowed)")
@click.option("--country", default=None, help="Only consider cities in this country")
@click.option("--date", "on_date", type=click.DateTime(formats=["%Y-%m-%d"]), callback=_check_year,
              help="Date as YYYY-MM-DD (default: today)")
@click.option("--limit", default=10, type=click.IntRange(min=1), show_default=True, help="Maximum number of matches to show")
@click.option("--cities", type=click.Path(exists=True, dir_okay=False), help="Cities CSV path")
@click.option("--columns", type=click.Path(exists=True, dir_okay=False), help="Column configuration YAML")
@click.option("--verbose", is_flag=True, help="Log skipped rows")
def main(city, country, on_date, limit, cities, columns, verbose):
  """Show approximate sunrise and sunset for a city."""
  setup_logging(verbose)
  records = load_records(cities, columns)
  matches = search(filter_by_country(records, country), city)[:limit]
  if not matches:
    click.echo(f"ERROR: no city matching '{city}'", err=True)
    sys.exit(1)

  d = on_date.date() if on_date else date.today()
  rows = []
  for rec in matches:
    try:
      t = solar_times(rec.latitude, rec.longitude, d)
      rise, sset = t.sunrise.strftime(TIME_FMT), t.sunset.strftime(TIME_FMT)
    except SolarCalculationError:
      rise = sset = "n/a (polar day/night)"
    rows.append((rec.display, rec.country, d.isoformat(), rise, sset))

  header = ("City", "Country", "Date", "Sunrise", "Sunset")
  widths = [max(len(r[i]) for r in [header] + rows) for i in range(len(header))]
  click.echo(" | ".join(h.ljust(w) for h, w in zip(header, widths)))
  click.echo("-|-".join("-" * w for w in widths))
  for r in rows:
    click.echo(" | ".join(v.ljust(w) for v, w in zip(r, widths)))
  click.echo()
  click.echo(NOTE)


if __name__ == "__main__":
  main()
