"""Parsing of world-cities CSV text into location records.

The parser is deliberately forgiving: rows that are blank, too short, carry
non-numeric coordinates or resolve to an empty name are dropped (and logged at
DEBUG) instead of failing the whole file.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence
import logging
import re

from ..model.columns import ColumnConfig
from ..model.location import LocationRecord

logger = logging.getLogger(__name__)

CITIES_FILENAME = "world_cities.csv"

# Invariant-culture decimal: optional sign, digits with an optional period, optional exponent.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def split_line(line: str, delimiter: str = ",") -> List[str]:
  """Split one delimited line.

  Any ``"`` toggles quoting, wherever it sits in a field; inside quotes the
  delimiter is literal and ``""`` stands for one ``"``.
  """
  line = line.rstrip("\r\n")
  fields: List[str] = []
  current: List[str] = []
  in_quotes = False
  i = 0
  while i < len(line):
    c = line[i]
    if c == '"':
      if in_quotes and line[i + 1:i + 2] == '"':
        current.append('"')
        i += 1
      else:
        in_quotes = not in_quotes
    elif c == delimiter and not in_quotes:
      fields.append("".join(current))
      current = []
    else:
      current.append(c)
    i += 1
  fields.append("".join(current))
  return fields


def parse_decimal(text: str) -> Optional[float]:
  text = text.strip()
  if not _DECIMAL_RE.fullmatch(text):
    return None
  return float(text)


def _column_index(header: Sequence[str], token: str) -> int:
  wanted = token.casefold()
  for i, col in enumerate(header):
    if col.lstrip("\ufeff").strip().casefold() == wanted:
      return i
  return -1


def _field(cols: Sequence[str], idx: int) -> str:
  return cols[idx] if 0 <= idx < len(cols) else ""


def parse(lines: Iterable[str], columns: Optional[ColumnConfig] = None) -> Iterator[LocationRecord]:
  """Yield a LocationRecord for every usable data row, in source order.

  Args:
    lines: Header line followed by data lines, from any source.
    columns: Header tokens and delimiter (default: ColumnConfig()).

  Yields:
    LocationRecord for each row with numeric coordinates and a non-empty name.
  """
  columns = columns or ColumnConfig()
  it = iter(lines)
  header_line = next(it, None)
  if header_line is None:
    return

  header = split_line(header_line, columns.delimiter)
  idx_name = _column_index(header, columns.name)
  idx_ascii = _column_index(header, columns.ascii_name)
  idx_country = _column_index(header, columns.country)
  idx_lat = _column_index(header, columns.latitude)
  idx_lng = _column_index(header, columns.longitude)
  if idx_lat < 0 or idx_lng < 0:
    logger.warning(f"Header has no '{columns.latitude}'/'{columns.longitude}' column, no records parsed")
    return

  for lineno, line in enumerate(it, start=2):
    if not line.strip():
      continue
    cols = split_line(line, columns.delimiter)
    if idx_lat >= len(cols) or idx_lng >= len(cols):
      logger.debug(f"Line {lineno}: only {len(cols)} fields, skipped")
      continue

    lat = parse_decimal(cols[idx_lat])
    lng = parse_decimal(cols[idx_lng])
    if lat is None or lng is None:
      logger.debug(f"Line {lineno}: bad coordinates {cols[idx_lat]!r}, {cols[idx_lng]!r}, skipped")
      continue

    ascii_name = _field(cols, idx_ascii).strip()
    name = ascii_name or _field(cols, idx_name).strip()
    if not name:
      logger.debug(f"Line {lineno}: empty name, skipped")
      continue

    yield LocationRecord(
      name=name,
      country=_field(cols, idx_country).strip(),
      latitude=lat,
      longitude=lng,
    )


def load_cities(path, columns: Optional[ColumnConfig] = None) -> List[LocationRecord]:
  with open(path, encoding="utf-8-sig", newline="") as f:
    records = list(parse(f, columns))
  logger.info(f"Loaded {len(records)} cities from {path}")
  return records


def find_cities_csv(candidates: Optional[Iterable] = None) -> Optional[Path]:
  """Return the first existing cities file among the candidates, or None.

  Defaults to world_cities.csv next to the package, then in the current directory.
  """
  if candidates is None:
    candidates = [
      Path(__file__).parent.parent / CITIES_FILENAME,
      Path.cwd() / CITIES_FILENAME,
    ]
  for candidate in candidates:
    path = Path(candidate)
    if path.is_file():
      return path
  return None
