from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

ALL_COUNTRIES = "All countries"


class LocationRecord(BaseModel):
  model_config = ConfigDict(frozen=True)

  name: str = Field(min_length=1)
  country: str
  latitude: float
  longitude: float

  @property
  def display(self) -> str:
    return self.name


def countries(records: Iterable[LocationRecord]) -> List[str]:
  return sorted({r.country for r in records if r.country.strip()})


def filter_by_country(records: Iterable[LocationRecord], country: Optional[str]) -> List[LocationRecord]:
  if not country or country == ALL_COUNTRIES:
    return list(records)
  wanted = country.casefold()
  return [r for r in records if r.country.casefold() == wanted]


def search(records: Iterable[LocationRecord], query: str) -> List[LocationRecord]:
  """
  Case-insensitive name search: exact matches first, then prefix, then substring.
  """
  q = query.strip().casefold()
  if not q:
    return []
  exact, prefix, contains = [], [], []
  for r in records:
    name = r.name.casefold()
    if name == q:
      exact.append(r)
    elif name.startswith(q):
      prefix.append(r)
    elif q in name:
      contains.append(r)

  def by_name(r):
    return r.name.casefold()

  return sorted(exact, key=by_name) + sorted(prefix, key=by_name) + sorted(contains, key=by_name)
