from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
import math
from typing import Optional

# Solar noon is pinned to 13:00 on the local clock.
SOLAR_NOON_HOUR = 13.0


class SolarCalculationError(ValueError):
  """No sunrise/sunset can be produced for this location and date.

  Raised when the hour angle is undefined (polar day or polar night), with
  ``cos_hour_angle`` set, or when a rolled-over time leaves the supported
  calendar range (``cos_hour_angle`` is None).
  """

  def __init__(self, latitude: float, longitude: float, d: date,
               cos_hour_angle: Optional[float] = None, reason: Optional[str] = None):
    self.latitude = latitude
    self.longitude = longitude
    self.date = d
    self.cos_hour_angle = cos_hour_angle
    if reason is None:
      reason = f"cos(hour angle)={cos_hour_angle:.4f}"
    super().__init__(f"No sunrise/sunset at lat={latitude}, lng={longitude} on {d.isoformat()} ({reason})")


@dataclass(frozen=True)
class SolarTimes:
  sunrise: datetime
  sunset: datetime
  sunrise_hour: float
  sunset_hour: float
  # Informational only, never applied to sunrise/sunset.
  utc_offset_hours: int


def _as_date(d) -> date:
  return d.date() if isinstance(d, datetime) else d


def solar_declination(day_of_year: int) -> float:
  """Solar declination in radians for a 1-based day of the year."""
  return math.asin(0.39795 * math.cos(0.98563 * (day_of_year - 173) * math.pi / 180))


def utc_offset_hours(longitude: float) -> int:
  return int(longitude / 15)


def solar_times(latitude: float, longitude: float, d: date) -> SolarTimes:
  """Approximate local sunrise/sunset using the NOAA single-day formula.

  Times are local solar clock times with noon at 13:00; no time zone
  correction is applied. Hours below 0 or above 24 roll into the adjacent day.

  Raises:
    SolarCalculationError: when the hour angle is undefined for this
      latitude and date, or when a time rolls past the
      first or last representable date.
  """
  d = _as_date(d)
  day_of_year = d.timetuple().tm_yday
  declination = solar_declination(day_of_year)

  cos_h = -math.tan(latitude * math.pi / 180) * math.tan(declination)
  if not -1.0 <= cos_h <= 1.0:
    raise SolarCalculationError(latitude, longitude, d, cos_h)
  hour_angle = math.acos(cos_h)

  half_day = hour_angle * 180 / math.pi / 15
  sunrise_hour = SOLAR_NOON_HOUR - half_day
  sunset_hour = SOLAR_NOON_HOUR + half_day

  midnight = datetime.combine(d, time())
  try:
    sunrise = midnight + timedelta(hours=sunrise_hour)
    sunset = midnight + timedelta(hours=sunset_hour)
  except OverflowError as e:
    raise SolarCalculationError(latitude, longitude, d, reason="time outside the supported calendar range") from e
  return SolarTimes(
    sunrise=sunrise,
    sunset=sunset,
    sunrise_hour=sunrise_hour,
    sunset_hour=sunset_hour,
    utc_offset_hours=utc_offset_hours(longitude),
  )


def calculate(latitude: float, longitude: float, d: date) -> tuple[datetime, datetime]:
  times = solar_times(latitude, longitude, d)
  return times.sunrise, times.sunset


@dataclass
class Daylight:
  latitude: float
  longitude: float = 0.0

  @classmethod
  def for_location(cls, record) -> "Daylight":
    return cls(latitude=record.latitude, longitude=record.longitude)

  def solar_times(self, d: date) -> SolarTimes:
    return solar_times(self.latitude, self.longitude, d)

  def sunrise_sunset(self, d: date) -> tuple[datetime, datetime]:
    return calculate(self.latitude, self.longitude, d)
