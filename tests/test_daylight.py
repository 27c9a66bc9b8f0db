from datetime import date, datetime

import pytest

from sunrisesunset.core.daylight import Daylight, SolarCalculationError, calculate, solar_times
from sunrisesunset.model.location import LocationRecord


def test_equator_equinox_symmetric_around_13():
  t = solar_times(0.0, 0.0, date(2024, 3, 20))
  assert t.sunset_hour - 13 == pytest.approx(13 - t.sunrise_hour)
  assert t.sunrise_hour == pytest.approx(7.0)
  assert t.sunset_hour == pytest.approx(19.0)


def test_new_york_near_equinox():
  d = date(2024, 3, 20)
  t = solar_times(40.71, -74.01, d)
  assert 6.5 < t.sunrise_hour < 7.5
  assert 18.5 < t.sunset_hour < 19.5
  assert t.sunrise.date() == d
  assert t.sunset.date() == d
  assert t.sunrise.hour == 7
  assert t.sunset.hour == 18


def test_calculate_is_deterministic():
  a = calculate(40.71, -74.01, date(2024, 3, 20))
  b = calculate(40.71, -74.01, date(2024, 3, 20))
  assert a == b


def test_calculate_accepts_datetime():
  assert calculate(51.5, 0.0, datetime(2024, 6, 1, 15, 30)) == calculate(51.5, 0.0, date(2024, 6, 1))


def test_polar_night_raises():
  with pytest.raises(SolarCalculationError) as exc:
    calculate(85.0, 0.0, date(2024, 12, 21))
  assert exc.value.cos_hour_angle > 1.0
  assert exc.value.date == date(2024, 12, 21)


def test_southern_polar_night_raises():
  with pytest.raises(SolarCalculationError):
    calculate(-85.0, 0.0, date(2024, 6, 21))


def test_polar_error_is_value_error():
  with pytest.raises(ValueError):
    solar_times(89.0, 10.0, date(2024, 6, 21))


def test_sunset_rolls_into_next_day():
  t = solar_times(66.0, 0.0, date(2024, 6, 21))
  assert t.sunset_hour > 24
  assert t.sunset.date() == date(2024, 6, 22)
  assert t.sunrise.date() == date(2024, 6, 21)


def test_utc_offset_is_not_applied():
  east = solar_times(40.0, 120.0, date(2024, 5, 1))
  west = solar_times(40.0, -120.0, date(2024, 5, 1))
  assert east.utc_offset_hours == 8
  assert west.utc_offset_hours == -8
  assert (east.sunrise, east.sunset) == (west.sunrise, west.sunset)


def test_utc_offset_truncates_toward_zero():
  assert solar_times(40.71, -74.01, date(2024, 3, 20)).utc_offset_hours == -4


def test_daylight_for_location():
  rec = LocationRecord(name="Sao Paulo", country="Brazil", latitude=-23.55, longitude=-46.63)
  dl = Daylight.for_location(rec)
  d = date(2024, 1, 15)
  assert dl.sunrise_sunset(d) == calculate(-23.55, -46.63, d)
  assert dl.solar_times(d).utc_offset_hours == -3


def test_southern_summer_days_are_longer():
  rise, sset = calculate(-33.87, 151.21, date(2024, 12, 21))
  assert (sset - rise).total_seconds() / 3600 > 14


def test_rollover_past_last_date_raises():
  with pytest.raises(SolarCalculationError) as exc:
    solar_times(-66.5, 0.0, date(9999, 12, 31))
  assert exc.value.cos_hour_angle is None
  assert isinstance(exc.value.__cause__, OverflowError)
