from datetime import date, datetime

from pydantic import BaseModel


class SunTimesRow(BaseModel):
  city: str
  country: str
  latitude: float
  longitude: float
  date: date
  sunrise: datetime
  sunset: datetime
  utc_offset_hours: int
