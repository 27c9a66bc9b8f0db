from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator

DEFAULT_COLUMNS_PATH = Path(__file__).parent.parent / "config" / "columns.yaml"


class ColumnConfig(BaseModel):
  name: str = "city"
  ascii_name: str = "city_ascii"
  country: str = "country"
  latitude: str = "lat"
  longitude: str = "lng"
  delimiter: str = ","

  @field_validator("delimiter")
  @classmethod
  def _single_char(cls, v: str) -> str:
    if len(v) != 1 or v == '"':
      raise ValueError("delimiter must be a single character other than '\"'")
    return v


def load_column_config(path: Optional[str] = None) -> ColumnConfig:
  cfg_path = Path(path) if path else DEFAULT_COLUMNS_PATH
  data = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
  return ColumnConfig(**data)
