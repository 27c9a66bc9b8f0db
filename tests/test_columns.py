import pytest
from pydantic import ValidationError

from sunrisesunset.model.columns import ColumnConfig, load_column_config


def test_packaged_defaults():
  assert load_column_config() == ColumnConfig()


def test_yaml_override(tmp_path):
  p = tmp_path / "columns.yaml"
  p.write_text("latitude: latitude\nlongitude: longitude\ndelimiter: \"\\t\"\n", encoding="utf-8")
  cfg = load_column_config(str(p))
  assert cfg.latitude == "latitude"
  assert cfg.delimiter == "\t"
  assert cfg.name == "city"


def test_bad_delimiter():
  with pytest.raises(ValidationError):
    ColumnConfig(delimiter=",,")
  with pytest.raises(ValidationError):
    ColumnConfig(delimiter='"')
