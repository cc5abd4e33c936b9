import pytest

from weathersensor.core.errors import ValidationError
from weathersensor.schemas.config import WeatherSensorConfig, parse_config, validate_attributes


def test_validate_returns_temperature_sensor_dependency(attributes):
    assert validate_attributes(attributes, "components.0") == ["inside-temp"]


def test_parse_config_reads_aliased_fields(attributes):
    cfg = parse_config(attributes)
    assert cfg.temperature_sensor == "inside-temp"
    assert cfg.api_key == "secret"
    assert cfg.zipcode == 94103


@pytest.mark.parametrize("missing", ["temp-sensor", "apikey", "zipcode"])
def test_validate_names_missing_attribute(attributes, missing):
    del attributes[missing]
    with pytest.raises(ValidationError) as exc_info:
        validate_attributes(attributes, "components.0")
    assert f'"{missing}"' in str(exc_info.value)
    assert exc_info.value.path == "components.0"


def test_validate_rejects_zero_zipcode(attributes):
    attributes["zipcode"] = 0
    with pytest.raises(ValidationError, match='"zipcode"'):
        validate_attributes(attributes)


def test_validate_reports_first_failure_only():
    cfg = WeatherSensorConfig()
    with pytest.raises(ValidationError) as exc_info:
        cfg.validate_config()
    assert '"temp-sensor"' in str(exc_info.value)
    assert "apikey" not in str(exc_info.value)


def test_parse_config_rejects_non_integer_zipcode(attributes):
    attributes["zipcode"] = "not-a-zip"
    with pytest.raises(ValidationError):
        parse_config(attributes)
