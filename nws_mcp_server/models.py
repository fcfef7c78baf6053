"""NWS response data models.

Every field is optional upstream. Missing keys, nulls, empty strings and
values of the wrong JSON type all become ``None`` here so formatting never
has to guard against them.
"""

from dataclasses import dataclass
from typing import Any


def _text(mapping: dict, key: str) -> str | None:
    value = mapping.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _number(mapping: dict, key: str) -> int | float | None:
    value = mapping.get(key)
    # bool is an int subclass but never a temperature
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return None


def _object(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _objects(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [_object(item) for item in value]


@dataclass(frozen=True)
class AlertFeature:
    event: str | None = None
    area_desc: str | None = None
    severity: str | None = None
    status: str | None = None
    headline: str | None = None

    @classmethod
    def from_json(cls, feature: Any) -> "AlertFeature":
        props = _object(_object(feature).get("properties"))
        return cls(
            event=_text(props, "event"),
            area_desc=_text(props, "areaDesc"),
            severity=_text(props, "severity"),
            status=_text(props, "status"),
            headline=_text(props, "headline"),
        )


@dataclass(frozen=True)
class ForecastPeriod:
    name: str | None = None
    temperature: int | float | None = None
    temperature_unit: str | None = None
    wind_speed: str | None = None
    wind_direction: str | None = None
    short_forecast: str | None = None

    @classmethod
    def from_json(cls, period: Any) -> "ForecastPeriod":
        data = _object(period)
        return cls(
            name=_text(data, "name"),
            temperature=_number(data, "temperature"),
            temperature_unit=_text(data, "temperatureUnit"),
            wind_speed=_text(data, "windSpeed"),
            wind_direction=_text(data, "windDirection"),
            short_forecast=_text(data, "shortForecast"),
        )


@dataclass(frozen=True)
class GridPoint:
    forecast_url: str | None = None

    @classmethod
    def from_json(cls, body: Any) -> "GridPoint":
        props = _object(_object(body).get("properties"))
        return cls(forecast_url=_text(props, "forecast"))


def alert_features(body: Any) -> list[AlertFeature]:
    """Features of an ``/alerts`` response body."""
    return [AlertFeature.from_json(f) for f in _objects(_object(body).get("features"))]


def forecast_periods(body: Any) -> list[ForecastPeriod]:
    """Periods of a forecast response body."""
    props = _object(_object(body).get("properties"))
    return [ForecastPeriod.from_json(p) for p in _objects(props.get("periods"))]
