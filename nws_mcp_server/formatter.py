from decimal import Decimal

from .models import AlertFeature, ForecastPeriod

SEPARATOR = "---"


def format_alert(alert: AlertFeature) -> str:
    """Format an alert feature into a readable block ending with a separator line."""
    return "\n".join(
        [
            f"Event: {alert.event or 'Unknown'}",
            f"Area: {alert.area_desc or 'Unknown'}",
            f"Severity: {alert.severity or 'Unknown'}",
            f"Status: {alert.status or 'Unknown'}",
            f"Headline: {alert.headline or 'No headline'}",
            SEPARATOR,
        ]
    )


def format_alerts(state: str, alerts: list[AlertFeature]) -> str:
    formatted = [format_alert(alert) for alert in alerts]
    return f"Active alerts for {state}:\n\n" + "\n".join(formatted)


def format_period(period: ForecastPeriod) -> str:
    temperature = "Unknown" if period.temperature is None else period.temperature
    return "\n".join(
        [
            f"{period.name or 'Unknown'}:",
            f"Temperature: {temperature}°{period.temperature_unit or 'F'}",
            f"Wind: {period.wind_speed or 'Unknown'} {period.wind_direction or ''}",
            f"{period.short_forecast or 'No forecast available'}",
            SEPARATOR,
        ]
    )


def format_coordinate(value: float) -> str:
    """Render a coordinate the way the caller wrote it.

    Integral values lose the ``.0`` that float coercion adds, so ``37``
    stays ``37`` while ``37.7749`` is unchanged. Small values are written
    out in positional notation, ``0.00001`` rather than ``1e-05``.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def format_forecast(latitude: float, longitude: float, periods: list[ForecastPeriod]) -> str:
    formatted = [format_period(period) for period in periods]
    header = f"Forecast for {format_coordinate(latitude)}, {format_coordinate(longitude)}:"
    return header + "\n\n" + "\n".join(formatted)
