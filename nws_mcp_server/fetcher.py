from .client import FetchResult, NwsClient, Success
from .models import GridPoint, alert_features, forecast_periods


def alerts_url(client: NwsClient, state: str) -> str:
    return f"{client.base_url}/alerts?area={state}"


def points_url(client: NwsClient, latitude: float, longitude: float) -> str:
    return f"{client.base_url}/points/{latitude:.4f},{longitude:.4f}"


async def fetch_alerts(client: NwsClient, state: str) -> FetchResult:
    """Fetch active alerts for an uppercase state code.

    Returns ``Success(list[AlertFeature])`` or the client's ``Unavailable``.
    """
    result = await client.fetch(alerts_url(client, state))
    if isinstance(result, Success):
        return Success(alert_features(result.data))
    return result


async def fetch_grid_point(client: NwsClient, latitude: float, longitude: float) -> FetchResult:
    """Resolve coordinates to a ``GridPoint`` via the ``/points`` endpoint."""
    result = await client.fetch(points_url(client, latitude, longitude))
    if isinstance(result, Success):
        return Success(GridPoint.from_json(result.data))
    return result


async def fetch_forecast_periods(client: NwsClient, forecast_url: str) -> FetchResult:
    result = await client.fetch(forecast_url)
    if isinstance(result, Success):
        return Success(forecast_periods(result.data))
    return result
