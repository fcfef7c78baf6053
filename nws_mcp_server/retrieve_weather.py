import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Annotated, Union

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from .client import NwsClient, Unavailable
from .config import LOG_LEVELS, TRANSPORTS, Settings
from .diagnostics import configure_logging
from .fetcher import fetch_alerts, fetch_forecast_periods, fetch_grid_point
from .formatter import format_alerts, format_coordinate, format_forecast

logger = logging.getLogger(__name__)

# Argument shapes are enforced by FastMCP before any tool body runs
StateCode = Annotated[
    str, Field(min_length=2, max_length=2, description="Two-letter state code (e.g. CA, NY)")
]
Latitude = Annotated[
    float, Field(ge=-90, le=90, strict=True, description="Latitude of the location")
]
Longitude = Annotated[
    float, Field(ge=-180, le=180, strict=True, description="Longitude of the location")
]


async def get_alerts(client: NwsClient, state: str) -> str:
    """Get weather alerts for a US state.

    Args:
        client: upstream NWS client
        state: Two-letter US state code, any case
    """
    state_code = state.upper()
    result = await fetch_alerts(client, state_code)

    if isinstance(result, Unavailable):
        return "Failed to retrieve alerts data"

    if not result.data:
        return f"No active alerts for {state_code}"

    return format_alerts(state_code, result.data)


async def get_forecast(client: NwsClient, latitude: float, longitude: float) -> str:
    """Get weather forecast for a location.

    Resolves the coordinates to a grid point first, then fetches the forecast
    URL it names. Each step short-circuits with its own message on failure.
    """
    point = await fetch_grid_point(client, latitude, longitude)
    if isinstance(point, Unavailable):
        return (
            "Failed to retrieve grid point data for coordinates: "
            f"{format_coordinate(latitude)}, {format_coordinate(longitude)}. "
            "This location may not be supported by the NWS API "
            "(only US locations are supported)."
        )

    forecast_url = point.data.forecast_url
    if not forecast_url:
        return "Failed to get forecast URL from grid point data"

    forecast = await fetch_forecast_periods(client, forecast_url)
    if isinstance(forecast, Unavailable):
        return "Failed to retrieve forecast data"

    if not forecast.data:
        return "No forecast periods available"

    return format_forecast(latitude, longitude, forecast.data)


def register_tools(server: FastMCP, client: NwsClient) -> None:
    """Expose the alert and forecast lookups as MCP tools on ``server``."""

    async def alerts_tool(state: StateCode) -> str:
        logger.info("Get alerts tool called with state: %s", state)
        return await get_alerts(client, state)

    async def forecast_tool(latitude: Latitude, longitude: Longitude) -> str:
        logger.info("Get forecast tool called with lat: %s, lon: %s", latitude, longitude)
        return await get_forecast(client, latitude, longitude)

    server.add_tool(alerts_tool, name="get-alerts", description="Get weather alerts for a state")
    server.add_tool(
        forecast_tool, name="get-forecast", description="Get weather forecast for a location"
    )


@dataclass(frozen=True)
class Started:
    server: FastMCP
    settings: Settings


@dataclass(frozen=True)
class StartupFailed:
    error: Exception


StartupResult = Union[Started, StartupFailed]


def create_server(settings: Settings) -> StartupResult:
    """Build the FastMCP server with both tools registered.

    Setup errors are returned as ``StartupFailed`` rather than raised so the
    entry point alone decides how the process exits.
    """
    try:
        logger.info("Initializing MCP server")
        server = FastMCP(
            "weather",
            host=settings.host,
            port=settings.port,
            mount_path=settings.mount_path,
            streamable_http_path=settings.mount_path,
        )
        client = NwsClient(
            base_url=settings.api_base,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
        )
        register_tools(server, client)
    except Exception as e:
        return StartupFailed(e)
    return Started(server, settings)


def load_settings(args: argparse.Namespace) -> Union[Settings, StartupFailed]:
    try:
        return Settings.from_env().with_overrides(
            transport=args.transport,
            host=args.host,
            port=args.port,
            mount_path=args.mount_path,
            log_file=args.log_file,
            log_level=args.log_level,
            timeout=args.timeout,
        )
    except ValueError as e:
        return StartupFailed(e)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nws-weather")
    parser.add_argument("command", nargs="?", choices=["run"], default="run")
    parser.add_argument(
        "--version", action="store_true", help="Print package version and exit"
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        help="Transport to use (default: WEATHER_TRANSPORT or stdio)",
    )
    parser.add_argument(
        "--mount-path", help="Mount path for HTTP transports (default: /mcp)"
    )
    parser.add_argument("--host", help="Host to bind the HTTP server to")
    parser.add_argument("--port", type=int, help="Port to bind the HTTP server to")
    parser.add_argument("--log-file", help="Diagnostic log file path")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Diagnostic log level (default: INFO)",
    )
    parser.add_argument(
        "--timeout", type=float, help="Per-request upstream timeout in seconds"
    )
    return parser


def main(argv=None) -> int:
    """Entry point for running the weather MCP server.

    Returns the process exit status: 0 after a clean shutdown, 1 when the
    server could not be set up or its transport failed.
    """
    args = build_parser().parse_args(argv)

    if args.version:
        try:
            from importlib.metadata import version

            print(version("nws-weather-mcp"))
        except Exception:
            print("version unknown")
        return 0

    settings = load_settings(args)
    if isinstance(settings, StartupFailed):
        logger.error("Fatal error during setup: %s", settings.error)
        return 1

    configure_logging(settings.log_file, settings.log_level)

    init = create_server(settings)
    if isinstance(init, StartupFailed):
        logger.error("Fatal error during setup: %s", init.error)
        return 1

    transport = settings.transport
    try:
        logger.info("Creating %s transport", transport)
        print(f"Weather MCP Server running on {transport}", file=sys.stderr)
        logger.info("Weather MCP Server running on %s", transport)
        init.server.run(transport=transport, mount_path=settings.mount_path)
    except KeyboardInterrupt:
        logger.info("Weather MCP Server stopped by user")
    except Exception as e:
        logger.exception("Fatal error initializing server: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
