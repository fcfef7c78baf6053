import os
from dataclasses import dataclass, replace

# Constants
NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"
GEO_JSON = "application/geo+json"

TRANSPORTS = ("stdio", "sse", "streamable-http")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the weather server.

    Values come from ``WEATHER_*`` environment variables (see ``from_env``)
    and may be overridden by command-line flags through ``with_overrides``.
    """

    api_base: str = NWS_API_BASE
    user_agent: str = USER_AGENT
    timeout: float = 30.0
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    mount_path: str = "/mcp"
    log_file: str = os.path.join("logs", "weather-server.log")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        log_dir = env.get("LOG_DIR", "logs")
        transport = env.get("WEATHER_TRANSPORT", "stdio")
        if transport not in TRANSPORTS:
            raise ValueError(f"Unsupported transport: {transport}")
        log_level = env.get("WEATHER_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}")
        return cls(
            api_base=env.get("NWS_API_BASE", NWS_API_BASE).rstrip("/"),
            user_agent=env.get("WEATHER_USER_AGENT", USER_AGENT),
            timeout=float(env.get("WEATHER_HTTP_TIMEOUT", "30.0")),
            transport=transport,
            host=env.get("WEATHER_HOST", "127.0.0.1"),
            port=int(env.get("WEATHER_PORT", "8000")),
            mount_path=env.get("WEATHER_MOUNT_PATH", "/mcp"),
            log_file=env.get(
                "WEATHER_LOG_FILE", os.path.join(log_dir, "weather-server.log")
            ),
            log_level=log_level,
        )

    def with_overrides(self, **overrides) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
