import logging
import os
import sys

import pytest
import respx

# Ensure project root is on sys.path so tests can import `nws_mcp_server`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from nws_mcp_server.client import NwsClient  # noqa: E402

API_BASE = "https://api.test"


@pytest.fixture
def client() -> NwsClient:
    return NwsClient(base_url=API_BASE, timeout=1.0)


@pytest.fixture
def nws():
    """respx router standing in for the NWS API; unmatched requests fail the test."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture(autouse=True)
def reset_package_logger():
    logger = logging.getLogger("nws_mcp_server")
    handlers = list(logger.handlers)
    level, propagate = logger.level, logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate

