"""Runtime configuration defaults for the order endpoint and logging."""

from __future__ import annotations

import os

_ORDER_URL_ENV = "PIZZA_ORDER_URL"
_TIMEOUT_ENV = "PIZZA_ORDER_TIMEOUT"
_LOG_PATH_ENV = "PIZZA_ORDER_LOG_PATH"

DEFAULT_ORDER_URL = "http://localhost:9009/api/order"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_PATH = "/tmp/pizza-order.log"


def env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value <= 0:
        return default
    return value


ORDER_URL = os.getenv(_ORDER_URL_ENV, DEFAULT_ORDER_URL)
REQUEST_TIMEOUT_SECONDS = env_float(_TIMEOUT_ENV, DEFAULT_REQUEST_TIMEOUT_SECONDS)
LOG_PATH = os.getenv(_LOG_PATH_ENV, DEFAULT_LOG_PATH)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
