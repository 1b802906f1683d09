"""Configuration for the Horizon client."""

from .constants import (
    CURSOR_NOW,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PUBLIC_URL,
    DEFAULT_TESTNET_URL,
    DEFAULT_TIMEOUT,
    EVENT_STREAM_MEDIA_TYPE,
    HAL_JSON_MEDIA_TYPE,
    HORIZON_URL_ENV_VAR,
    MAX_PAGE_LIMIT,
    STREAM_CONTROL_PAYLOADS,
)

__all__ = [
    "CURSOR_NOW",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_PUBLIC_URL",
    "DEFAULT_TESTNET_URL",
    "DEFAULT_TIMEOUT",
    "EVENT_STREAM_MEDIA_TYPE",
    "HAL_JSON_MEDIA_TYPE",
    "HORIZON_URL_ENV_VAR",
    "MAX_PAGE_LIMIT",
    "STREAM_CONTROL_PAYLOADS",
]
