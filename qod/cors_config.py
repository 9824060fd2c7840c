"""CORS configuration for the FastAPI application."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",  # Vite default dev server
    "http://127.0.0.1:5173",
]


def _normalize_origin(origin: str) -> str:
    """
    Normalize a CORS origin by adding https:// if no protocol is specified
    and dropping any trailing slash.

    Args:
        origin: The origin string (e.g., "example.com" or "https://example.com/")

    Returns:
        The normalized origin with protocol (e.g., "https://example.com")
    """
    origin = origin.strip().rstrip("/")
    if not origin.startswith(("http://", "https://")):
        return f"https://{origin}"
    return origin


def _get_cors_origins(allowed_origins: str | None = None) -> list[str]:
    """
    Get the list of allowed CORS origins.

    Args:
        allowed_origins: Optional comma-separated list of production origins.
                         If empty or missing, the development origins are used.

    Returns:
        List of allowed CORS origins with protocols
    """
    if not allowed_origins:
        return list(DEV_ORIGINS)

    origins = [_normalize_origin(o) for o in allowed_origins.split(",") if o.strip()]
    return origins or list(DEV_ORIGINS)


def get_cors_config(allowed_origins: str | None = None) -> dict[str, Any]:
    """
    Get the CORS middleware configuration.

    Args:
        allowed_origins: Optional comma-separated list of production origins

    Returns:
        Dictionary with allow_origins, allow_credentials, allow_methods
        and allow_headers
    """
    origins = _get_cors_origins(allowed_origins)
    logger.info(f"CORS allowed_origins setting is {origins}")

    return {
        "allow_origins": origins,
        "allow_credentials": False,
        "allow_methods": ["GET", "POST", "PUT", "DELETE"],
        "allow_headers": ["*"],
    }
