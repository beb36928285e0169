"""Shared HTTP utilities."""

from __future__ import annotations

from urllib.parse import urlparse

_API_URL_ALLOWED_SCHEMES = frozenset({"http", "https"})

API_FORMAT = ".json"


def normalize_api_url(value: str) -> str:
    """Normalize and validate the base URL of the control panel API."""
    candidate = value.strip()
    if not candidate:
        raise ValueError("api_url must not be empty")

    parsed = urlparse(candidate)
    if parsed.scheme.lower() not in _API_URL_ALLOWED_SCHEMES:
        raise ValueError("api_url must use http or https")
    if not parsed.netloc:
        raise ValueError("api_url must include host")
    if parsed.query or parsed.fragment:
        raise ValueError("api_url must not include query or fragment")
    if parsed.username or parsed.password:
        raise ValueError("api_url must not include userinfo")

    normalized_path = parsed.path.rstrip("/")
    if normalized_path == "/":
        normalized_path = ""
    return f"{parsed.scheme.lower()}://{parsed.netloc}{normalized_path}"


def resource_path(*parts: object) -> str:
    """Join path segments and append the ``.json`` suffix.

    ``resource_path("settings/data_stores", 7)`` -> ``settings/data_stores/7.json``
    """
    segments = [str(part).strip("/") for part in parts if str(part).strip("/")]
    return "/".join(segments) + API_FORMAT
