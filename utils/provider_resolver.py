"""Resolve and validate the chat-completion endpoint.

Provides helpers to default the base URL, check that it is usable and join it
with the completions path.
"""
from typing import Optional
from urllib.parse import urlsplit, urlunsplit


DEFAULT_BASE_URL = "https://api.openai.com"
COMPLETIONS_PATH = "/v1/chat/completions"


def resolve_base_url(base: Optional[str]) -> str:
    """Return ``base`` or the default base when it is unset or blank."""
    if base is None or not base.strip():
        return DEFAULT_BASE_URL
    return base.strip()


def is_default_base(base: str) -> bool:
    return base.rstrip("/") == DEFAULT_BASE_URL


def validate_base_url(base: str) -> str:
    """Check that ``base`` is an absolute http(s) URL with a host.

    Raises:
        ValueError: describing what is wrong with the URL.
    """
    try:
        parts = urlsplit(base)
        # accessing port parses it and rejects out-of-range values
        parts.port
    except ValueError as e:
        raise ValueError(f"invalid base URL {base!r}: {e}") from e

    if parts.scheme not in ("http", "https"):
        raise ValueError(f"base URL must use http or https: {base!r}")
    if not parts.hostname:
        raise ValueError(f"base URL has no host: {base!r}")
    if parts.fragment:
        raise ValueError(f"base URL must not carry a fragment: {base!r}")
    return base


def completions_url(base: str) -> str:
    """Join ``base`` with the completions path, keeping any base path prefix.

    ``https://host/proxy/`` becomes ``https://host/proxy/v1/chat/completions``.
    """
    validate_base_url(base)
    parts = urlsplit(base)
    path = parts.path.rstrip("/") + COMPLETIONS_PATH
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))
