"""HTTP transport for chat-completion providers.

Posts one JSON document and hands back the status code and the raw body.
There is no retry or backoff here: a failed request is reported to the caller
as a ``TransportError``.
"""
from typing import Dict, Optional, Tuple

import requests

from providers.errors import TransportError


def post_json(url: str, body: bytes, headers: Dict[str, str], timeout: Optional[float] = None) -> Tuple[int, bytes]:
    """POST ``body`` to ``url`` and return ``(status_code, content)``.

    The full body is read before returning. Non-2xx statuses are not errors at
    this layer; the caller decides what a status means.
    """
    try:
        resp = requests.post(url, data=body, headers=headers, timeout=timeout)
        return resp.status_code, resp.content
    except requests.RequestException as e:
        raise TransportError(f"request to {url} failed: {e}") from e
