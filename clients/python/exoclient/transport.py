"""URL composition and the HTTP call itself."""

import json
import logging
from typing import Any

import httpx

from .exceptions import TransportError
from .types import Configuration, RequestData

logger = logging.getLogger(__name__)


def compose(configuration: Configuration, path: str) -> tuple[str, dict[str, str]]:
    """Build the request URL and headers for ``path``.

    Parameters are appended as ``name=value`` pairs in order. Nothing is
    URL-escaped; values must already be safe to place in a query string.
    """
    url = configuration.url + path
    if configuration.params:
        url += "?" + "&".join(f"{name}={value}" for name, value in configuration.params)

    headers = {"Content-Type": "application/json"}
    if configuration.token:
        headers["Authorization"] = f"Bearer {configuration.token}"
    return url, headers


def encode(envelope: RequestData | dict[str, Any]) -> str:
    """Serialize a request envelope to its JSON wire text."""
    data = envelope if isinstance(envelope, dict) else envelope.to_dict()
    return json.dumps(data, separators=(",", ":"))


async def send(
    url: str,
    headers: dict[str, str],
    envelope: RequestData | dict[str, Any],
    client: httpx.AsyncClient | None = None,
) -> tuple[bool, str]:
    """POST ``envelope`` and return ``(is_success, body_text)``.

    HTTP error statuses are returned, not raised. Only failures of the
    transport itself raise.

    Raises:
        TransportError: Connection, DNS, timeout or protocol failure.
    """
    content = encode(envelope)
    logger.debug("POST %s", url)
    try:
        if client is None:
            async with httpx.AsyncClient() as owned:
                response = await owned.post(url, headers=headers, content=content)
        else:
            response = await client.post(url, headers=headers, content=content)
    except httpx.RequestError as e:
        logger.debug("POST %s failed: %s", url, e)
        raise TransportError(str(e) or type(e).__name__) from e

    logger.debug("POST %s -> %d", url, response.status_code)
    return response.is_success, response.text


def send_sync(
    url: str,
    headers: dict[str, str],
    envelope: RequestData | dict[str, Any],
    client: httpx.Client | None = None,
) -> tuple[bool, str]:
    """Blocking counterpart of :func:`send`."""
    content = encode(envelope)
    logger.debug("POST %s", url)
    try:
        if client is None:
            with httpx.Client() as owned:
                response = owned.post(url, headers=headers, content=content)
        else:
            response = client.post(url, headers=headers, content=content)
    except httpx.RequestError as e:
        logger.debug("POST %s failed: %s", url, e)
        raise TransportError(str(e) or type(e).__name__) from e

    logger.debug("POST %s -> %d", url, response.status_code)
    return response.is_success, response.text
