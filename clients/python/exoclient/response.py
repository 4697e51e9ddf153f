"""Reduce raw HTTP results into responses or errors."""

import json
from typing import Any

from .exceptions import ProtocolError
from .types import Response


def _malformed() -> ProtocolError:
    return ProtocolError("malformed response body", origin="client")


def reduce(ok: bool, body: str) -> Response:
    """Turn ``(is_success, body_text)`` into a Response.

    A failed status means the body is the server's error; its origin,
    message and note are raised unchanged.

    Raises:
        ProtocolError: Error status, or a body that is not a well-formed response.
    """
    try:
        decoded = json.loads(body)
    except ValueError as e:
        raise _malformed() from e

    if not isinstance(decoded, dict):
        raise _malformed()
    if not ok:
        raise ProtocolError.from_body(decoded)
    try:
        return Response.from_response(decoded)
    except (TypeError, AttributeError, KeyError) as e:
        raise _malformed() from e


def data_only(response: Response) -> list[Any]:
    """Return the data of the first row group.

    Raises:
        ProtocolError: The response has no rows.
    """
    if not response.rows:
        raise ProtocolError("no rows in response", origin="client")
    return response.rows[0].data
