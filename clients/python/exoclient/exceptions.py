"""Exo client exceptions."""

from typing import Any

from .types import ResponseError


class ExoError(Exception):
    """Base exception for Exo errors.

    Mirrors the protocol's error shape: ``origin`` names where the failure
    happened (``client``, ``transport`` or ``server``), ``note`` carries any
    extra detail the server attached.
    """

    def __init__(
        self,
        message: str,
        origin: str | None = None,
        note: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.origin = origin
        self.note = note

    def to_response_error(self) -> ResponseError:
        """Return the error in its wire shape."""
        return ResponseError(origin=self.origin or "", message=self.message, note=self.note)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(origin={self.origin!r}, message={self.message!r}, note={self.note!r})"


class ConfigurationError(ExoError):
    """No usable configuration at call time."""

    def __init__(self, message: str = "missing configuration", note: str | None = None):
        super().__init__(message, origin="client", note=note)


class TransportError(ExoError):
    """The HTTP transport itself failed."""

    def __init__(self, message: str, note: str | None = None):
        super().__init__(message, origin="transport", note=note)


class ProtocolError(ExoError):
    """Server returned an error, or the response could not be reduced."""

    @classmethod
    def from_body(cls, body: dict[str, Any]) -> "ProtocolError":
        """Build from a server error body, keeping its fields verbatim."""
        error = ResponseError.from_response(body)
        return cls(error.message, origin=error.origin, note=error.note)
