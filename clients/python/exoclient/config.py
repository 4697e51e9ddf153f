"""Default configuration holder.

Entry points take an explicit ``Configuration``; when it is omitted they fall
back to a ``ConfigurationStore``. The module-level store is what the
convenience functions in ``exoclient`` use unless a client is given its own.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from .exceptions import ConfigurationError
from .settings import load_configuration
from .types import Configuration


class ConfigurationStore:
    """Holds at most one default Configuration.

    Reads are not synchronized; a ``set`` racing with a request is
    last-write-wins and never affects a request that already resolved.
    """

    def __init__(self, configuration: Configuration | None = None):
        self._configuration = configuration

    def get(self) -> Configuration | None:
        return self._configuration

    def set(
        self,
        url: str,
        token: str | None = None,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> Configuration:
        """Create a Configuration, store it in place of any previous one and return it."""
        return self.set_configuration(Configuration.create(url, token=token, params=params))

    def set_configuration(self, configuration: Configuration) -> Configuration:
        self._configuration = configuration
        return configuration

    def clear(self) -> None:
        self._configuration = None

    def resolve(self, configuration: Configuration | None = None) -> Configuration:
        """Return ``configuration`` if given, else the stored one.

        Raises:
            ConfigurationError: Neither is available.
        """
        resolved = configuration if configuration is not None else self._configuration
        if resolved is None:
            raise ConfigurationError()
        return resolved


default_store = ConfigurationStore()


def set_configuration(
    url: str,
    token: str | None = None,
    params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
) -> Configuration:
    """Replace the default configuration."""
    return default_store.set(url, token=token, params=params)


def get_configuration() -> Configuration | None:
    return default_store.get()


def clear_configuration() -> None:
    default_store.clear()


def configure_from_env(prefix: str = "EXO_") -> Configuration:
    """Load the default configuration from ``<prefix>URL``/``TOKEN``/``PARAMS``."""
    return default_store.set_configuration(load_configuration(prefix))
