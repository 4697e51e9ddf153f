"""Environment-driven configuration.

``EXO_URL``, ``EXO_TOKEN`` and ``EXO_PARAMS`` (``name=value&name=value``) are
read from the process environment or a ``.env`` file.
"""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .types import Configuration


class ExoSettings(BaseSettings):
    URL: str
    TOKEN: str | None = None
    PARAMS: str = ""

    model_config = SettingsConfigDict(
        env_prefix="EXO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("TOKEN", mode="before")
    @classmethod
    def _blank_token(cls, value):
        return value or None

    @field_validator("PARAMS")
    @classmethod
    def _check_params(cls, value: str) -> str:
        for pair in filter(None, value.split("&")):
            if "=" not in pair:
                raise ValueError(f"entry {pair!r} is not name=value")
        return value

    def params(self) -> list[tuple[str, str]]:
        """Split ``PARAMS`` into ordered name/value pairs."""
        return [tuple(pair.split("=", 1)) for pair in filter(None, self.PARAMS.split("&"))]

    def to_configuration(self) -> Configuration:
        return Configuration.create(self.URL, token=self.TOKEN, params=self.params())


def load_configuration(prefix: str = "EXO_") -> Configuration:
    """Build a Configuration from ``<prefix>``-prefixed settings.

    Raises:
        ConfigurationError: The URL is missing or a setting is malformed.
    """
    try:
        settings = ExoSettings(_env_prefix=prefix)
    except ValidationError as e:
        missing = [err for err in e.errors() if err["type"] == "missing"]
        if missing:
            raise ConfigurationError(note=f"{prefix}URL is not set") from e
        raise ConfigurationError("invalid configuration", note=str(e)) from e
    return settings.to_configuration()
