from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .const import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT


class ClientConfig(BaseSettings):
    """Immutable client settings, also loadable from SESAME_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="SESAME_", frozen=True)

    # Get an API key at https://dash.candyhouse.co
    api_key: SecretStr
    # Empty means DEFAULT_ENDPOINT
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT

    @field_validator("endpoint", mode="before")
    @classmethod
    def _default_endpoint(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_ENDPOINT
        return value

    @field_validator("endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")
