from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_name: str = "authflow"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    http_timeout_seconds: float = 15.0

    # OAUTH__LINEAR__CLIENT_ID=... -> {"linear": {"client_id": "..."}}
    oauth: dict[str, dict[str, Any]] = Field(default_factory=dict)

    def provider_config(self, provider: str) -> dict[str, Any]:
        return dict(self.oauth.get(provider.lower(), {}))


settings = Settings()
