from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, case_sensitive=False)

    graph_base_url: str = "https://graph.microsoft.com/v1.0"
    # None keeps httpx's own default timeout.
    http_timeout_seconds: float | None = None

    log_level: str = "INFO"

    @field_validator("graph_base_url")
    @classmethod
    def validate_graph_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("GRAPH_BASE_URL must not be empty")
        return value


settings = Settings()
