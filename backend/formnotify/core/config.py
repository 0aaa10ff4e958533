from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    adapter_url: str = "http://localhost:8080"
    adapter_key: str = ""
    default_project: str = ""
    redis_url: str = "redis://localhost:6379/0"
    request_timeout: float = 10.0

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Relay endpoints are joined with a leading slash
        self.adapter_url = self.adapter_url.rstrip("/")

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[arg-type]
