import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EVENT_DETAILS_")

    log_level: int | str = logging.INFO
    # {id} is replaced with the URL-quoted event identifier
    upstream_url_template: str = "https://api.p2pquake.net/v2/jma/quake/{id}"
    retrieval_timeout_seconds: float = 5.0


settings = Settings()
