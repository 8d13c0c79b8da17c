from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_file: str = "quest_data.json"
    # Owner key for the HTTP surface; unset means no auth
    api_key: str | None = None

    # Points per level; level = score // level_step + 1
    level_step: int = 1000

    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_prefix": "QUEST_", "extra": "ignore"}


settings = Settings()
