from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_ease_factor: float = 2.5
    max_interval_days: int | None = Field(default=None, ge=1)  # None = uncapped (plain SM-2)
    easy_accuracy_threshold: float = 90.0
    medium_accuracy_threshold: float = 70.0
    default_queue_limit: int = Field(default=20, ge=0)  # 0 = no limit

    model_config = {"env_prefix": "FLASHMIND_"}


settings = Settings()
