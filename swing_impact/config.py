from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Seed for the default surface sampler; unset means a fresh draw every run
    random_seed: Optional[int] = None

    # Offset (ms past the reference) used for a press that never happened
    missed_input_penalty_ms: float = 5000.0
    short_game_missed_input_penalty_ms: float = 9999.0

    # Warn when a surface key cannot be resolved
    fallback_surface_warning: bool = True

    class Config:
        env_file = ".env"
        env_prefix = "SWING_IMPACT_"


settings = Settings()
