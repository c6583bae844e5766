from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings"""
    # Plan policy
    spf_exempt_from_cap: bool = False
    dedupe_avoid_ingredients: bool = False
    require_concerns: bool = False

    # CLI
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    class Config:
        env_file = '.env'
        env_prefix = 'SKINPLAN_'


@lru_cache
def get_settings() -> Settings:
    return Settings()
