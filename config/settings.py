"""
Configuration settings for the Recipe Companion application.
Values can be overridden with RECIPE_* environment variables or a .env file.
"""

from pydantic_settings import BaseSettings
from typing import Literal
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application settings
    app_name: str = "Recipe Companion"
    app_version: str = "1.0.0"
    debug: bool = False
    
    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000
    
    # Page rendering
    container_id: str = "recipe-container"
    page_title: str = "Recipe Companion"
    default_sort_property: Literal["id", "name", "cuisine", "difficulty", "time"] = "name"
    
    # Rendered page cache
    cache_maxsize: int = 100
    cache_ttl: int = 3600
    
    class Config:
        env_file = ".env"
        env_prefix = "RECIPE_"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
