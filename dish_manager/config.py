from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List
from dotenv import load_dotenv
load_dotenv()  # populates os.environ from .env


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Storage
    data_dir: str = Field("data")
    dishes_file: str = Field("data/dishes.json")
    ingredients_file: str = Field("data/ingredients.json")
    events_file: str = Field("data/dish_log.jsonl")

    # Shopping list / autocomplete
    max_selected_dishes: int = Field(10, ge=1)
    suggestion_limit: int = Field(10, ge=1)

    # Logging
    log_level: str = Field("info")

    # CORS
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://127.0.0.1:5173"])
