from pydantic import BaseModel
import os

from constants import Difficulty


class Settings(BaseModel):
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    default_difficulty: Difficulty = Difficulty(os.getenv("DEFAULT_DIFFICULTY", "medium"))
    # Opening names are reported for this many half-moves after a player move
    opening_ply_limit: int = int(os.getenv("OPENING_PLY_LIMIT", "10"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
