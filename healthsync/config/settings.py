import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional, List

env = os.getenv("APP_ENV", "development")
# the working directory first, then the repository root (where
# scripts/setup_api_keys.py writes); later files win
PROJECT_ROOT = Path(__file__).resolve().parents[2]
env_files = (f".env.{env}", str(PROJECT_ROOT / f".env.{env}"))

class Settings(BaseSettings):
    database_url: str
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"
    # CORS origins can be overridden via CORS_ORIGINS env var (JSON list)
    cors_origins: List[str] = Field(default=["*"])

    # JWT configuration
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    refresh_token_expire_days: int = 7

    # Hugging Face inference (BioGPT)
    huggingface_api_key: Optional[str] = None
    huggingface_api_url: str = "https://router.huggingface.co/hf-inference/models"
    biogpt_model: str = "microsoft/biogpt"
    general_model: str = "gpt2"

    # OpenAI (image analysis)
    openai_api_key: Optional[str] = None
    openai_vision_model: str = "gpt-4o"
    openai_status_model: str = "gpt-4o-mini"

    # seconds, applies to every outbound provider call
    provider_timeout: float = 60.0

    model_config = SettingsConfigDict(
        env_file=env_files,
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
