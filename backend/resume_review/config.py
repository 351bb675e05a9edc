from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Literal, Optional
import os


class Settings(BaseSettings):
    app_name: str = "AI Resume Analyzer API"
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"
    log_level: str = "INFO"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Upload limits
    max_upload_bytes: int = 5 * 1024 * 1024  # 5MB

    # AI/LLM Configuration
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    analysis_temperature: float = 0.4
    gemini_timeout_ms: Optional[int] = None  # None = SDK default

    # PDF text extraction: "text" (PyMuPDF text layer) or "gemini" (multimodal)
    extraction_strategy: Literal["text", "gemini"] = "text"
    extraction_model: str = "gemini-2.0-flash"

    class Config:
        env_file = ".env"
        extra = "ignore"
        # Make field names case-insensitive for environment variables
        case_sensitive = False

    def get_cors_origins(self) -> list:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def max_upload_mb(self) -> int:
        return self.max_upload_bytes // (1024 * 1024)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
