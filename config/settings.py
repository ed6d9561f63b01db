"""Application settings and environment configuration."""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present
load_dotenv()


class Settings(BaseSettings):
    """Centralized application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Application
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8000, alias="PORT")

    # Gemini speech generation
    gemini_api_key: Optional[str] = Field(None, validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"))
    tts_model: str = Field("gemini-2.5-flash-preview-tts", alias="TTS_MODEL")
    tts_max_attempts: int = Field(1, alias="TTS_MAX_ATTEMPTS", ge=1)
    tts_retry_delay: float = Field(1.0, alias="TTS_RETRY_DELAY", ge=0)

    # Audio format returned by the speech API
    tts_sample_rate: int = Field(24000, alias="TTS_SAMPLE_RATE", gt=0)
    tts_channels: int = Field(1, alias="TTS_CHANNELS", gt=0)

    download_filename: str = Field("myaistudio_audio.wav", alias="DOWNLOAD_FILENAME")

    @property
    def audio_format(self) -> dict[str, int]:
        """Return the PCM layout used when decoding API audio."""
        return {"sample_rate": self.tts_sample_rate, "channels": self.tts_channels}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


settings = get_settings()
