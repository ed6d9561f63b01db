"""Request/response models for the speech API."""

from pydantic import BaseModel, Field

from src.speech.voices import Emotion, Language, Voice


class SpeechRequest(BaseModel):
    text: str
    voice: Voice
    emotion: Emotion
    language: Language


class SpeechResponse(BaseModel):
    audio_data: str = Field(..., description="Base64 s16le PCM as returned by the speech API")
    sample_rate: int
    channels: int
    duration_seconds: float


class PreviewRequest(BaseModel):
    voice: Voice


class DownloadRequest(BaseModel):
    audio_data: str = Field(..., min_length=1)
