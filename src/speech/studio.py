"""Speech studio tying together the Gemini client and the WAV codec."""

from dataclasses import dataclass
from typing import Optional

from config.prompts import PREVIEW_TEXT
from config.settings import settings
from src.speech.audio_utils import decode_audio
from src.speech.gemini_tts import GeminiTTS
from src.speech.voices import Emotion, Language, Voice
from src.speech.wav_encoder import pcm_to_wav
from src.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedSpeech:
    audio_data: str
    sample_rate: int
    channels: int
    duration_seconds: float


class SpeechStudio:
    """Generate, preview and render speech for the web UI."""

    def __init__(
        self,
        tts: Optional[GeminiTTS] = None,
        sample_rate: Optional[int] = None,
        channels: Optional[int] = None,
    ):
        self.tts = tts or GeminiTTS()
        audio_format = settings.audio_format
        self.sample_rate = sample_rate or audio_format["sample_rate"]
        self.channels = channels or audio_format["channels"]

    async def generate(
        self,
        text: str,
        voice: Voice,
        emotion: Emotion,
        language: Language = Language.ENGLISH,
    ) -> GeneratedSpeech:
        """Request speech for ``text`` and validate the returned PCM."""
        if not text.strip():
            raise ValueError("Please enter some text to generate voice.")
        # The speech model infers language from the text itself
        logger.info("Generate request: voice=%s emotion=%s language=%s", voice.value, emotion.value, language.value)
        audio_data = await self.tts.generate_speech(text, voice, emotion)
        buffer = decode_audio(audio_data, self.sample_rate, self.channels)
        logger.info("Generated %.2fs of audio", buffer.duration_seconds)
        return GeneratedSpeech(
            audio_data=audio_data,
            sample_rate=buffer.sample_rate,
            channels=buffer.channel_count,
            duration_seconds=buffer.duration_seconds,
        )

    async def preview(self, voice: Voice) -> bytes:
        """Speak the preview sentence in ``voice`` and return a WAV file."""
        logger.info("Previewing voice %s", voice.value)
        audio_data = await self.tts.generate_speech(PREVIEW_TEXT, voice, Emotion.CALM)
        return self.render_wav(audio_data)

    def render_wav(self, audio_data: str) -> bytes:
        """Convert a base64 PCM payload into downloadable WAV bytes."""
        return pcm_to_wav(audio_data, self.sample_rate, self.channels)
