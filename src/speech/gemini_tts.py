"""Text-to-Speech client backed by Gemini's native audio output."""

import asyncio
from typing import Any, Optional, Union

import google.generativeai as genai

from config.prompts import build_speech_prompt
from config.settings import settings
from src.speech.audio_utils import encode_base64_audio
from src.speech.errors import SpeechGenerationError
from src.speech.voices import Emotion, Voice
from src.utils.helpers import retry_async
from src.utils.logger import get_logger

logger = get_logger(__name__)


def _extract_audio(response: Any) -> Optional[Union[bytes, str]]:
    """Pull inline audio data out of the first candidate, if any."""
    try:
        return response.candidates[0].content.parts[0].inline_data.data
    except (AttributeError, IndexError, TypeError):
        return None


class GeminiTTS:
    """Async wrapper returning base64 s16le PCM for a text/voice/emotion triple."""

    def __init__(
        self,
        model_name: Optional[str] = None,
        api_key: Optional[str] = None,
        max_attempts: Optional[int] = None,
        retry_delay: Optional[float] = None,
    ):
        self.model_name = model_name or settings.tts_model
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.max_attempts = max_attempts or settings.tts_max_attempts
        self.retry_delay = settings.tts_retry_delay if retry_delay is None else retry_delay
        if self.api_key:
            genai.configure(api_key=self.api_key)
        self.model = genai.GenerativeModel(model_name=self.model_name)

    async def generate_speech(self, text: str, voice: Voice, emotion: Emotion) -> str:
        """Synthesize ``text`` and return the raw PCM audio as base64."""
        if not self.api_key:
            logger.warning("GEMINI_API_KEY not configured; cannot generate speech.")
            raise SpeechGenerationError("GEMINI_API_KEY environment variable not set")

        prompt = build_speech_prompt(text, emotion.value)
        logger.info("Generating speech: voice=%s emotion=%s chars=%d", voice.value, emotion.value, len(text))

        @retry_async(
            max_attempts=self.max_attempts,
            delay=self.retry_delay,
            exceptions=(SpeechGenerationError,),
        )
        async def _run() -> str:
            return await asyncio.to_thread(self._request_audio, prompt, voice)

        return await _run()

    def _generation_config(self, voice: Voice) -> dict:
        return {
            "response_modalities": ["AUDIO"],
            "speech_config": {
                "voice_config": {
                    "prebuilt_voice_config": {"voice_name": voice.base_name},
                },
            },
        }

    def _request_audio(self, prompt: str, voice: Voice) -> str:
        try:
            response = self.model.generate_content(
                prompt,
                generation_config=self._generation_config(voice),
            )
        except Exception as exc:  # third-party SDK raises a wide range of errors
            logger.error("Error generating speech with Gemini API: %s", exc)
            raise SpeechGenerationError("Failed to generate speech.") from exc

        audio = _extract_audio(response)
        if not audio:
            logger.error("Gemini response for voice %s carried no audio", voice.value)
            raise SpeechGenerationError("No audio data received from API.")
        if isinstance(audio, str):
            return audio
        return encode_base64_audio(audio)
