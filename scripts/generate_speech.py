"""Script to synthesize a sentence with Gemini and save it as a WAV file.

Usage:
    python scripts/generate_speech.py --text "Hello there" --voice Puck --out hello.wav
"""

import argparse
import asyncio
import sys
from pathlib import Path

from config.settings import settings
from src.speech.errors import AudioError, SpeechGenerationError
from src.speech.studio import SpeechStudio
from src.speech.voices import DEFAULT_EMOTION, DEFAULT_VOICE, Emotion, Voice
from src.utils.logger import get_logger

logger = get_logger(__name__)


async def generate(text: str, voice: Voice, emotion: Emotion, out: Path) -> None:
    studio = SpeechStudio()
    result = await studio.generate(text, voice, emotion)
    out.write_bytes(studio.render_wav(result.audio_data))
    logger.info("Wrote %.2fs of audio to %s", result.duration_seconds, out)


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate speech and save it as WAV.")
    parser.add_argument("--text", required=True, help="Text to speak.")
    parser.add_argument(
        "--voice",
        default=DEFAULT_VOICE.value,
        choices=[voice.value for voice in Voice],
        help="Voice identifier.",
    )
    parser.add_argument(
        "--emotion",
        default=DEFAULT_EMOTION.value,
        choices=[emotion.value for emotion in Emotion],
        help="Delivery style.",
    )
    parser.add_argument("--out", default=settings.download_filename, help="Output WAV path.")
    args = parser.parse_args()

    if not settings.gemini_api_key:
        logger.error("Gemini credentials missing. Set GEMINI_API_KEY.")
        sys.exit(1)

    try:
        asyncio.run(generate(args.text, Voice(args.voice), Emotion(args.emotion), Path(args.out)))
    except (ValueError, AudioError, SpeechGenerationError) as exc:
        logger.error("Could not generate speech: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
