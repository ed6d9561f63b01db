from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Response

from config.settings import settings
from src.api.schemas import DownloadRequest, PreviewRequest, SpeechRequest, SpeechResponse
from src.speech.errors import DecodeError, EncodeError, SpeechGenerationError
from src.speech.studio import SpeechStudio
from src.speech.voices import emotion_options, language_options, voice_options
from src.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

WAV_MEDIA_TYPE = "audio/wav"


@lru_cache(maxsize=1)
def get_studio() -> SpeechStudio:
    """Dependency providing the shared speech studio."""
    return SpeechStudio()


@router.get("/")
async def root() -> dict:
    return {"status": "ok", "message": "Voice Studio is running"}


@router.get("/options")
async def options() -> dict:
    # Feeds the language, voice and emotion select widgets
    return {
        "languages": language_options(),
        "voices": voice_options(),
        "emotions": emotion_options(),
    }


@router.post("/speech", response_model=SpeechResponse)
async def generate_speech(body: SpeechRequest, studio: SpeechStudio = Depends(get_studio)) -> SpeechResponse:
    try:
        result = await studio.generate(body.text, body.voice, body.emotion, body.language)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DecodeError as exc:
        logger.error("Speech API returned undecodable audio: %s", exc)
        raise HTTPException(status_code=400, detail="Could not decode the generated audio.") from exc
    except SpeechGenerationError as exc:
        logger.error("Speech generation failed: %s", exc)
        raise HTTPException(
            status_code=502,
            detail="Failed to generate audio. Please check your API key and try again.",
        ) from exc
    return SpeechResponse(
        audio_data=result.audio_data,
        sample_rate=result.sample_rate,
        channels=result.channels,
        duration_seconds=result.duration_seconds,
    )


@router.post("/speech/preview")
async def preview_voice(body: PreviewRequest, studio: SpeechStudio = Depends(get_studio)) -> Response:
    detail = "Could not play voice preview."
    try:
        wav = await studio.preview(body.voice)
    except DecodeError as exc:
        logger.error("Preview audio could not be decoded: %s", exc)
        raise HTTPException(status_code=400, detail=detail) from exc
    except EncodeError as exc:
        logger.error("Preview audio could not be encoded: %s", exc)
        raise HTTPException(status_code=413, detail=detail) from exc
    except SpeechGenerationError as exc:
        logger.error("Failed to generate preview audio: %s", exc)
        raise HTTPException(status_code=502, detail=detail) from exc
    return Response(content=wav, media_type=WAV_MEDIA_TYPE)


@router.post("/speech/download")
async def download_audio(body: DownloadRequest, studio: SpeechStudio = Depends(get_studio)) -> Response:
    try:
        wav = studio.render_wav(body.audio_data)
    except DecodeError as exc:
        logger.error("Failed to process audio for download: %s", exc)
        raise HTTPException(status_code=400, detail="Could not prepare the audio for download.") from exc
    except EncodeError as exc:
        logger.error("Audio too large for WAV download: %s", exc)
        raise HTTPException(status_code=413, detail="Could not prepare the audio for download.") from exc
    return Response(
        content=wav,
        media_type=WAV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{settings.download_filename}"'},
    )
