from fastapi import FastAPI

from config.settings import settings
from src.api.routes import router
from src.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Voice Studio", version="0.1.0", debug=settings.debug)
app.include_router(router)


@app.on_event("startup")
async def startup_event() -> None:
    logger.info("Starting Voice Studio in %s mode", settings.environment)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; speech generation will fail until it is configured.")
    logger.info(
        "Speech model %s, audio %d Hz x %d channel(s)",
        settings.tts_model,
        settings.tts_sample_rate,
        settings.tts_channels,
    )
