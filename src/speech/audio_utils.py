"""Audio utility helpers: base64 transport and 16-bit PCM decoding."""

import base64
from typing import Union

import numpy as np

from src.speech.errors import InvalidEncodingError, TruncatedFrameError
from src.speech.models import PCMSampleBuffer
from src.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SAMPLE_RATE = 24000
DEFAULT_CHANNELS = 1
BYTES_PER_SAMPLE = 2


def decode_base64_audio(payload: Union[str, bytes]) -> bytes:
    """Decode base64-encoded audio returned by the speech API.

    Raises InvalidEncodingError on characters outside the base64 alphabet
    or bad padding; nothing is partially decoded.
    """
    try:
        return base64.b64decode(payload, validate=True)
    except ValueError as exc:
        raise InvalidEncodingError(f"Audio payload is not valid base64: {exc}") from exc


def encode_base64_audio(audio: bytes) -> str:
    """Encode raw audio bytes for JSON transport."""
    return base64.b64encode(audio).decode()


def normalize_int16(samples: np.ndarray) -> np.ndarray:
    """Map int16 samples onto [-1.0, 1.0]."""
    values = samples.astype(np.float64)
    # Negative and positive halves of int16 have different magnitudes
    return np.where(values < 0, values / 32768.0, values / 32767.0)


def decode_pcm(
    data: bytes,
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channel_count: int = DEFAULT_CHANNELS,
) -> PCMSampleBuffer:
    """Interpret interleaved s16le bytes as a normalized float buffer."""
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be positive, got {sample_rate}")
    if channel_count <= 0:
        raise ValueError(f"channel_count must be positive, got {channel_count}")

    frame_size = BYTES_PER_SAMPLE * channel_count
    if len(data) % frame_size:
        raise TruncatedFrameError(
            f"{len(data)} bytes is not a multiple of the {frame_size}-byte frame size"
        )

    samples = normalize_int16(np.frombuffer(data, dtype="<i2"))
    # Rows of the reshaped array are frames; transpose to one row per channel
    channels = samples.reshape(-1, channel_count).T
    logger.debug(
        "Decoded %d bytes into %d frame(s) x %d channel(s) at %d Hz",
        len(data),
        channels.shape[1],
        channel_count,
        sample_rate,
    )
    return PCMSampleBuffer(sample_rate=sample_rate, channels=channels)


def decode_audio(
    payload: Union[str, bytes],
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channel_count: int = DEFAULT_CHANNELS,
) -> PCMSampleBuffer:
    """Decode a base64 PCM payload straight into a sample buffer."""
    return decode_pcm(decode_base64_audio(payload), sample_rate, channel_count)
