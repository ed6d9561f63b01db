"""PCM to WAV conversion for downloads and browser playback."""

import struct
from typing import Union

import numpy as np

from src.speech.audio_utils import (
    DEFAULT_CHANNELS,
    DEFAULT_SAMPLE_RATE,
    decode_audio,
)
from src.speech.errors import OversizedBufferError, UnsupportedFormatError
from src.speech.models import PCMSampleBuffer
from src.utils.logger import get_logger

logger = get_logger(__name__)

WAV_HEADER_SIZE = 44
BITS_PER_SAMPLE = 16
PCM_FORMAT = 1

_UINT16_MAX = 0xFFFF
_UINT32_MAX = 0xFFFFFFFF
# ChunkSize is data size + 36 and must fit in an unsigned 32-bit field
_MAX_DATA_BYTES = _UINT32_MAX - (WAV_HEADER_SIZE - 8)


class _WavWriter:
    """Sequential little-endian writer over a preallocated buffer."""

    def __init__(self, size: int):
        self.buffer = bytearray(size)
        self.pos = 0

    def ascii(self, tag: str) -> None:
        self.raw(tag.encode("ascii"))

    def uint16(self, value: int) -> None:
        struct.pack_into("<H", self.buffer, self.pos, value)
        self.pos += 2

    def uint32(self, value: int) -> None:
        struct.pack_into("<I", self.buffer, self.pos, value)
        self.pos += 4

    def raw(self, data: bytes) -> None:
        self.buffer[self.pos : self.pos + len(data)] = data
        self.pos += len(data)


def quantize_samples(samples: np.ndarray) -> np.ndarray:
    """Clamp float samples and scale them onto the int16 range.

    NaN becomes silence; halves round to even.
    """
    values = np.nan_to_num(np.asarray(samples, dtype=np.float64), nan=0.0, posinf=1.0, neginf=-1.0)
    clamped = np.clip(values, -1.0, 1.0)
    scaled = np.where(clamped < 0, clamped * 32768, clamped * 32767)
    return np.rint(scaled).astype("<i2")


def _check_header_fields(buffer: PCMSampleBuffer, data_size: int) -> None:
    channel_count = buffer.channel_count
    if data_size > _MAX_DATA_BYTES:
        raise OversizedBufferError(
            f"{data_size} bytes of sample data exceeds the WAV size limit of {_MAX_DATA_BYTES}"
        )
    if channel_count * 2 > _UINT16_MAX:
        raise UnsupportedFormatError(f"{channel_count} channels do not fit in a 16-bit block align field")
    if buffer.sample_rate * 2 * channel_count > _UINT32_MAX:
        raise UnsupportedFormatError(
            f"{buffer.sample_rate} Hz x {channel_count} channel(s) overflows the 32-bit byte rate field"
        )


def encode_wav(buffer: PCMSampleBuffer) -> bytes:
    """Build a 16-bit PCM RIFF/WAVE file from a float sample buffer.

    An empty buffer yields a header-only file with a zero-length data chunk.
    """
    channel_count = buffer.channel_count
    data_size = buffer.sample_count * channel_count * 2
    _check_header_fields(buffer, data_size)
    length = WAV_HEADER_SIZE + data_size

    writer = _WavWriter(length)
    writer.ascii("RIFF")
    writer.uint32(length - 8)
    writer.ascii("WAVE")

    writer.ascii("fmt ")
    writer.uint32(16)
    writer.uint16(PCM_FORMAT)
    writer.uint16(channel_count)
    writer.uint32(buffer.sample_rate)
    writer.uint32(buffer.sample_rate * 2 * channel_count)
    writer.uint16(channel_count * 2)
    writer.uint16(BITS_PER_SAMPLE)

    writer.ascii("data")
    writer.uint32(length - WAV_HEADER_SIZE)

    # Transposing to (frames, channels) interleaves ch0, ch1, ... per frame
    writer.raw(quantize_samples(buffer.channels.T).tobytes())

    logger.debug(
        "Encoded WAV: %d frame(s), %d channel(s), %d Hz, %d bytes",
        buffer.sample_count,
        channel_count,
        buffer.sample_rate,
        length,
    )
    return bytes(writer.buffer)


def pcm_to_wav(
    payload: Union[str, bytes],
    sample_rate: int = DEFAULT_SAMPLE_RATE,
    channel_count: int = DEFAULT_CHANNELS,
) -> bytes:
    """Decode a base64 PCM payload and wrap it in a WAV container."""
    return encode_wav(decode_audio(payload, sample_rate, channel_count))
