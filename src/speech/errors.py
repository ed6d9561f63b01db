"""Exceptions raised by the audio codec and the speech client."""


class AudioError(Exception):
    """Base class for decode/encode failures."""

    kind = "audio-error"


class DecodeError(AudioError):
    kind = "decode-error"


class InvalidEncodingError(DecodeError):
    """Base64 payload is malformed."""

    kind = "invalid-encoding"


class TruncatedFrameError(DecodeError):
    """PCM byte length is not a whole number of frames."""

    kind = "truncated-frame"


class EncodeError(AudioError):
    kind = "encode-error"


class OversizedBufferError(EncodeError):
    """Sample data does not fit in the 32-bit RIFF size fields."""

    kind = "oversized-buffer"


class UnsupportedFormatError(EncodeError):
    """Sample rate or channel count does not fit the WAV header fields."""

    kind = "unsupported-format"


class SpeechGenerationError(Exception):
    """The remote speech API failed or returned no audio."""
