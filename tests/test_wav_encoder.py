"""Tests for the RIFF/WAVE encoder."""

import io
import struct
import wave

import numpy as np
import pytest

from src.speech import wav_encoder
from src.speech.audio_utils import decode_pcm, encode_base64_audio
from src.speech.errors import EncodeError, OversizedBufferError, UnsupportedFormatError
from src.speech.models import PCMSampleBuffer
from src.speech.wav_encoder import encode_wav, pcm_to_wav, quantize_samples


def _header(wav: bytes) -> dict:
    fields = struct.unpack("<4sI4s4sIHHIIHH4sI", wav[:44])
    keys = [
        "chunk_id", "chunk_size", "format", "subchunk1_id", "subchunk1_size",
        "audio_format", "num_channels", "sample_rate", "byte_rate",
        "block_align", "bits_per_sample", "subchunk2_id", "subchunk2_size",
    ]
    return dict(zip(keys, fields))


def test_header_fields_mono():
    wav = encode_wav(PCMSampleBuffer.mono([0.0, 0.5, -0.5], 24000))
    header = _header(wav)

    assert wav[0:4] == b"RIFF"
    assert wav[8:12] == b"WAVE"
    assert wav[36:40] == b"data"
    assert header["subchunk1_id"] == b"fmt "
    assert header["chunk_size"] == len(wav) - 8
    assert header["subchunk1_size"] == 16
    assert header["audio_format"] == 1
    assert header["num_channels"] == 1
    assert header["sample_rate"] == 24000
    assert header["byte_rate"] == 48000
    assert header["block_align"] == 2
    assert header["bits_per_sample"] == 16
    assert header["subchunk2_size"] == len(wav) - 44


def test_header_fields_stereo():
    buffer = PCMSampleBuffer(sample_rate=44100, channels=((0.1, 0.2), (0.3, 0.4)))
    header = _header(encode_wav(buffer))

    assert header["num_channels"] == 2
    assert header["byte_rate"] == 44100 * 2 * 2
    assert header["block_align"] == 4
    assert header["subchunk2_size"] == 8


@pytest.mark.parametrize(
    "channels",
    [
        ((),),
        ((0.0,),),
        ((0.1, -0.2, 0.3),),
        ((0.1, 0.2), (0.3, 0.4)),
        ((0.0,) * 10, (0.5,) * 10, (-0.5,) * 10),
    ],
)
def test_length_invariant(channels):
    buffer = PCMSampleBuffer(sample_rate=16000, channels=channels)
    wav = encode_wav(buffer)
    assert len(wav) == 44 + buffer.channel_count * buffer.sample_count * 2


def test_concrete_scenario_reencodes_identical_bytes():
    pcm = bytes([0x00, 0x00, 0xFF, 0x7F])
    buffer = decode_pcm(pcm, sample_rate=24000, channel_count=1)

    assert buffer.get_channel_data(0).tolist() == [0.0, 1.0]
    assert encode_wav(buffer)[44:] == pcm


def test_minus_one_encodes_to_int16_min():
    wav = encode_wav(PCMSampleBuffer.mono([-1.0], 24000))
    assert wav[44:] == bytes([0x00, 0x80])


def test_quantize_samples_scales_asymmetrically():
    quantized = quantize_samples(np.array([1.0, -1.0, 0.0, 0.5, -0.5]))

    assert quantized.dtype == np.dtype("<i2")
    assert quantized.tolist() == [32767, -32768, 0, round(0.5 * 32767), -16384]


def test_out_of_range_samples_are_clamped():
    wav = encode_wav(PCMSampleBuffer.mono([2.5, -7.0, float("inf"), float("-inf")], 8000))
    assert struct.unpack("<4h", wav[44:]) == (32767, -32768, 32767, -32768)


def test_nan_samples_encode_as_silence():
    wav = encode_wav(PCMSampleBuffer.mono([float("nan")], 8000))
    assert wav[44:] == b"\x00\x00"


def test_channels_are_interleaved_per_frame():
    buffer = PCMSampleBuffer(sample_rate=8000, channels=((1.0, 0.0), (-1.0, 1.0)))
    wav = encode_wav(buffer)
    assert struct.unpack("<4h", wav[44:]) == (32767, -32768, 0, 32767)


def test_empty_buffer_produces_header_only_file():
    wav = encode_wav(PCMSampleBuffer.mono([], 24000))
    header = _header(wav)

    assert len(wav) == 44
    assert header["chunk_size"] == 36
    assert header["subchunk2_size"] == 0


def test_roundtrip_within_one_quantization_step():
    original = [i / 50.0 - 1.0 for i in range(101)] + [0.123456, -0.987654, 0.333333]
    buffer = PCMSampleBuffer.mono(original, 24000)

    decoded = decode_pcm(encode_wav(buffer)[44:], sample_rate=24000, channel_count=1)

    for before, after in zip(original, decoded.get_channel_data(0)):
        assert abs(before - after) <= 1 / 32767


@pytest.mark.parametrize(
    "channels",
    [
        ((0.25, -0.75), (-0.5, 0.9)),
        ((0.25, -0.75, 0.0), (-0.5, 0.9, 1.0), (0.1, -1.0, -0.3)),
        tuple((k / 10.0, -k / 10.0) for k in range(5)),
    ],
)
def test_multichannel_roundtrip_preserves_channel_order(channels):
    buffer = PCMSampleBuffer(sample_rate=22050, channels=channels)

    decoded = decode_pcm(encode_wav(buffer)[44:], sample_rate=22050, channel_count=buffer.channel_count)

    assert decoded.channel_count == buffer.channel_count
    assert decoded.sample_count == buffer.sample_count
    assert np.all(np.abs(decoded.channels - buffer.channels) <= 1 / 32767)


def test_three_channel_frames_are_interleaved_in_channel_order():
    buffer = PCMSampleBuffer(sample_rate=8000, channels=((1.0, 0.0), (0.0, -1.0), (-1.0, 1.0)))
    wav = encode_wav(buffer)
    assert struct.unpack("<6h", wav[44:]) == (32767, 0, -32768, 0, -32768, 32767)


def test_output_is_readable_by_wave_module():
    samples = [0.0, 0.5, -0.5, 1.0, -1.0]
    wav = encode_wav(PCMSampleBuffer.mono(samples, 24000))

    with wave.open(io.BytesIO(wav), "rb") as reader:
        assert reader.getnchannels() == 1
        assert reader.getsampwidth() == 2
        assert reader.getframerate() == 24000
        assert reader.getnframes() == len(samples)
        assert reader.readframes(len(samples)) == wav[44:]


def test_encode_does_not_mutate_input():
    buffer = PCMSampleBuffer.mono([3.0, -3.0, 0.1, float("nan")], 24000)
    before = buffer.channels.copy()

    encode_wav(buffer)

    np.testing.assert_array_equal(buffer.channels, before)


def test_oversized_buffer_is_rejected(monkeypatch):
    monkeypatch.setattr(wav_encoder, "_MAX_DATA_BYTES", 4)

    with pytest.raises(OversizedBufferError) as excinfo:
        encode_wav(PCMSampleBuffer.mono([0.0, 0.0, 0.0], 24000))

    assert isinstance(excinfo.value, EncodeError)
    assert excinfo.value.kind == "oversized-buffer"


def test_pcm_to_wav_wraps_base64_payload():
    pcm = struct.pack("<3h", 0, 32767, -32768)
    wav = pcm_to_wav(encode_base64_audio(pcm))

    assert _header(wav)["sample_rate"] == 24000
    assert wav[44:] == pcm


@pytest.mark.parametrize(
    "sample_rate, channel_count",
    [
        (3_000_000_000, 2),
        (2**32, 1),
        (1_073_741_824, 2),
    ],
)
def test_byte_rate_overflow_raises_encode_error(sample_rate, channel_count):
    buffer = PCMSampleBuffer(sample_rate=sample_rate, channels=((0.0,),) * channel_count)

    with pytest.raises(UnsupportedFormatError) as excinfo:
        encode_wav(buffer)

    assert isinstance(excinfo.value, EncodeError)
    assert excinfo.value.kind == "unsupported-format"


def test_block_align_overflow_raises_encode_error():
    buffer = PCMSampleBuffer(sample_rate=8000, channels=((),) * 40000)

    with pytest.raises(UnsupportedFormatError):
        encode_wav(buffer)


def test_largest_byte_rate_that_fits_is_accepted():
    sample_rate = 0xFFFFFFFF // 2
    header = _header(encode_wav(PCMSampleBuffer.mono([0.0], sample_rate)))

    assert header["sample_rate"] == sample_rate
    assert header["byte_rate"] == sample_rate * 2
