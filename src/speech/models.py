"""In-memory audio representations shared by the decoder and encoder."""

from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np


@dataclass(frozen=True, eq=False)
class PCMSampleBuffer:
    """Normalized float samples, one row per channel.

    ``channels`` is stored as a read-only float64 array shaped
    (channel_count, sample_count). Decoded buffers always hold samples in
    [-1.0, 1.0]; buffers built by hand may stray outside that range and
    the WAV encoder clamps them.
    """

    sample_rate: int
    channels: Union[np.ndarray, Sequence[Sequence[float]]]

    def __post_init__(self) -> None:
        if isinstance(self.sample_rate, bool) or not isinstance(self.sample_rate, (int, np.integer)):
            raise TypeError(f"sample_rate must be an integer, got {self.sample_rate!r}")
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        rows = [np.asarray(channel, dtype=np.float64) for channel in self.channels]
        if not rows:
            raise ValueError("PCMSampleBuffer needs at least one channel")
        if any(row.ndim != 1 for row in rows):
            raise ValueError("Each channel must be a flat sequence of samples")
        lengths = {row.shape[0] for row in rows}
        if len(lengths) != 1:
            raise ValueError(f"All channels must have the same length, got {sorted(lengths)}")
        data = np.vstack(rows)
        data.setflags(write=False)
        object.__setattr__(self, "sample_rate", int(self.sample_rate))
        object.__setattr__(self, "channels", data)

    @classmethod
    def mono(cls, samples: Iterable[float], sample_rate: int) -> "PCMSampleBuffer":
        return cls(sample_rate=sample_rate, channels=(np.fromiter(samples, dtype=np.float64),))

    @property
    def channel_count(self) -> int:
        return self.channels.shape[0]

    @property
    def sample_count(self) -> int:
        """Samples per channel (equivalently, number of frames)."""
        return self.channels.shape[1]

    @property
    def duration_seconds(self) -> float:
        return self.sample_count / self.sample_rate

    def get_channel_data(self, index: int) -> np.ndarray:
        if not 0 <= index < self.channel_count:
            raise IndexError(f"channel {index} out of range for {self.channel_count} channel(s)")
        return self.channels[index]
