"""Short-time power spectrum of a stream of 16-bit audio samples."""

from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

INT16_MAX = 32767

FrameConsumer = Callable[[np.ndarray], None]


def hamming_window(size: int, scale: float = 1.0) -> np.ndarray:
    """Return a Hamming window of ``size`` points multiplied by ``scale``."""
    if size < 2:
        raise ValueError("window size must be at least 2")
    i = np.arange(size, dtype=np.float64)
    return scale * (0.54 - 0.46 * np.cos(i * 2.0 * np.pi / (size - 1)))


def power_spectrum(frame: Iterable[float], window: np.ndarray) -> np.ndarray:
    """Return the power spectrum of one windowed frame.

    The result has ``len(frame) // 2 + 1`` bins, each the squared magnitude
    of the corresponding real-input DFT coefficient.
    """
    samples = np.asarray(frame, dtype=np.float64)
    window = np.asarray(window, dtype=np.float64)
    if samples.ndim != 1 or samples.shape != window.shape:
        raise ValueError(
            f"frame of shape {samples.shape} does not match window of shape {window.shape}"
        )
    spectrum = np.fft.rfft(samples * window)
    return spectrum.real**2 + spectrum.imag**2


class FFT:
    """Slices incoming audio into overlapping frames and emits their spectra.

    Each full frame of ``frame_size`` samples is windowed, transformed and the
    resulting power spectrum (``frame_size // 2 + 1`` values) is passed to
    ``consumer``. Consecutive frames share ``overlap`` samples.
    """

    def __init__(self, frame_size: int, overlap: int, consumer: FrameConsumer) -> None:
        if frame_size < 2:
            raise ValueError("frame size must be at least 2")
        if not 0 <= overlap < frame_size:
            raise ValueError("overlap must be non-negative and smaller than the frame size")
        self._frame_size = frame_size
        self._increment = frame_size - overlap
        self._window = hamming_window(frame_size, 1.0 / INT16_MAX)
        self._consumer = consumer
        self._buffer = np.empty(0, dtype=np.float64)

    @property
    def frame_size(self) -> int:
        """Number of samples in one frame."""
        return self._frame_size

    @property
    def increment(self) -> int:
        """Number of samples between the starts of consecutive frames."""
        return self._increment

    @property
    def overlap(self) -> int:
        """Number of samples shared by consecutive frames."""
        return self._frame_size - self._increment

    def reset(self) -> None:
        """Drop any buffered samples that have not formed a full frame yet."""
        self._buffer = np.empty(0, dtype=np.float64)

    def consume(self, samples: Iterable[int]) -> None:
        """Feed samples; every completed frame is sent to the consumer."""
        incoming = np.asarray(samples, dtype=np.float64)
        if incoming.ndim != 1:
            raise ValueError("samples must be a one-dimensional sequence")
        data = np.concatenate((self._buffer, incoming))
        start = 0
        while len(data) - start >= self._frame_size:
            frame = data[start:start + self._frame_size]
            self._consumer(power_spectrum(frame, self._window))
            start += self._increment
        self._buffer = data[start:].copy()