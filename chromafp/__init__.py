"""Audio fingerprinting building blocks: windowed FFT framing and fingerprint compression."""

__version__ = "1.6.0"
__all__ = ["fft", "compressor", "decompressor"]