# chromafp

Building blocks for acoustic fingerprinting of audio.

- `chromafp.fft` slices a stream of 16-bit samples into overlapping frames,
  applies a Hamming window and hands the power spectrum of each frame to a
  consumer.
- `chromafp.compressor` packs a list of 32-bit sub-fingerprints into the
  compact binary form used for storage and transfer.
- `chromafp.decompressor` reads that form back, or reads just its header.

## Installation

```
pip install .
```

Run the tests with `pip install .[test]` and then `pytest`.

## Spectral frames

```python
from chromafp.fft import FFT

frames = []
fft = FFT(frame_size=4096, overlap=4096 - 4096 // 3, consumer=frames.append)
fft.consume(samples)       # a one-dimensional sequence of int16 samples, in chunks of any size
print(len(frames), len(frames[0]))   # each frame holds frame_size // 2 + 1 values
```

Samples are buffered across calls to `consume`; each time `frame_size`
samples are available, the frame is multiplied by a Hamming window scaled by
`1 / 32767`, transformed, and its power spectrum (a NumPy array) is passed to
the consumer. Consecutive frames share `overlap` samples. The read-only
properties `frame_size`, `increment` and `overlap` describe the framing, and
`FFT.reset()` drops any partially filled frame.

`FFT` raises `ValueError` if `frame_size` is below 2 or `overlap` is not in
`0 <= overlap < frame_size`.

The functions `hamming_window(size, scale=1.0)` and
`power_spectrum(frame, window)` are available on their own as well.

## Compressing fingerprints

```python
from chromafp.compressor import compress_fingerprint
from chromafp.decompressor import decompress_fingerprint, decompress_fingerprint_header

data = compress_fingerprint([1, 0], 55)
assert data == bytes([55, 0, 0, 2, 65, 0])

fingerprint, algorithm = decompress_fingerprint(data)
assert fingerprint == [1, 0] and algorithm == 55

size, algorithm = decompress_fingerprint_header(data)
assert size == 2
```

The compressed form starts with a 4-byte header: the algorithm number, then
the number of items as a 24-bit big-endian integer. The rest holds the
XOR-delta of consecutive items as bit positions, packed into 3-bit values,
followed by overflow values packed into 5-bit values.

Malformed input raises `chromafp.decompressor.DecompressionError`, a subclass
of `ValueError`. `FingerprintCompressor` and `FingerprintDecompressor` are the
reusable objects behind these functions; after a call, a
`FingerprintDecompressor` keeps the results in its `output`, `size` and
`algorithm` attributes.

## What this package does not do

It does not decode audio files, resample, compute chroma features or turn
spectra into sub-fingerprints, and it has no command-line tool. Compressed
fingerprints are handled as raw bytes only; encoding them to or from a
base64 text form is left to the caller.