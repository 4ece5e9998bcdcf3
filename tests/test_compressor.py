import base64

from chromafp.compressor import FingerprintCompressor, compress_fingerprint


def _b64(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def test_encode_fingerprint_binary():
    assert compress_fingerprint([1, 0], 55) == bytes([55, 0, 0, 2, 65, 0])


def test_encode_fingerprint_base64():
    encoded = compress_fingerprint([1, 0], 55)
    assert _b64(encoded) == "NwAAAkEA"
    assert len(_b64(encoded)) == 8


def test_silence_fingerprint_encoding():
    encoded = compress_fingerprint([627964279] * 3, 1)
    assert _b64(encoded) == "AQAAA0mUaEkSRZEGAA"


def test_empty_fingerprint_is_header_only():
    assert compress_fingerprint([], 1) == bytes([1, 0, 0, 0])


def test_default_algorithm_is_zero():
    assert compress_fingerprint([])[0] == 0


def test_algorithm_is_truncated_to_one_byte():
    assert compress_fingerprint([], 256 + 3)[0] == 3


def test_size_header_is_big_endian_24_bit():
    encoded = FingerprintCompressor().compress([0] * 300, 2)
    assert encoded[:4] == bytes([2, 0, 1, 44])


def test_compressor_instance_is_reusable():
    compressor = FingerprintCompressor()
    first = compressor.compress([1, 0], 55)
    second = compressor.compress([1, 0], 55)
    assert first == second == bytes([55, 0, 0, 2, 65, 0])