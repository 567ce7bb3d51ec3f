import struct

import pytest

from data2sound import Data2SoundError, ErrorKind, WavConfig, build_header, parse_header, strip_header, validate_header
from data2sound.header import header_problems


def test_default_header_layout(sample_container):
    assert build_header(10) == sample_container[:44]


def test_header_shape_and_sizes():
    h = build_header(1234)
    assert len(h) == 44
    assert h[0:4] == b"RIFF"
    assert h[8:12] == b"WAVE"
    assert h[12:16] == b"fmt "
    assert h[36:40] == b"data"
    assert struct.unpack("<I", h[4:8])[0] == 1234 + 36
    assert struct.unpack("<I", h[40:44])[0] == 1234


def test_empty_payload_header():
    h = parse_header(build_header(0))
    assert h.subchunk2_size == 0
    assert h.chunk_size == 36


def test_custom_config_changes_rate_fields():
    cfg = WavConfig(sample_rate=8000, channels=2, bits_per_sample=8)
    h = parse_header(build_header(5, cfg))
    assert h.sample_rate == 8000
    assert h.num_channels == 2
    assert h.bits_per_sample == 8
    assert h.byte_rate == 16000
    assert h.block_align == 2


def test_default_rate_fields():
    h = parse_header(build_header(0))
    assert (h.audio_format, h.num_channels, h.sample_rate) == (1, 1, 202860)
    assert (h.byte_rate, h.block_align, h.bits_per_sample) == (405720, 2, 16)


def test_chunk_size_overflow_is_format_error():
    assert len(build_header(0xFFFFFFFF - 36)) == 44
    with pytest.raises(Data2SoundError) as exc:
        build_header(0xFFFFFFFF - 35)
    assert exc.value.kind is ErrorKind.UNDERLYING_FORMAT
    assert isinstance(exc.value.__cause__, struct.error)


def test_strip_header(sample_container):
    assert strip_header(sample_container) == bytes(range(10))
    assert strip_header(sample_container[:44]) == b""


def test_strip_header_too_short():
    with pytest.raises(Data2SoundError) as exc:
        strip_header(b"RIFF" * 10 + b"abc")
    assert exc.value.kind is ErrorKind.INVALID_CONTAINER


def test_strip_header_ignores_fields():
    junk = b"\xff" * 44 + b"payload"
    assert strip_header(junk) == b"payload"


def test_validate_accepts_own_output(sample_container):
    validate_header(parse_header(sample_container), len(sample_container))


def test_validate_rejects_bad_magic(sample_container):
    bad = b"RIFX" + sample_container[4:]
    with pytest.raises(Data2SoundError) as exc:
        validate_header(parse_header(bad), len(bad))
    assert exc.value.kind is ErrorKind.INVALID_CONTAINER
    assert "ChunkID" in str(exc.value)


def test_header_problems_reports_length_mismatch(sample_container):
    truncated = sample_container[:-3]
    problems = header_problems(parse_header(truncated), len(truncated))
    assert len(problems) == 1
    assert "Subchunk2Size" in problems[0]


def test_header_problems_inconsistent_chunk_size(sample_container):
    bad = sample_container[:4] + struct.pack("<I", 99) + sample_container[8:]
    problems = header_problems(parse_header(bad))
    assert any("ChunkSize" in p for p in problems)


def test_config_rounds_partial_bytes_up():
    cfg = WavConfig(sample_rate=1000, channels=2, bits_per_sample=12)
    assert cfg.bytes_per_sample == 2
    assert cfg.block_align == 4
    assert cfg.byte_rate == 4000


@pytest.mark.parametrize("field", ["sample_rate", "channels", "bits_per_sample"])
def test_config_rejects_non_positive(field):
    with pytest.raises(ValueError, match=field):
        WavConfig(**{field: 0})
