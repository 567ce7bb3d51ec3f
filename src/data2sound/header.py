"""
WAV header codec.

Builds the canonical 44-byte PCM header for a payload of known length and
takes it apart again on decode.
"""

from __future__ import annotations

import struct
from typing import NamedTuple

from data2sound.config import DEFAULT_CONFIG, WavConfig
from data2sound.errors import Data2SoundError, ErrorKind
from data2sound.protocol import (
    AUDIO_FORMAT_PCM,
    FMT_CHUNK_SIZE,
    HEADER_FMT,
    HEADER_LEN,
    MAGIC_DATA,
    MAGIC_FMT,
    MAGIC_RIFF,
    MAGIC_WAVE,
    RIFF_OVERHEAD,
)


class WavHeader(NamedTuple):
    """Fields of a parsed container header, in on-disk order."""
    chunk_id: bytes
    chunk_size: int
    format: bytes
    subchunk1_id: bytes
    subchunk1_size: int
    audio_format: int
    num_channels: int
    sample_rate: int
    byte_rate: int
    block_align: int
    bits_per_sample: int
    subchunk2_id: bytes
    subchunk2_size: int

    def as_dict(self) -> dict:
        out = self._asdict()
        for key, value in out.items():
            if isinstance(value, bytes):
                out[key] = value.decode("ascii", errors="replace")
        return out


def build_header(payload_length: int, config: WavConfig = DEFAULT_CONFIG) -> bytes:
    """
    Create the container header for a payload of ``payload_length`` bytes.

    Args:
        payload_length: Size of the payload that follows the header
        config: PCM parameters to declare

    Returns:
        44-byte WAV header
    """
    try:
        return struct.pack(
            HEADER_FMT,
            MAGIC_RIFF,
            payload_length + RIFF_OVERHEAD,
            MAGIC_WAVE,
            MAGIC_FMT,
            FMT_CHUNK_SIZE,
            AUDIO_FORMAT_PCM,
            config.channels,
            config.sample_rate,
            config.byte_rate,
            config.block_align,
            config.bits_per_sample,
            MAGIC_DATA,
            payload_length,
        )
    except struct.error as e:
        raise Data2SoundError(
            ErrorKind.UNDERLYING_FORMAT, f"payload length {payload_length}", cause=e
        ) from e


def _require_header(data: bytes) -> None:
    if len(data) < HEADER_LEN:
        raise Data2SoundError(
            ErrorKind.INVALID_CONTAINER, f"the minimum wav file size is {HEADER_LEN} bytes"
        )


def strip_header(container: bytes) -> bytes:
    """Return the payload following the header. Header fields are not checked."""
    _require_header(container)
    return bytes(container[HEADER_LEN:])


def parse_header(data: bytes) -> WavHeader:
    """Unpack the first 44 bytes of ``data`` without judging them."""
    _require_header(data)
    try:
        return WavHeader._make(struct.unpack(HEADER_FMT, bytes(data[:HEADER_LEN])))
    except struct.error as e:
        raise Data2SoundError(ErrorKind.UNDERLYING_FORMAT, cause=e) from e


def header_problems(header: WavHeader, container_length: int | None = None) -> list[str]:
    """List every way ``header`` departs from the canonical layout.

    Channel count, sample rate and bit depth are not checked.
    """
    problems: list[str] = []
    if header.chunk_id != MAGIC_RIFF:
        problems.append(f"bad ChunkID {header.chunk_id!r}")
    if header.format != MAGIC_WAVE:
        problems.append(f"bad Format {header.format!r}")
    if header.subchunk1_id != MAGIC_FMT:
        problems.append(f"bad Subchunk1ID {header.subchunk1_id!r}")
    if header.subchunk1_size != FMT_CHUNK_SIZE:
        problems.append(f"Subchunk1Size {header.subchunk1_size} != {FMT_CHUNK_SIZE}")
    if header.audio_format != AUDIO_FORMAT_PCM:
        problems.append(f"AudioFormat {header.audio_format} is not PCM")
    if header.subchunk2_id != MAGIC_DATA:
        problems.append(f"bad Subchunk2ID {header.subchunk2_id!r}")
    if header.chunk_size != header.subchunk2_size + RIFF_OVERHEAD:
        problems.append(
            f"ChunkSize {header.chunk_size} != Subchunk2Size {header.subchunk2_size} + {RIFF_OVERHEAD}"
        )
    if container_length is not None and header.subchunk2_size != container_length - HEADER_LEN:
        problems.append(
            f"Subchunk2Size {header.subchunk2_size} != payload length {container_length - HEADER_LEN}"
        )
    return problems


def validate_header(header: WavHeader, container_length: int | None = None) -> None:
    """Raise INVALID_CONTAINER on the first header field that does not match."""
    problems = header_problems(header, container_length)
    if problems:
        raise Data2SoundError(ErrorKind.INVALID_CONTAINER, problems[0])
