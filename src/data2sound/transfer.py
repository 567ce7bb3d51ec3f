"""
Stream transfer between payload files and WAV containers.

File variants copy in bounded chunks and never hold the whole payload in
memory. Byte variants work on the buffer they are given.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import BinaryIO

from data2sound.config import DEFAULT_CONFIG, WavConfig
from data2sound.errors import Data2SoundError, ErrorKind, io_error
from data2sound.header import build_header, parse_header, strip_header, validate_header
from data2sound.protocol import COPY_CHUNK_SIZE, HEADER_LEN, MAX_PAYLOAD_SIZE, WAV_SUFFIX

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


def check_size(length: int) -> None:
    """Reject sources the 32-bit size fields cannot describe."""
    if length >= MAX_PAYLOAD_SIZE:
        raise Data2SoundError(ErrorKind.FILE_TOO_LARGE, f"got {length} bytes")


def check_container_size(length: int) -> None:
    if length < HEADER_LEN:
        raise Data2SoundError(
            ErrorKind.INVALID_CONTAINER, f"the minimum wav file size is {HEADER_LEN} bytes"
        )
    check_size(length)


def normalize_output_path(path: PathLike) -> Path:
    """Append the .wav suffix unless the name already ends with it."""
    name = os.fspath(path)
    if not name.endswith(WAV_SUFFIX):
        name += WAV_SUFFIX
    return Path(name)


def _refuse_same_file(src: BinaryIO, out_path: Path) -> None:
    """Opening the destination for writing would truncate the source."""
    if out_path.exists() and os.path.samestat(os.fstat(src.fileno()), os.stat(out_path)):
        raise Data2SoundError(
            ErrorKind.IO, f"source and destination are the same file ({out_path})"
        )


def _copy_stream(src: BinaryIO, dst: BinaryIO, limit: int) -> int:
    """Copy at most ``limit`` bytes, so the header stays in step with the payload."""
    copied = 0
    while copied < limit:
        chunk = src.read(min(COPY_CHUNK_SIZE, limit - copied))
        if not chunk:
            break
        dst.write(chunk)
        copied += len(chunk)
    return copied


def encode(
    source: PathLike,
    destination: PathLike,
    config: WavConfig = DEFAULT_CONFIG,
) -> Path:
    """Wrap the file at ``source`` in a WAV container written to ``destination``.

    Returns the path actually written, with the .wav suffix applied.
    """
    out_path = normalize_output_path(destination)
    try:
        with open(source, "rb") as src:
            size = os.fstat(src.fileno()).st_size
            check_size(size)
            header = build_header(size, config)
            logger.debug(f"Encoding {source} ({size} bytes) -> {out_path}")

            _refuse_same_file(src, out_path)
            with open(out_path, "wb") as dst:
                dst.write(header)
                copied = _copy_stream(src, dst, size)
    except OSError as e:
        raise io_error(e) from e

    logger.info(f"Encoded {copied} bytes into {out_path}")
    return out_path


def decode(source: PathLike, destination: PathLike, strict: bool = False) -> Path:
    """Write the payload of the container at ``source`` to ``destination``.

    With ``strict`` the header fields are checked before anything is written.
    """
    out_path = Path(destination)
    try:
        with open(source, "rb") as src:
            size = os.fstat(src.fileno()).st_size
            check_container_size(size)
            if strict:
                validate_header(parse_header(src.read(HEADER_LEN)), size)
            logger.debug(f"Decoding {source} ({size} bytes) -> {out_path}")

            _refuse_same_file(src, out_path)
            # Skip the header to get to the data
            src.seek(HEADER_LEN)
            with open(out_path, "wb") as dst:
                copied = _copy_stream(src, dst, size - HEADER_LEN)
    except OSError as e:
        raise io_error(e) from e

    logger.info(f"Decoded {copied} bytes into {out_path}")
    return out_path


def encode_bytes(data: bytes, config: WavConfig = DEFAULT_CONFIG) -> bytes:
    """Return ``data`` prefixed with its container header."""
    check_size(len(data))
    return build_header(len(data), config) + bytes(data)


def decode_bytes(data: bytes, strict: bool = False) -> bytes:
    """Return the payload of an in-memory container."""
    check_container_size(len(data))
    if strict:
        validate_header(parse_header(data), len(data))
    return strip_header(data)
