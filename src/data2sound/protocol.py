"""On-disk layout of a data2sound container.

A container is the canonical 44-byte PCM WAV header followed by the raw
payload. Changing any value here breaks decoding of existing files.
"""

# Chunk magics
MAGIC_RIFF = b"RIFF"
MAGIC_WAVE = b"WAVE"
MAGIC_FMT  = b"fmt "
MAGIC_DATA = b"data"

# Header: [RIFF | ChunkSize | WAVE | fmt  | 16 | Fmt | Ch | Rate | ByteRate | Align | Bits | data | DataSize]
HEADER_FMT = "<4sI4s4sIHHIIHH4sI"
HEADER_LEN = 44

FMT_CHUNK_SIZE = 16
AUDIO_FORMAT_PCM = 1

# ChunkSize counts everything after the first 8 bytes
RIFF_OVERHEAD = HEADER_LEN - 8

# 32-bit size fields; the top value is reserved
MAX_PAYLOAD_SIZE = 0xFFFFFFFF

# Bounded copy window for file transfers
COPY_CHUNK_SIZE = 64 * 1024  # 64KB

WAV_SUFFIX = ".wav"
