"""data2sound - carry arbitrary bytes inside a PCM WAV container."""
from .config import DEFAULT_CONFIG, WavConfig
from .errors import Data2SoundError, ErrorKind
from .header import WavHeader, build_header, parse_header, strip_header, validate_header
from .transfer import decode, decode_bytes, encode, encode_bytes

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "WavConfig",
    "Data2SoundError",
    "ErrorKind",
    "WavHeader",
    "build_header",
    "parse_header",
    "strip_header",
    "validate_header",
    "encode",
    "decode",
    "encode_bytes",
    "decode_bytes",
    "__version__",
]
