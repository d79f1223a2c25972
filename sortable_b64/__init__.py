# Settings are loaded first so app_logger has its configured level before anything logs
from .config import settings
from .services.codec import (
  NO_PADDING,
  STD_PADDING,
  URL_SAFE_ASC,
  URL_SAFE_STD,
  Base64Codec,
  DecodeError,
  InvalidCharacterError,
  InvalidLengthError,
  bytes_to_uint,
  decode,
  decode_no_padding,
  decode_uint,
  decode_uint_no_padding,
  encode,
  encode_no_padding,
  encode_uint,
  encode_uint_no_padding,
  get_codec,
  uint_to_bytes,
)
from .services.filesystem import is_dir, is_file, path_exists, probe_path
from .types import Endianness, PathProbeResult, PathState

__version__ = "1.0.0"

__all__ = [
  "settings",
  "NO_PADDING",
  "STD_PADDING",
  "URL_SAFE_ASC",
  "URL_SAFE_STD",
  "Base64Codec",
  "DecodeError",
  "InvalidCharacterError",
  "InvalidLengthError",
  "get_codec",
  "encode",
  "decode",
  "encode_no_padding",
  "decode_no_padding",
  "uint_to_bytes",
  "bytes_to_uint",
  "encode_uint",
  "decode_uint",
  "encode_uint_no_padding",
  "decode_uint_no_padding",
  "Endianness",
  "PathState",
  "PathProbeResult",
  "probe_path",
  "path_exists",
  "is_dir",
  "is_file",
]
