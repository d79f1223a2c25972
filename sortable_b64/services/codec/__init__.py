from .alphabet import NO_PADDING, STD_PADDING, URL_SAFE_ASC, URL_SAFE_STD, build_ascending_alphabet, is_ascending
from .codec import Base64Codec
from .errors import DecodeError, InvalidCharacterError, InvalidLengthError
from .sortable import decode, decode_no_padding, encode, encode_no_padding, get_codec
from .uint import (
  bytes_to_uint,
  decode_uint,
  decode_uint_no_padding,
  encode_uint,
  encode_uint_no_padding,
  uint_to_bytes,
)

# Callers import from the codec package, not from the modules inside it:
# from sortable_b64.services.codec import encode, decode
__all__ = [
  "NO_PADDING",
  "STD_PADDING",
  "URL_SAFE_ASC",
  "URL_SAFE_STD",
  "build_ascending_alphabet",
  "is_ascending",
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
]
