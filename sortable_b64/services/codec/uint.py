from typing import Union
from .codec import Base64Codec, BytesLike
from .errors import InvalidLengthError
from .sortable import no_padding, std_padding
from sortable_b64.types import Endianness

UINT64_SIZE = 8
UINT64_MAX = (1 << 64) - 1

ByteOrder = Union[bool, Endianness]

'''
Only big-endian keeps the numeric order after encoding. The most significant byte goes first,
so comparing the encoded text compares the high bits first. Little-endian puts the low byte
first: 1 encodes above 256. It round-trips fine, callers that need sortable keys just shouldn't use it.
'''


def _byte_order(little_endian: ByteOrder) -> str:
  if isinstance(little_endian, Endianness):
    return little_endian.value
  return Endianness.from_flag(little_endian).value


def uint_to_bytes(n: int, little_endian: ByteOrder = False) -> bytes:
  """Serializes an unsigned 64-bit integer into exactly 8 bytes"""
  if isinstance(n, bool) or not isinstance(n, int):
    raise ValueError(f"Expected an int, got {type(n).__name__}.")
  if not (0 <= n <= UINT64_MAX):
    raise ValueError(f"Integer must be in [0, {UINT64_MAX}], got {n}.")
  return n.to_bytes(UINT64_SIZE, _byte_order(little_endian))


def bytes_to_uint(buf: BytesLike, little_endian: ByteOrder = False) -> int:
  """Inverse of uint_to_bytes. The buffer must be exactly 8 bytes long."""
  if len(buf) != UINT64_SIZE:
    raise InvalidLengthError(len(buf), f"an unsigned 64-bit integer takes exactly {UINT64_SIZE} bytes")
  return int.from_bytes(buf, _byte_order(little_endian))


def _encode_uint(codec: Base64Codec, n: int, little_endian: ByteOrder) -> str:
  return codec.encode(uint_to_bytes(n, little_endian))


def _decode_uint(codec: Base64Codec, text: str, little_endian: ByteOrder) -> int:
  return bytes_to_uint(codec.decode(text), little_endian)


def encode_uint(n: int, little_endian: ByteOrder = False) -> str:
  """Encodes an unsigned 64-bit integer into padded text (12 characters, one of them '=')"""
  return _encode_uint(std_padding, n, little_endian)


def decode_uint(text: str, little_endian: ByteOrder = False) -> int:
  """Inverse of encode_uint"""
  return _decode_uint(std_padding, text, little_endian)


def encode_uint_no_padding(n: int, little_endian: ByteOrder = False) -> str:
  """Encodes an unsigned 64-bit integer into 11 characters, no padding"""
  return _encode_uint(no_padding, n, little_endian)


def decode_uint_no_padding(text: str, little_endian: ByteOrder = False) -> int:
  """Inverse of encode_uint_no_padding"""
  return _decode_uint(no_padding, text, little_endian)
