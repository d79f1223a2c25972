from .alphabet import NO_PADDING, STD_PADDING, URL_SAFE_ASC
from .codec import Base64Codec, BytesLike

# The two shared codecs. Both are frozen, build them once and hand out references.
std_padding = Base64Codec(alphabet=URL_SAFE_ASC, padding=STD_PADDING)
no_padding = std_padding.with_padding(NO_PADDING)


def get_codec(padded: bool = True) -> Base64Codec:
  """Returns the shared order-preserving codec for the requested padding mode"""
  return std_padding if padded else no_padding


def encode(data: BytesLike) -> str:
  """Encodes bytes into padded base64 text that sorts the same way the bytes do"""
  return std_padding.encode(data)


def decode(text: str) -> bytes:
  """Inverse of encode"""
  return std_padding.decode(text)


def encode_no_padding(data: BytesLike) -> str:
  """Like encode, without the trailing '=' characters"""
  return no_padding.encode(data)


def decode_no_padding(text: str) -> bytes:
  """Inverse of encode_no_padding"""
  return no_padding.decode(text)
