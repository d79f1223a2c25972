import base64
from typing import Dict, FrozenSet, Optional, Union
from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator, model_validator
from sortable_b64.services.logger import app_logger
from .alphabet import ALPHABET_SIZE, STD_PADDING, URL_SAFE_STD, is_ascending
from .errors import DecodeError, InvalidCharacterError, InvalidLengthError

BytesLike = Union[bytes, bytearray, memoryview]


def _is_symbol(char: str) -> bool:
  return char.isascii() and char.isprintable() and not char.isspace()


class Base64Codec(BaseModel):
  """A base64 transform over a given 64-character alphabet.

  Every 3 input bytes become 4 symbols, each symbol carrying 6 bits, most significant
  bits first. A trailing group of 1 or 2 bytes is zero-extended and produces 2 or 3
  symbols, followed by pad characters when padding is set.

  Instances are frozen and hold no mutable state, so a single instance can be shared
  by every thread in the process. Use with_padding() to get a variant instead of
  modifying one.
  """

  model_config = ConfigDict(frozen=True)

  alphabet: str
  padding: Optional[str] = STD_PADDING

  # NOTE: The ascending check is what makes the output sort like the input. It's only
  # switched off to build reference codecs such as the RFC 4648 url-safe one.
  require_ascending: bool = True

  # Translate tables between this alphabet and the RFC 4648 url-safe one, filled once in
  # model_post_init. The 6-bit grouping itself is left to the base64 module.
  _symbols: FrozenSet[str] = PrivateAttr(default_factory=frozenset)
  _to_alphabet: Dict[int, int] = PrivateAttr(default_factory=dict)
  _to_url_safe: Dict[int, int] = PrivateAttr(default_factory=dict)

  @field_validator("alphabet", mode="after")
  @classmethod
  def validate_alphabet(cls, alphabet: str) -> str:
    if len(alphabet) != ALPHABET_SIZE:
      raise ValueError(f"Alphabet must be exactly {ALPHABET_SIZE} characters long, got {len(alphabet)}.")
    if len(set(alphabet)) != ALPHABET_SIZE:
      raise ValueError("Alphabet characters must be distinct.")
    if not all(_is_symbol(char) for char in alphabet):
      raise ValueError("Alphabet must only contain printable, non-whitespace ASCII characters.")
    return alphabet

  @field_validator("padding", mode="after")
  @classmethod
  def validate_padding(cls, padding: Optional[str]) -> Optional[str]:
    if padding is None:
      return padding
    if len(padding) != 1 or not _is_symbol(padding):
      raise ValueError("Padding must be a single printable, non-whitespace ASCII character.")
    return padding

  @model_validator(mode="after")
  def check_alphabet_and_padding(self):
    if self.padding is not None and self.padding in self.alphabet:
      raise ValueError(f"Padding character {self.padding!r} is part of the alphabet.")
    if self.require_ascending and not is_ascending(self.alphabet):
      raise ValueError("Alphabet characters must be in ascending ASCII order.")
    return self

  def model_post_init(self, __context) -> None:
    self._symbols = frozenset(self.alphabet)
    self._to_alphabet = str.maketrans(URL_SAFE_STD, self.alphabet)
    self._to_url_safe = str.maketrans(self.alphabet, URL_SAFE_STD)

  def with_padding(self, padding: Optional[str]) -> "Base64Codec":
    """Returns a codec with the same alphabet and a different pad character (None for no padding)"""
    return type(self)(alphabet=self.alphabet, padding=padding, require_ascending=self.require_ascending)

  def encoded_length(self, n: int) -> int:
    """Length of the text produced for n input bytes"""
    if self.padding is None:
      return (n * 8 + 5) // 6
    return (n + 2) // 3 * 4

  def encode(self, data: BytesLike) -> str:
    """Encodes bytes into text. Never fails for bytes-like input, b"" encodes to ""."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
      raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}.")

    # Same bits as base64url, only the symbols are swapped for the ones of equal rank
    url_safe = base64.urlsafe_b64encode(data).decode("ascii")
    unpadded = url_safe.rstrip("=")
    encoded = unpadded.translate(self._to_alphabet)

    if self.padding is not None:
      encoded += self.padding * (len(url_safe) - len(unpadded))
    return encoded

  def decode(self, text: str) -> bytes:
    """Decodes text produced by encode() back into bytes.

    Either returns every byte or raises, nothing is decoded partially.

    Raises:
        InvalidCharacterError: A symbol outside the alphabet, or a misplaced pad character.
        InvalidLengthError: Padded text whose length isn't a multiple of 4, or text that
            ends with a single lone symbol.
    """
    if not isinstance(text, str):
      raise TypeError(f"Expected a str, got {type(text).__name__}.")

    try:
      body = self._strip_and_validate(text)
    except DecodeError as e:
      app_logger.debug(f"Failed to decode {text!r}: {e}")
      raise

    # body is known to be well-formed here. Unused low bits of the last symbol are ignored.
    url_safe = body.translate(self._to_url_safe)
    return base64.urlsafe_b64decode(url_safe + "=" * (-len(url_safe) % 4))

  def _strip_and_validate(self, text: str) -> str:
    """Checks every symbol and the length, returns text with its padding stripped"""
    body = text
    if self.padding is not None:
      if len(text) % 4:
        raise InvalidLengthError(len(text), "padded text must be a multiple of 4 characters")
      body = text.rstrip(self.padding)

      # At most 2 pad characters can ever be needed. Anything more means one of them sits
      # where a symbol should be.
      if len(text) - len(body) > 2:
        raise InvalidCharacterError(self.padding, len(body))

    for position, char in enumerate(body):
      if char not in self._symbols:
        raise InvalidCharacterError(char, position)

    if len(body) % 4 == 1:
      raise InvalidLengthError(len(text), "a single trailing symbol can't hold a whole byte")
    return body
