import string
from typing import Final

# Characters of the URL-safe base64 alphabet (RFC 4648 section 5), in the RFC's own order.
# Index 0 is 'A' and index 52 is '0', so plain base64url text doesn't sort like its input.
URL_SAFE_STD: Final[str] = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"

STD_PADDING: Final[str] = "="
NO_PADDING = None

ALPHABET_SIZE: Final[int] = 64


def build_ascending_alphabet(chars: str) -> str:
  """Returns the distinct characters of chars ordered by code point"""
  return "".join(sorted(set(chars)))


def is_ascending(alphabet: str) -> bool:
  """True if every character has a strictly larger code point than the one before it"""
  return all(a < b for a, b in zip(alphabet, alphabet[1:]))


# Same 64 characters as URL_SAFE_STD, reordered by ASCII:
# '-', '0'-'9', 'A'-'Z', '_', 'a'-'z'
#
# The value of each 6-bit group now grows with the code point of the symbol it maps to,
# so comparing encoded strings character by character compares the input bits in the same order.
URL_SAFE_ASC: Final[str] = build_ascending_alphabet(URL_SAFE_STD)
