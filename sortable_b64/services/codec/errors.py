from typing import Optional


class DecodeError(ValueError):
  """Raised when text can't be decoded back into bytes"""


class InvalidCharacterError(DecodeError):
  """A symbol that isn't part of the alphabet, or a pad character somewhere other than the end"""

  def __init__(self, character: str, position: int):
    self.character = character
    self.position = position
    super().__init__(f"Invalid character {character!r} at position {position}.")


class InvalidLengthError(DecodeError):
  """The text (or the decoded payload) has a length no valid encoding can produce"""

  def __init__(self, length: int, reason: Optional[str] = None):
    self.length = length
    self.reason = reason
    message = f"Invalid length {length}."
    if reason:
      message = f"Invalid length {length}: {reason}."
    super().__init__(message)
