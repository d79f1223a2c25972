from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, model_validator


# #----------------------------------
# Integer adapter models
# # ---------------------------------
class Endianness(str, Enum):
  """Byte order used when turning a 64-bit unsigned integer into 8 bytes.

  Only BIG keeps numeric order after encoding, since the most significant byte
  is compared first. LITTLE still round-trips, it just doesn't sort.
  """

  BIG = "big"
  LITTLE = "little"

  @classmethod
  def from_flag(cls, little_endian: bool) -> "Endianness":
    return cls.LITTLE if little_endian else cls.BIG


# #----------------------------------
# Filesystem probe models
# # ---------------------------------
class PathState(str, Enum):
  EXISTS = "exists"
  DOES_NOT_EXIST = "does_not_exist"
  ERROR = "error"


class PathProbeResult(BaseModel):
  """Outcome of stat-ing a path.

  os.stat reports "not found" and real failures (permissions, I/O, too many
  symlinks, a NUL byte in the path, etc.) the same way, by raising. This model
  keeps the three cases apart so a caller can't mistake an error for a missing path.
  """

  model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

  path: str
  state: PathState
  error: Optional[Union[OSError, ValueError]] = None

  @model_validator(mode="after")
  def check_error_matches_state(self):
    # NOTE: error is only meaningful for the ERROR state, and is required there.
    if (self.state == PathState.ERROR) != (self.error is not None):
      raise ValueError("An error must be attached if and only if state is ERROR.")
    return self

  @property
  def exists(self) -> bool:
    return self.state == PathState.EXISTS

  def raise_for_error(self) -> None:
    """Re-raises the error captured while probing, if there was one"""
    if self.error is not None:
      raise self.error
