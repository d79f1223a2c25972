import os
import stat
from typing import Union
from sortable_b64.types import PathProbeResult, PathState
from .logger import app_logger

PathLike = Union[str, bytes, os.PathLike]

# os.stat raises for "not there" and for real failures alike. These two mean the path
# (or one of its parents) just doesn't exist, everything else is a genuine error.
_NOT_FOUND_ERRORS = (FileNotFoundError, NotADirectoryError)

# os.stat raises ValueError instead of OSError for paths it refuses outright (embedded NUL byte)
_STAT_ERRORS = (OSError, ValueError)


def probe_path(path: PathLike) -> PathProbeResult:
  """Stats a path and reports whether it exists, doesn't exist, or couldn't be checked"""
  path_str = os.fsdecode(path)
  try:
    os.stat(path)
  except _NOT_FOUND_ERRORS:
    return PathProbeResult(path=path_str, state=PathState.DOES_NOT_EXIST)
  except _STAT_ERRORS as e:
    app_logger.warning(f"Failed to stat '{path_str}': {e}")
    return PathProbeResult(path=path_str, state=PathState.ERROR, error=e)
  return PathProbeResult(path=path_str, state=PathState.EXISTS)


def path_exists(path: PathLike) -> bool:
  """Returns if the given path exists.

  A missing path is a normal False. Any other error (permission denied, a NUL byte in the path, etc.) is raised,
  since then we genuinely don't know.
  """
  result = probe_path(path)
  result.raise_for_error()
  return result.exists


def _stat_mode(path: PathLike):
  try:
    return os.stat(path).st_mode
  except _STAT_ERRORS as e:
    app_logger.debug(f"Could not stat '{os.fsdecode(path)}': {e}")
    return None


def is_dir(path: PathLike) -> bool:
  """Returns if the given path is a directory.

  NOTE: Every error collapses into False, so False means "not confirmed to be a directory",
  not "confirmed to be something else".
  """
  mode = _stat_mode(path)
  return mode is not None and stat.S_ISDIR(mode)


def is_file(path: PathLike) -> bool:
  """Returns if the given path is a regular file. Same False semantics as is_dir."""
  mode = _stat_mode(path)
  return mode is not None and stat.S_ISREG(mode)
