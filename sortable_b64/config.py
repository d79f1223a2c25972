# Environment variables for the codec's logging
import logging
import os
from pydantic import field_validator
from pydantic_settings import BaseSettings
from sortable_b64.services.logger import app_logger
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def get_env_with_logging(key: str, default: str = None) -> str:
  """Get environment variable with logging"""
  value = os.getenv(key, default)
  if not value:
    app_logger.warning(f"Environment variable '{key}' not found, using default: {default}")
    value = default
  return value


class Settings(BaseSettings):
  # Level for app_logger. Decode failures are only visible at DEBUG.
  LOG_LEVEL: str = get_env_with_logging("LOG_LEVEL", "INFO")

  @field_validator("LOG_LEVEL", mode="before")
  @classmethod
  def validate_log_level(cls, log_level: str) -> str:
    log_level = log_level.strip().upper()
    if log_level not in LOG_LEVEL_NAMES:
      raise ValueError(
        f"LOG_LEVEL must be one of {', '.join(LOG_LEVEL_NAMES)}, got '{log_level}'."
      )
    return log_level


def apply_log_level(level: str) -> None:
  """Sets the level of app_logger from a level name such as 'DEBUG'"""
  app_logger.setLevel(logging.getLevelName(level))


settings = Settings()
apply_log_level(settings.LOG_LEVEL)
