# Environment variables for the default codec and logging
import os
from typing import Literal
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from newbase60.services.logger import app_logger
from dotenv import load_dotenv

load_dotenv()

# 128 bits keeps encoded values interoperable with other NewBase60 implementations.
DEFAULT_MAX_BITS = 128

def get_env_with_logging(key: str, default: str = None) -> str:
  """Get environment variable with logging"""
  value = os.getenv(key, default)
  if not value:
    app_logger.warning(f"Environment variable '{key}' not found, using default: {default}")
    value = default
  return value

class Settings(BaseSettings):
  # Width of the unsigned integers the default codec accepts and produces.
  # NOTE: BaseSettings validates defaults, so the env string is parsed and checked here too.
  SXG_MAX_BITS: int = Field(
    default=get_env_with_logging("SXG_MAX_BITS", str(DEFAULT_MAX_BITS)), gt=0
  )

  LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = get_env_with_logging(
    "LOG_LEVEL", "WARNING"
  )

  @field_validator("LOG_LEVEL", mode="before")
  @classmethod
  def normalize_log_level(cls, level):
    return level.strip().upper() if isinstance(level, str) else level

settings = Settings()

app_logger.setLevel(settings.LOG_LEVEL)
