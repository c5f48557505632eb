from typing import Optional
from .config import settings
from .services.sexagesimal import (
  SxgCodec,
  aliases,
  base,
  character_set,
  character_to_value,
  digit_value,
  get_sxg_codec,
)
from .types import CodecOptions, SxgIdentifier

CHARACTERS = character_set
BASE = base
CHARACTER_TO_VALUE = character_to_value
ALIASES = aliases


def encode(num: int) -> str:
  """Converts a non-negative int into its NewBase60 string, e.g. encode(1337) == "NH".

  Raises TypeError for non-ints and ValueError for negative numbers or numbers
  wider than settings.SXG_MAX_BITS.
  """
  return get_sxg_codec().encode(num)


def encode_padded(num: int, width: int) -> str:
  """Like encode, but left-padded with "0" to at least width characters"""
  return get_sxg_codec().encode_padded(num, width)


def decode(s: str) -> Optional[int]:
  """Converts a NewBase60 string into an int, e.g. decode("NH") == 1337.

  Unknown characters are skipped and I, l, O are read as 1, 1, 0. Returns None
  if the value doesn't fit in settings.SXG_MAX_BITS.
  """
  return get_sxg_codec().decode(s)


# The names most NewBase60 implementations use
num_to_sxg = encode
sxg_to_num = decode

__all__ = [
  "ALIASES",
  "BASE",
  "CHARACTERS",
  "CHARACTER_TO_VALUE",
  "CodecOptions",
  "SxgCodec",
  "SxgIdentifier",
  "decode",
  "digit_value",
  "encode",
  "encode_padded",
  "get_sxg_codec",
  "num_to_sxg",
  "settings",
  "sxg_to_num",
]
