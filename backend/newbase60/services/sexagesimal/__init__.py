from .alphabet import aliases, base, character_set, character_to_value, digit_value
from .sxg_codec import SxgCodec, get_sxg_codec

# Callers go through the codec; the base60 helpers stay internal to this package.
__all__ = [
  "SxgCodec",
  "get_sxg_codec",
  "aliases",
  "base",
  "character_set",
  "character_to_value",
  "digit_value",
]
