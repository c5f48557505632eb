from typing import Optional
from newbase60.config import settings
from newbase60.services.logger import app_logger
from .base60 import (
  decode_base_60,
  encode_base_60,
  encode_base_60_padded,
  max_value_for_bits,
)


class SxgCodec:
  def __init__(self, max_bits: int = None):
    """
    Encodes and decodes NewBase60 strings for unsigned integers of one fixed width.

    Python ints never overflow, so the width has to be enforced here: encode refuses
    numbers that don't fit and decode returns None the moment the accumulated value
    stops fitting. Two codecs with different widths can disagree about whether a
    string decodes, but never about the value when both succeed.

    The codec holds no mutable state, so one instance can be shared between threads.
    Most callers should use the shared instance from get_sxg_codec(), which is built
    from settings.SXG_MAX_BITS.
    """
    if max_bits is None:
      max_bits = settings.SXG_MAX_BITS
    if not isinstance(max_bits, int) or isinstance(max_bits, bool) or max_bits <= 0:
      raise ValueError(f"max_bits must be a positive int, got {max_bits!r}")

    self.max_bits = max_bits
    self.max_value = max_value_for_bits(max_bits)
    app_logger.debug(f"Created SxgCodec for {max_bits}-bit unsigned integers")

  def encode(self, num: int) -> str:
    return encode_base_60(num, self.max_value)

  def encode_padded(self, num: int, width: int) -> str:
    return encode_base_60_padded(num, width, self.max_value)

  def decode(self, s: str) -> Optional[int]:
    """Returns the decoded number, or None on overflow"""
    return decode_base_60(s, self.max_value)

  def __repr__(self):
    return f"SxgCodec(max_bits={self.max_bits})"


_sxg_codec = SxgCodec()


def get_sxg_codec() -> SxgCodec:
  """Returns the shared codec built from the configured width"""
  return _sxg_codec
