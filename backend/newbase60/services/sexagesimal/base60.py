from typing import Optional
from newbase60.config import DEFAULT_MAX_BITS
from newbase60.services.logger import app_logger
from .alphabet import base, character_set, character_to_value


def max_value_for_bits(max_bits: int) -> int:
  """Largest unsigned integer that fits in max_bits"""
  return (1 << max_bits) - 1


def encode_base_60(num: int, max_value: int = max_value_for_bits(DEFAULT_MAX_BITS)) -> str:
  """Converts a number into a NewBase60 string"""
  # bool is an int subclass but encoding True as "1" is almost certainly a caller bug
  if not isinstance(num, int) or isinstance(num, bool):
    raise TypeError(f"Expected an int, got {type(num).__name__}")
  if num < 0:
    raise ValueError(f"Cannot encode negative number {num}")
  if num > max_value:
    raise ValueError(f"Number {num} exceeds the maximum encodable value {max_value}")

  if num == 0:
    return character_set[0]

  digits = []
  while num > 0:
    num, remainder = divmod(num, base)
    digits.append(character_set[remainder])
  # Digits come out least significant first
  return "".join(reversed(digits))


def encode_base_60_padded(
  num: int, width: int, max_value: int = max_value_for_bits(DEFAULT_MAX_BITS)
) -> str:
  """Converts a number into a NewBase60 string left-padded with zeros to at least width characters.

  Equal-width strings sort lexically in the same order as the numbers they encode.
  Longer encodings are returned whole, never truncated.
  """
  if not isinstance(width, int) or isinstance(width, bool) or width < 0:
    raise ValueError(f"Padding width must be a non-negative int, got {width!r}")
  return encode_base_60(num, max_value).rjust(width, character_set[0])


def decode_base_60(s: str, max_value: int = max_value_for_bits(DEFAULT_MAX_BITS)) -> Optional[int]:
  """Convert a NewBase60 string into a number.

  Characters that aren't digits or known typos (I, l, O) are skipped, so an
  empty string decodes to 0. Returns None as soon as the running total would
  exceed max_value; nothing after that point is read.
  """
  if not isinstance(s, str):
    raise TypeError(f"Expected a str, got {type(s).__name__}")

  total = 0
  for char in s:
    value = character_to_value.get(char)
    if value is None:
      continue

    total *= base
    if total > max_value:
      app_logger.debug("Overflow decoding %r: exceeded %d on multiply", s[:32], max_value)
      return None
    total += value
    if total > max_value:
      app_logger.debug("Overflow decoding %r: exceeded %d on add", s[:32], max_value)
      return None
  return total
