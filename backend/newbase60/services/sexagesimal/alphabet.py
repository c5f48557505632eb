from types import MappingProxyType
from typing import Optional

base = 60

# Digits, then uppercase without I and O, underscore, then lowercase without l.
# The ordering is what other NewBase60 implementations use, so it can never change.
character_set = "0123456789ABCDEFGHJKLMNPQRSTUVWXYZ_abcdefghijkmnopqrstuvwxyz"

# Characters people mistype for digits. Only ever read, never produced.
_aliases = {
  "I": 1,  # capital i looks like 1
  "l": 1,  # lowercase L looks like 1
  "O": 0,  # capital o looks like 0
}

_character_to_value = {}
for index in range(len(character_set)):
  char = character_set[index]
  _character_to_value[char] = index
_character_to_value.update(_aliases)

# NOTE: The proxies allow O(1) look-ups in the decoder without letting callers mutate the table
aliases = MappingProxyType(_aliases)
character_to_value = MappingProxyType(_character_to_value)


def digit_value(char: str) -> Optional[int]:
  """Returns the digit value of a character, or None if it isn't a NewBase60 digit"""
  return character_to_value.get(char)
