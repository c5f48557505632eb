from newbase60 import CHARACTERS, decode, digit_value
from newbase60.services.sexagesimal import aliases, base, character_set, character_to_value


def test_character_set_has_sixty_unique_characters():
  """The alphabet is 60 distinct characters"""
  assert base == 60
  assert len(character_set) == 60
  assert len(set(character_set)) == 60
  assert CHARACTERS == character_set


def test_character_set_ordering():
  """Known positions in the alphabet"""
  assert character_set[0] == "0"
  assert character_set[10] == "A"
  assert character_set[17] == "H"
  assert character_set[18] == "J"
  assert character_set[22] == "N"
  assert character_set[23] == "P"
  assert character_set[33] == "Z"
  assert character_set[34] == "_"
  assert character_set[35] == "a"
  assert character_set[45] == "k"
  assert character_set[46] == "m"
  assert character_set[59] == "z"


def test_confusable_characters_are_not_digits():
  """I, O and l are never produced by the encoder"""
  for char in "IOl":
    assert char not in character_set


def test_every_digit_decodes_to_its_index():
  """Each single character decodes to its position"""
  for value, char in enumerate(character_set):
    assert decode(char) == value
    assert digit_value(char) == value


def test_aliases():
  """Typo characters map onto the digit they look like"""
  assert dict(aliases) == {"I": 1, "l": 1, "O": 0}
  assert digit_value("I") == 1
  assert digit_value("l") == 1
  assert digit_value("O") == 0


def test_non_digits_have_no_value():
  """Characters outside the alphabet map to None"""
  for char in [".", "-", " ", "🥺", "\u0301", "\n", "é"]:
    assert digit_value(char) is None


def test_table_is_read_only():
  """The lookup table can't be modified by callers"""
  try:
    character_to_value["!"] = 5
  except TypeError:
    pass
  else:
    raise AssertionError("character_to_value accepted an assignment")
  assert digit_value("!") is None


def test_lowercase_i_is_a_digit():
  """Only lowercase L is left out of a-k / m-z, so i is an ordinary digit"""
  assert character_set.index("i") == 43
  assert digit_value("i") == 43
  assert decode("i") == 43
