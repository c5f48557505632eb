from pydantic import BaseModel, Field, computed_field, field_validator
from newbase60.config import settings
from newbase60.services.sexagesimal import SxgCodec, get_sxg_codec


# #----------------------------------
# Codec models
# # ---------------------------------
class CodecOptions(BaseModel):
  """Validated options for building a codec of a non-default width."""

  max_bits: int = Field(default_factory=lambda: settings.SXG_MAX_BITS, gt=0)

  @property
  def max_value(self) -> int:
    return (1 << self.max_bits) - 1

  def build_codec(self) -> SxgCodec:
    return SxgCodec(max_bits=self.max_bits)


# #----------------------------------
# Identifier models
# # ---------------------------------
class SxgIdentifier(BaseModel):
  """A numeric id that travels as NewBase60 text, e.g. in a JSON field or a url path segment.

  Accepts either the number itself or its NewBase60 string. Strings are decoded with
  the shared codec, so typos like "O" for "0" are corrected and stray characters are
  ignored. When dumped, the model carries both the number and its canonical text.
  """

  value: int = Field(ge=0)

  @field_validator("value", mode="before")
  @classmethod
  def decode_sxg_text(cls, value):
    # NOTE: Has to run before pydantic's own int coercion, which would read "10" as ten.
    if not isinstance(value, str):
      return value
    decoded = get_sxg_codec().decode(value)
    if decoded is None:
      raise ValueError(
        f"NewBase60 string is too large for a {get_sxg_codec().max_bits}-bit integer"
      )
    return decoded

  @field_validator("value", mode="after")
  @classmethod
  def check_width(cls, value: int) -> int:
    codec = get_sxg_codec()
    if value > codec.max_value:
      raise ValueError(f"Value must fit in {codec.max_bits} bits (at most {codec.max_value})")
    return value

  @computed_field
  @property
  def sxg(self) -> str:
    return get_sxg_codec().encode(self.value)

  def padded(self, width: int) -> str:
    """Fixed-width encoding, for ids that need to sort lexically"""
    return get_sxg_codec().encode_padded(self.value, width)
