"""Bounded integer aliases for fixed-width record fields."""

from typing import Annotated

from pydantic import Field

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1
UINT8_MAX = 255

# Width bounds only. No domain ranges are layered on top of these.
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
UInt8 = Annotated[int, Field(ge=0, le=UINT8_MAX)]
