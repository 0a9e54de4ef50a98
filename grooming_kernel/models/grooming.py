"""Grooming Record — the fixed-shape view of one grooming session."""

from pydantic import BaseModel, ConfigDict

from grooming_kernel.models.types import Int32, UInt8
from grooming_kernel.models.typeinfo import StructuredType, describe_model


class GroomingRecord(BaseModel):
    """
    A validated snapshot of a cat grooming session.

    Only produced by extraction from a GroomingState (or parsed from its
    own JSON form). Immutable once built.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    fur_length_cm: Int32                    # Measured fur length
    brush_type: str                         # e.g., "slicker", "pin", "metal"
    shedding_score: UInt8                   # 0-10 rating of shedding (not enforced)
    nail_trimmed: bool                      # Whether nails were trimmed
    favorite_spot: str                      # Where the cat likes to be groomed

    @classmethod
    def describe_type(cls) -> StructuredType:
        return describe_model(cls)
