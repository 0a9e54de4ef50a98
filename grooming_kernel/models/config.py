"""Extraction configuration."""

from pydantic import BaseModel


class ExtractionConfig(BaseModel):
    """Configuration for map-to-record extraction."""

    # Strict: integers must be integers, strings strings, booleans booleans.
    # Lax: pydantic coercion applies ("7" -> 7, 1 -> True).
    strict: bool = True
