"""Grooming Kernel data models."""

from grooming_kernel.models.config import ExtractionConfig
from grooming_kernel.models.grooming import GroomingRecord
from grooming_kernel.models.typeinfo import (
    FieldDescription,
    OpaqueType,
    PrimitiveType,
    StructuredType,
    TypeDescription,
    describe_model,
)
from grooming_kernel.models.types import INT32_MAX, INT32_MIN, UINT8_MAX, Int32, UInt8

__all__ = [
    "ExtractionConfig",
    "FieldDescription",
    "GroomingRecord",
    "INT32_MAX",
    "INT32_MIN",
    "Int32",
    "OpaqueType",
    "PrimitiveType",
    "StructuredType",
    "TypeDescription",
    "UINT8_MAX",
    "UInt8",
    "describe_model",
]
