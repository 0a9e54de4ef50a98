"""
Typed Extractor — converts a loosely-typed key/value map into a validated,
fixed-shape record.

Behavioral Contract:
- Walks the schema in declaration order
- Stops at the first missing or malformed field (first error wins)
- Either returns a fully populated record or raises; never a partial record
- Never modifies the input map
"""

import logging
from typing import Any, Mapping, Optional

from pydantic import BaseModel, RootModel, ValidationError

from grooming_kernel.extraction.schema import FieldSpec, RecordSchema
from grooming_kernel.models.config import ExtractionConfig

logger = logging.getLogger(__name__)


class ExtractionError(Exception):
    """Raised when a map cannot be converted into a record."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MissingFieldError(ExtractionError):
    """A declared field is absent from the map."""

    def __init__(self, field: str):
        super().__init__(field, f"Missing {field}")


class InvalidFieldError(ExtractionError):
    """A declared field is present but cannot be converted to its type."""

    def __init__(self, field: str, reason: str):
        super().__init__(field, f"Invalid {field}: {reason}")
        self.reason = reason


def _describe_validation_error(exc: ValidationError) -> str:
    return "; ".join(err["msg"] for err in exc.errors())


def extract_field(
    mapping: Mapping[str, Any], spec: FieldSpec, strict: bool = True
) -> Any:
    """
    Pull one field out of the map and convert it to its declared type.

    A key holding None is present: it fails conversion rather than
    being reported as missing.
    """
    if spec.name not in mapping:
        raise MissingFieldError(spec.name)

    try:
        return spec.convert(mapping[spec.name], strict=strict)
    except ValidationError as e:
        raise InvalidFieldError(spec.name, _describe_validation_error(e)) from e


def extract(
    mapping: Mapping[str, Any],
    schema: RecordSchema,
    config: Optional[ExtractionConfig] = None,
) -> BaseModel:
    """
    Build a record from the map, field by field, in schema order.

    Accepts a plain mapping or a RootModel wrapping one.
    """
    config = config or ExtractionConfig()
    if isinstance(mapping, RootModel):
        mapping = mapping.root

    values = {}
    try:
        for spec in schema.fields:
            values[spec.name] = extract_field(mapping, spec, strict=config.strict)
    except ExtractionError as e:
        logger.debug(
            "Extraction of %s failed: %s", schema.record_type.__name__, e
        )
        raise

    return schema.record_type.model_validate(values)


class TypedExtractor:
    """Reusable extractor bound to one schema and configuration."""

    def __init__(
        self,
        schema: RecordSchema,
        config: Optional[ExtractionConfig] = None,
    ):
        self.schema = schema
        self.config = config or ExtractionConfig()

    @classmethod
    def for_model(
        cls, model: type, config: Optional[ExtractionConfig] = None
    ) -> "TypedExtractor":
        return cls(RecordSchema.from_model(model), config)

    def extract(self, mapping: Mapping[str, Any]) -> BaseModel:
        return extract(mapping, self.schema, self.config)
