"""
Type Descriptions — how records and maps present themselves to external
type tooling (JSON schema consumers, client stub generators).

Two variants:
- StructuredType: a fixed record, described field by field.
- OpaqueType: an open-ended value exposed as a single primitive.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Type, Union

from pydantic import BaseModel, Field


class PrimitiveType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


class FieldDescription(BaseModel):
    """One field of a structured type."""

    name: str
    type: PrimitiveType
    required: bool = True
    minimum: Optional[int] = None           # Inclusive bounds for integers
    maximum: Optional[int] = None


class StructuredType(BaseModel):
    kind: Literal["structured"] = "structured"
    name: str
    fields: List[FieldDescription]          # Declaration order


class OpaqueType(BaseModel):
    kind: Literal["opaque"] = "opaque"
    name: str
    primitive: PrimitiveType = PrimitiveType.STRING


TypeDescription = Annotated[
    Union[StructuredType, OpaqueType], Field(discriminator="kind")
]


def describe_model(model: Type[BaseModel]) -> StructuredType:
    """
    Build a structured description of a pydantic model from its JSON schema.

    Fields are listed in declaration order. Every field must map to a
    single JSON primitive; nested or union-typed fields raise TypeError.
    """
    schema = model.model_json_schema()
    properties = schema.get("properties", {})
    required = set(schema.get("required", []))

    fields = []
    for name in model.model_fields:
        prop = properties[name]
        try:
            primitive = PrimitiveType(prop.get("type"))
        except ValueError:
            raise TypeError(
                f"Field {name} of {model.__name__} has no primitive JSON type"
            ) from None
        fields.append(FieldDescription(
            name=name,
            type=primitive,
            required=name in required,
            minimum=prop.get("minimum"),
            maximum=prop.get("maximum"),
        ))

    return StructuredType(name=model.__name__, fields=fields)
