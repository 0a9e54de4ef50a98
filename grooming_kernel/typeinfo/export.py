"""Render type descriptions as TypeScript declarations for client stubs."""

import logging
from typing import Iterable

from grooming_kernel.models.typeinfo import (
    OpaqueType,
    PrimitiveType,
    StructuredType,
    TypeDescription,
)
from grooming_kernel.typeinfo.describe import describe

logger = logging.getLogger(__name__)

_TS_PRIMITIVES = {
    PrimitiveType.STRING: "string",
    PrimitiveType.INTEGER: "number",
    PrimitiveType.NUMBER: "number",
    PrimitiveType.BOOLEAN: "boolean",
}


def render_typescript(description: TypeDescription) -> str:
    """Render a single description as one exported TypeScript declaration."""
    if isinstance(description, OpaqueType):
        return f"export type {description.name} = {_TS_PRIMITIVES[description.primitive]};"

    if isinstance(description, StructuredType):
        lines = [f"export interface {description.name} {{"]
        for field in description.fields:
            optional = "" if field.required else "?"
            lines.append(f"    {field.name}{optional}: {_TS_PRIMITIVES[field.type]};")
        lines.append("}")
        return "\n".join(lines)

    raise TypeError(f"Unsupported type description: {description!r}")


def export_typescript(types: Iterable[type]) -> str:
    """Describe each type and render all declarations as one module."""
    declarations = [render_typescript(describe(tp)) for tp in types]
    logger.debug("Rendered %d TypeScript declarations", len(declarations))
    return "\n\n".join(declarations) + "\n"
