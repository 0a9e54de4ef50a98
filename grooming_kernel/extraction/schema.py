"""
Record Schema — the ordered (field name, target type) list that drives
extraction.

A schema is derived once from a record model's field declarations and then
reused for every extraction against that record type.
"""

from typing import Annotated, Any, Iterable, List, Type

from pydantic import BaseModel, TypeAdapter


class FieldSpec:
    """A single schema entry: a field name and the type it converts to."""

    def __init__(self, name: str, annotation: Any):
        self.name = name
        self.annotation = annotation
        self._adapter = TypeAdapter(annotation)

    def convert(self, value: Any, strict: bool = True) -> Any:
        """Convert a dynamic value to the declared type. Raises ValidationError."""
        return self._adapter.validate_python(value, strict=strict)

    def __repr__(self) -> str:
        return f"FieldSpec({self.name!r})"


class RecordSchema:
    """Ordered field specs plus the record type they populate."""

    def __init__(self, record_type: Type[BaseModel], fields: Iterable[FieldSpec]):
        self.record_type = record_type
        self.fields = tuple(fields)

    @classmethod
    def from_model(cls, model: Type[BaseModel]) -> "RecordSchema":
        """Derive a schema from a pydantic model, in field declaration order."""
        specs = []
        for name, info in model.model_fields.items():
            annotation = info.annotation
            if info.metadata:
                # Keep width bounds (ge/le) attached to the converted type
                annotation = Annotated[(info.annotation, *info.metadata)]
            specs.append(FieldSpec(name, annotation))
        return cls(model, specs)

    @property
    def field_names(self) -> List[str]:
        return [spec.name for spec in self.fields]

    def __len__(self) -> int:
        return len(self.fields)
