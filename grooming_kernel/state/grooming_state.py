"""
Grooming State — the loosely-typed, mutable source of truth for a grooming
session.

Updated by: callers via set()/remove()
Queried by: extraction (to_typed) and JSON serialization

Serializes transparently: the JSON form is the flat object itself.
External type tooling sees this map as an opaque string, never as a record.
"""

from typing import Any, Dict, List, Optional

from pydantic import JsonValue, RootModel, TypeAdapter

from grooming_kernel.extraction.extractor import extract
from grooming_kernel.extraction.schema import RecordSchema
from grooming_kernel.models.config import ExtractionConfig
from grooming_kernel.models.grooming import GroomingRecord
from grooming_kernel.models.typeinfo import OpaqueType, PrimitiveType

GROOMING_SCHEMA = RecordSchema.from_model(GroomingRecord)

_value_adapter = TypeAdapter(JsonValue)


class GroomingState(RootModel[Dict[str, JsonValue]]):
    """
    String-keyed map of JSON-like values. No key ordering guarantee.

    Not internally synchronized; share across threads only behind a lock.
    """

    @classmethod
    def default(cls) -> "GroomingState":
        """A map populated with one valid value per grooming field."""
        return cls({
            "fur_length_cm": 2,                 # centimeters
            "brush_type": "slicker",
            "shedding_score": 7,
            "nail_trimmed": True,
            "favorite_spot": "chin",
        })

    def get(self, key: str) -> Optional[Any]:
        """Get the value stored under a key, or None if absent."""
        return self.root.get(key)

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite a value. Rejects values that are not JSON-like."""
        self.root[key] = _value_adapter.validate_python(value)

    def remove(self, key: str) -> bool:
        """Remove a key from the map."""
        if key in self.root:
            del self.root[key]
            return True
        return False

    def keys(self) -> List[str]:
        return list(self.root.keys())

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)

    def to_typed(self, config: Optional[ExtractionConfig] = None) -> GroomingRecord:
        """Extract a validated GroomingRecord. Raises ExtractionError."""
        return extract(self.root, GROOMING_SCHEMA, config)

    @classmethod
    def describe_type(cls) -> OpaqueType:
        return OpaqueType(name=cls.__name__, primitive=PrimitiveType.STRING)

    @classmethod
    def __get_pydantic_json_schema__(cls, core_schema, handler):
        return {"type": "string"}
