"""Tests for type descriptions and TypeScript export."""

import pytest
from pydantic import BaseModel

from grooming_kernel.models import (
    INT32_MAX,
    INT32_MIN,
    GroomingRecord,
    OpaqueType,
    PrimitiveType,
    StructuredType,
    describe_model,
)
from grooming_kernel.state.grooming_state import GroomingState
from grooming_kernel.typeinfo.describe import Describable, describe, description_from_json
from grooming_kernel.typeinfo.export import export_typescript, render_typescript


class TestDescriptions:
    def test_record_is_structured(self):
        description = describe(GroomingRecord)
        assert isinstance(description, StructuredType)
        assert description.name == "GroomingRecord"
        assert [f.name for f in description.fields] == [
            "fur_length_cm",
            "brush_type",
            "shedding_score",
            "nail_trimmed",
            "favorite_spot",
        ]

    def test_record_field_types(self):
        fields = {f.name: f for f in describe(GroomingRecord).fields}
        assert fields["fur_length_cm"].type == PrimitiveType.INTEGER
        assert fields["fur_length_cm"].minimum == INT32_MIN
        assert fields["fur_length_cm"].maximum == INT32_MAX
        assert fields["shedding_score"].minimum == 0
        assert fields["shedding_score"].maximum == 255
        assert fields["brush_type"].type == PrimitiveType.STRING
        assert fields["nail_trimmed"].type == PrimitiveType.BOOLEAN
        assert all(f.required for f in fields.values())

    def test_state_is_opaque_string(self):
        description = describe(GroomingState)
        assert isinstance(description, OpaqueType)
        assert description.primitive == PrimitiveType.STRING

    def test_state_json_schema_is_opaque(self):
        schema = GroomingState.model_json_schema()
        assert schema["type"] == "string"
        assert "properties" not in schema
        assert "additionalProperties" not in schema

    def test_describable_interface(self):
        assert isinstance(GroomingRecord, Describable)
        assert isinstance(GroomingState, Describable)
        assert not isinstance(int, Describable)

    def test_non_describable_type(self):
        with pytest.raises(TypeError):
            describe(int)

    def test_nested_model_not_structured_primitive(self):
        class Session(BaseModel):
            record: GroomingRecord

        with pytest.raises(TypeError):
            describe_model(Session)

    def test_description_json_round_trip(self):
        for tp in (GroomingRecord, GroomingState):
            description = describe(tp)
            parsed = description_from_json(description.model_dump(mode="json"))
            assert parsed == description


class TestTypeScriptExport:
    def test_render_opaque(self):
        assert render_typescript(describe(GroomingState)) == (
            "export type GroomingState = string;"
        )

    def test_render_structured(self):
        rendered = render_typescript(describe(GroomingRecord))
        assert rendered == (
            "export interface GroomingRecord {\n"
            "    fur_length_cm: number;\n"
            "    brush_type: string;\n"
            "    shedding_score: number;\n"
            "    nail_trimmed: boolean;\n"
            "    favorite_spot: string;\n"
            "}"
        )

    def test_render_optional_field(self):
        class Note(BaseModel):
            text: str = ""

        assert "text?: string;" in render_typescript(describe_model(Note))

    def test_export_module(self):
        module = export_typescript([GroomingRecord, GroomingState])
        assert module.startswith("export interface GroomingRecord {")
        assert "\n\nexport type GroomingState = string;\n" in module
        assert module.endswith("\n")
