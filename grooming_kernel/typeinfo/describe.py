"""
Type description dispatch.

Any type that wants to be visible to external type tooling implements the
Describable interface. Records describe themselves field by field; open-ended
maps describe themselves as an opaque primitive.
"""

from typing import Protocol, runtime_checkable

from pydantic import TypeAdapter

from grooming_kernel.models.typeinfo import TypeDescription

_description_adapter = TypeAdapter(TypeDescription)


@runtime_checkable
class Describable(Protocol):
    @classmethod
    def describe_type(cls) -> TypeDescription:
        ...


def describe(tp: type) -> TypeDescription:
    """Return the type description of a Describable type."""
    if not isinstance(tp, Describable):
        raise TypeError(f"{getattr(tp, '__name__', tp)!r} is not describable")
    return tp.describe_type()


def description_from_json(data: dict) -> TypeDescription:
    """Parse a serialized description back into its variant."""
    return _description_adapter.validate_python(data)
