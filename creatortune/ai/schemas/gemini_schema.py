"""
Gemini Response Schemas - Derive the wire schema from pydantic result models.

Each operation's result is declared once, as a pydantic model. This module
walks that model and produces the response-schema dict Gemini expects
(``type``/``properties``/``required``/``enum``/``items``), so the shape we
send to the model and the shape we validate against can never drift apart.

Supported field annotations:
- str, int, float, bool
- str Enums and Literals (become STRING + enum)
- List[...] (becomes ARRAY)
- nested BaseModel (becomes OBJECT)
- Optional[...] (the field is simply left out of ``required``)

Inclusive numeric bounds (ge/le) and list min_length declared on a Field are
carried over as minimum/maximum/min_items.
"""

import types as pytypes
from enum import Enum
from typing import Any, Dict, List, Literal, Type, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict
from pydantic.fields import FieldInfo


class ResultModel(BaseModel):
    """Base class for every decoded operation result."""
    model_config = ConfigDict(extra="ignore")


class SchemaDefinitionError(TypeError):
    """Raised when a result model cannot be expressed as a Gemini schema."""


# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------

def build_response_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """
    Build the Gemini response schema for a result model.

    Args:
        model: Pydantic model describing the operation result

    Returns:
        Schema dict ready for GenerateContentConfig.response_schema
    """
    return _object_schema(model)


def required_fields(model: Type[BaseModel]) -> List[str]:
    """Top-level field names the model requires, in declaration order."""
    return [
        info.alias or name
        for name, info in model.model_fields.items()
        if info.is_required()
    ]


# ---------------------------------------------------------------------------
# WALKER
# ---------------------------------------------------------------------------

def _object_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    required: List[str] = []

    for name, info in model.model_fields.items():
        key = info.alias or name
        properties[key] = _field_schema(info)
        if info.is_required():
            required.append(key)

    schema: Dict[str, Any] = {
        "type": "OBJECT",
        "properties": properties,
        "property_ordering": list(properties),
    }
    if required:
        schema["required"] = required
    return schema


def _field_schema(info: FieldInfo) -> Dict[str, Any]:
    schema = _annotation_schema(info.annotation)
    if info.description:
        schema["description"] = info.description

    for constraint in info.metadata:
        if getattr(constraint, "ge", None) is not None:
            schema["minimum"] = constraint.ge
        if getattr(constraint, "le", None) is not None:
            schema["maximum"] = constraint.le
        if getattr(constraint, "gt", None) is not None or getattr(constraint, "lt", None) is not None:
            raise SchemaDefinitionError("Exclusive bounds (gt/lt) have no Gemini equivalent, use ge/le")
        if getattr(constraint, "min_length", None) is not None and schema["type"] == "ARRAY":
            schema["min_items"] = constraint.min_length
    return schema


def _annotation_schema(annotation: Any) -> Dict[str, Any]:
    origin = get_origin(annotation)

    if origin is Union or origin is getattr(pytypes, "UnionType", None):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            raise SchemaDefinitionError(f"Only Optional[X] unions are supported, got {annotation}")
        return _annotation_schema(members[0])

    if origin in (list, List):
        (item_type,) = get_args(annotation) or (str,)
        return {"type": "ARRAY", "items": _annotation_schema(item_type)}

    if origin is Literal:
        return {"type": "STRING", "enum": [str(value) for value in get_args(annotation)]}

    if isinstance(annotation, type):
        if issubclass(annotation, Enum):
            return {"type": "STRING", "enum": [member.value for member in annotation]}
        if issubclass(annotation, BaseModel):
            return _object_schema(annotation)
        # bool before int: bool is an int subclass
        if issubclass(annotation, bool):
            return {"type": "BOOLEAN"}
        if issubclass(annotation, int):
            return {"type": "INTEGER"}
        if issubclass(annotation, float):
            return {"type": "NUMBER"}
        if issubclass(annotation, str):
            return {"type": "STRING"}

    raise SchemaDefinitionError(f"Unsupported annotation in result model: {annotation!r}")
