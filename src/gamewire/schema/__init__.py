"""Schema engine: classification, validation, typed instantiation and serialization."""

from gamewire.schema.classify import PRIMITIVE_TAGS, UNDEFINED, is_class, is_instance, type_of
from gamewire.schema.engine import (
    NestingMode,
    copy,
    copy_into,
    instantiate,
    is_valid,
    to_class,
    to_object,
    to_string,
    validate,
)
from gamewire.schema.errors import SchemaError
from gamewire.schema.properties import (
    BlueprintRef,
    Primitive,
    Property,
    PropertyType,
    Schema,
    Schematized,
    Selector,
    Untyped,
    is_blueprint,
    schema_of,
)

__all__ = [
    "PRIMITIVE_TAGS",
    "UNDEFINED",
    "BlueprintRef",
    "NestingMode",
    "Primitive",
    "Property",
    "PropertyType",
    "Schema",
    "SchemaError",
    "Schematized",
    "Selector",
    "Untyped",
    "copy",
    "copy_into",
    "instantiate",
    "is_blueprint",
    "is_class",
    "is_instance",
    "is_valid",
    "schema_of",
    "to_class",
    "to_object",
    "to_string",
    "type_of",
    "validate",
]
