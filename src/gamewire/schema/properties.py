"""
properties.py

PURPOSE: Declarative schema model: Property, Schema and the blueprint base class.
DEPENDENCIES: classify.py

ARCHITECTURE NOTES:
A Schema is an ordered, read-only mapping of field name -> Property.
Declaration order is the canonical order used when serializing.

A Property's type is a closed set of variants:
- Primitive("string" | "number" | "boolean")
- BlueprintRef(cls): nested typed value with its own schema
- Selector(fn): picks the blueprint from the raw value (polymorphism)
- Untyped(): passed through by reference, never checked

Loose declarations ("string", User, some_function, None, or the mapping
form {"type": User, "array": True}) are normalized once, when the Schema
is built. The engine then matches on the variant instead of inspecting
raw declarations at traversal time.

Blueprints are plain classes that can be constructed without arguments
and expose a schema, either as a `schema` classmethod (see Schematized)
or as a class attribute holding a declaration.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from gamewire.schema.classify import PRIMITIVE_TAGS, is_class, type_of


@dataclass(frozen=True)
class Primitive:
    """A JSON primitive: "string", "number" or "boolean"."""

    tag: str

    def __post_init__(self) -> None:
        if self.tag not in PRIMITIVE_TAGS:
            raise ValueError(
                f"Unknown primitive type '{self.tag}', expected one of {', '.join(PRIMITIVE_TAGS)}"
            )

    def __str__(self) -> str:
        return self.tag


@dataclass(frozen=True)
class BlueprintRef:
    """A nested value of a fixed blueprint class."""

    cls: type

    def __str__(self) -> str:
        return self.cls.__name__


@dataclass(frozen=True)
class Selector:
    """
    A type-selector function: raw value -> blueprint class, or None for no match.

    The value is untrusted input. Any exception the function raises is
    reported as a validation failure, the same as returning None.
    """

    fn: Callable[[Any], type | None]

    def __str__(self) -> str:
        return f"selector {getattr(self.fn, '__name__', repr(self.fn))}"


@dataclass(frozen=True)
class Untyped:
    """Opt-out marker: the value is copied across by reference, unchecked."""

    def __str__(self) -> str:
        return "untyped"


PropertyType = Primitive | BlueprintRef | Selector | Untyped


def as_property_type(declared: Any) -> PropertyType:
    """Normalize a loosely declared type into a PropertyType variant."""
    if isinstance(declared, (Primitive, BlueprintRef, Selector, Untyped)):
        return declared
    if declared is None:
        return Untyped()
    if isinstance(declared, str):
        return Primitive(declared)
    if is_class(declared):
        return BlueprintRef(declared)
    if callable(declared):
        return Selector(declared)
    raise ValueError(f"Cannot use {type_of(declared) or repr(declared)} as a property type")


@dataclass(frozen=True)
class Property:
    """
    Type declaration for one field.

    The type may be given loosely and is normalized on construction:
        Property("string")
        Property(User, array=True)
        Property(game_selector)
        Property(None)  # untyped passthrough
    """

    type: PropertyType = field(default_factory=Untyped)
    array: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", as_property_type(self.type))
        object.__setattr__(self, "array", bool(self.array))

    @classmethod
    def of(cls, declaration: Any) -> "Property":
        """
        Build a Property from any supported declaration form.

        Accepts a Property, a mapping {"type": ..., "array": ...} (a missing
        "type" means untyped), or a bare type.
        """
        if isinstance(declaration, Property):
            return declaration
        if isinstance(declaration, Mapping):
            unknown = set(declaration) - {"type", "array"}
            if unknown:
                raise ValueError(f"Unknown property keys: {', '.join(sorted(unknown))}")
            return cls(declaration.get("type"), declaration.get("array", False))
        return cls(declaration)

    def describe(self) -> str:
        """Human-readable form, e.g. 'User[]'."""
        return f"{self.type}[]" if self.array else str(self.type)


class Schema(Mapping[str, Property]):
    """
    Ordered, immutable field -> Property map for one blueprint.

    Schemas are never mutated. Specialized blueprints derive theirs from a
    parent schema with extend() and without(), which return new Schemas.
    """

    def __init__(self, properties: Mapping[str, Any] | None = None, **fields: Any) -> None:
        merged: dict[str, Any] = dict(properties or {})
        merged.update(fields)
        self._properties: dict[str, Property] = {}
        for name, declaration in merged.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Field names must be non-empty strings, got {name!r}")
            self._properties[name] = Property.of(declaration)

    @classmethod
    def from_declaration(cls, declaration: Any) -> "Schema":
        """
        Build a Schema from a Schema, {"properties": {...}}, or a flat field mapping.

        The {"properties": {...}} wrapper is recognized when it is the only key.
        """
        if isinstance(declaration, Schema):
            return declaration
        if not isinstance(declaration, Mapping):
            kind = type_of(declaration) or repr(declaration)
            raise ValueError(f"Schema must be a mapping, got {kind}")
        if set(declaration) == {"properties"} and isinstance(declaration["properties"], Mapping):
            return cls(declaration["properties"])
        return cls(declaration)

    def __getitem__(self, name: str) -> Property:
        return self._properties[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}: {prop.describe()}" for name, prop in self.items())
        return f"Schema({fields})"

    def extend(self, properties: Mapping[str, Any] | None = None, **fields: Any) -> "Schema":
        """Return a new Schema with extra (or overridden) fields appended."""
        merged: dict[str, Any] = dict(self._properties)
        merged.update(properties or {})
        merged.update(fields)
        return Schema(merged)

    def without(self, *names: str) -> "Schema":
        """Return a new Schema with the named fields removed."""
        missing = [name for name in names if name not in self._properties]
        if missing:
            raise KeyError(f"Schema has no field(s): {', '.join(missing)}")
        return Schema({k: v for k, v in self._properties.items() if k not in names})


class Schematized:
    """
    Base class for blueprints.

    Subclasses override schema() and must be constructible with no arguments.
    """

    @classmethod
    def schema(cls) -> Schema:
        raise NotImplementedError(f"{cls.__name__} does not define a schema")

    def __repr__(self) -> str:
        try:
            names = list(schema_of(self))
        except (ValueError, NotImplementedError):
            names = []
        fields = ", ".join(f"{name}={getattr(self, name, None)!r}" for name in names)
        return f"{type(self).__name__}({fields})"


def is_blueprint(value: Any) -> bool:
    """Check if a value is a class that exposes a schema."""
    return is_class(value) and getattr(value, "schema", None) is not None


def schema_of(blueprint: Any) -> Schema:
    """
    Get the normalized Schema of a blueprint class or instance.

    Raises:
        ValueError: If the object does not expose a usable schema.
    """
    declaration = getattr(blueprint, "schema", None)
    if declaration is None:
        name = blueprint.__name__ if isinstance(blueprint, type) else type(blueprint).__name__
        raise ValueError(f"{name} is not a blueprint (no schema)")
    if callable(declaration) and not isinstance(declaration, Mapping):
        declaration = declaration()
    return Schema.from_declaration(declaration)
