"""
classify.py

PURPOSE: Structural classification of arbitrary runtime values.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
type_of() produces a short descriptor string for any value. The engine
branches on it to decide between a primitive equality check, a nested
blueprint traversal, or array iteration.

The descriptors keep "absent", "null" and "nan" apart from their normal
counterparts. These appear as real wire values, and a NaN timestamp must
never pass a "number" check.
"""

import math
from typing import Any


class _Undefined:
    """Marker for a field that is absent or not yet set."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()

PRIMITIVE_TAGS = ("string", "number", "boolean")


def type_of(value: Any) -> str:
    """
    Classify a value.

    Returns one of:
        "boolean", "undefined", "null", "nan", "number", "string",
        "class <Name>", "function", "instance <Name>", or "" when the value
        has no JSON-like shape (bytes, sets, complex numbers, ...).

    Plain dicts classify as "instance Object" and lists/tuples as
    "instance Array", so a loose payload is distinguishable from a typed
    blueprint instance ("instance User").
    """
    if value is True or value is False:
        return "boolean"
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, float) and math.isnan(value):
        return "nan"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, type):
        return f"class {value.__name__}"
    if callable(value):
        return "function"
    if isinstance(value, dict):
        return "instance Object"
    if isinstance(value, (list, tuple)):
        return "instance Array"
    if type(value).__module__ != "builtins":
        return f"instance {type(value).__name__}"
    return ""


def _has_prefix(value: Any, prefix: str, name: str | None) -> bool:
    descriptor = type_of(value)
    if name is None:
        return descriptor.startswith(prefix + " ")
    return descriptor == f"{prefix} {name}"


def is_class(value: Any, name: str | None = None) -> bool:
    """Check if a value is a class, optionally with a specific name."""
    return _has_prefix(value, "class", name)


def is_instance(value: Any, name: str | None = None) -> bool:
    """Check if a value is an object instance, optionally of a specific class name."""
    return _has_prefix(value, "instance", name)
