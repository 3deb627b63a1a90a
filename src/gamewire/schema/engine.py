"""
engine.py

PURPOSE: Validate-while-copying traversal and the public (de)serialization entry points.
DEPENDENCIES: classify.py, properties.py, errors.py

ARCHITECTURE NOTES:
There is one traversal, copy_into(), run in one of three nesting modes:
- CLASS:  nested typed values become new blueprint instances
- OBJECT: nested typed values become plain dicts (objectify)
- ASSIGN: nested typed values are validated, then assigned by reference
          (used only by the validate-only entry points)

Validation happens while copying and stops at the first mismatch by
raising SchemaError. The public functions catch it and return it (or
None / False), so callers never see a raised validation failure and
never receive a partially built result. Input nested deeper than the
interpreter recursion limit (deep JSON text, cyclic instances) is reported
the same way instead of escaping as RecursionError.

Same-class trust: a value that is already an instance of the expected
blueprint is assumed to have been built by a schema-checked path, so the
primitive checks on its own fields are skipped. Field presence, array
shape and nested blueprint checks still run, and nested values are still
deep-copied. Pass revalidate=True to check everything.
"""

import json
import logging
from collections.abc import Mapping
from enum import Enum, auto
from typing import Any, TypeVar

from gamewire.schema.classify import UNDEFINED, is_class, type_of
from gamewire.schema.errors import SchemaError
from gamewire.schema.properties import (
    BlueprintRef,
    Primitive,
    Property,
    PropertyType,
    Schema,
    Selector,
    Untyped,
    is_blueprint,
    schema_of,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NestingMode(Enum):
    """What nested typed values turn into during a traversal."""

    CLASS = auto()
    OBJECT = auto()
    ASSIGN = auto()


def _where(field: str | None, owner: str) -> str:
    if field is None:
        return f"Input for {owner}"
    return f"Field '{field}' in {owner}"


def _too_deep(owner: str) -> SchemaError:
    return SchemaError(f"Input for {owner}: nested too deeply", owner=owner)


def _parse(text: str, field: str | None, owner: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaError(
            f"{_where(field, owner)}: malformed JSON ({e.msg} at line {e.lineno} column {e.colno})",
            field=field,
            owner=owner,
            expected="JSON",
            actual="string",
        ) from None
    except RecursionError:
        raise SchemaError(
            f"{_where(field, owner)}: JSON nested too deeply",
            field=field,
            owner=owner,
            expected="JSON",
            actual="string",
        ) from None


def _read(data: Any, name: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(name, UNDEFINED)
    return getattr(data, name, UNDEFINED)


def _write(target: Any, name: str, value: Any) -> None:
    if isinstance(target, dict):
        target[name] = value
    else:
        setattr(target, name, value)


def _resolve(value: Any, declared: PropertyType, field: str | None, owner: str) -> type:
    """Pick the blueprint for a nested value, calling the selector if there is one."""
    match declared:
        case BlueprintRef(cls=cls):
            blueprint = cls
        case Selector(fn=fn):
            try:
                blueprint = fn(value)
            except Exception as e:
                raise SchemaError(
                    f"{_where(field, owner)}: type selector failed ({e!r})",
                    field=field,
                    owner=owner,
                    expected=str(declared),
                    actual=type_of(value),
                ) from None
            if blueprint is None:
                raise SchemaError(
                    f"{_where(field, owner)}: no blueprint matches the value",
                    field=field,
                    owner=owner,
                    expected=str(declared),
                    actual=type_of(value),
                )
        case _:
            raise SchemaError(
                f"{_where(field, owner)}: {declared} is not a nested type",
                field=field,
                owner=owner,
            )
    if not is_blueprint(blueprint):
        raise SchemaError(
            f"{_where(field, owner)}: {type_of(blueprint) or repr(blueprint)} is not a blueprint",
            field=field,
            owner=owner,
            expected="blueprint",
            actual=type_of(blueprint),
        )
    return blueprint


def _nest(
    value: Any,
    declared: PropertyType,
    mode: NestingMode,
    field: str | None,
    owner: str,
    revalidate: bool,
    into: Any = None,
) -> Any:
    """Validate and convert one nested typed value according to the nesting mode."""
    if isinstance(value, str):
        value = _parse(value, field, owner)

    actual = type_of(value)
    if not actual.startswith("instance ") or actual == "instance Array":
        raise SchemaError(
            f"{_where(field, owner)}: expected {declared}, got {actual or 'unknown'}",
            field=field,
            owner=owner,
            expected=str(declared),
            actual=actual,
        )

    blueprint = _resolve(value, declared, field, owner)
    name = blueprint.__name__
    if actual not in ("instance Object", f"instance {name}"):
        raise SchemaError(
            f"{_where(field, owner)}: expected {name}, got {actual}",
            field=field,
            owner=owner,
            expected=f"instance {name}",
            actual=actual,
        )

    schema = schema_of(blueprint)
    options = {
        "owner": name,
        "checked": revalidate or actual == "instance Object",
        "revalidate": revalidate,
    }
    match mode:
        case NestingMode.CLASS:
            target = blueprint() if into is None else into
            return copy_into(value, target, schema, mode, **options)
        case NestingMode.OBJECT:
            return copy_into(value, {}, schema, mode, **options)
        case NestingMode.ASSIGN:
            copy_into(value, {}, schema, mode, **options)
            return value


def _convert(
    value: Any,
    prop: Property,
    mode: NestingMode,
    field: str,
    owner: str,
    checked: bool,
    revalidate: bool,
) -> Any:
    """Validate one field value and produce what gets stored in the target."""
    if isinstance(prop.type, Untyped):
        return value

    if prop.array:
        actual = type_of(value)
        if actual != "instance Array":
            raise SchemaError(
                f"{_where(field, owner)}: expected array of {prop.type}, got {actual or 'unknown'}",
                field=field,
                owner=owner,
                expected=prop.describe(),
                actual=actual,
            )
        if isinstance(prop.type, Primitive):
            # Known gap: arrays of primitives have never been supported.
            raise SchemaError(
                f"{_where(field, owner)}: arrays of primitive type '{prop.type}' are not supported",
                field=field,
                owner=owner,
                expected=prop.describe(),
                actual=actual,
            )
        return [
            _nest(item, prop.type, mode, f"{field}[{i}]", owner, revalidate)
            for i, item in enumerate(value)
        ]

    match prop.type:
        case Primitive(tag=tag):
            if checked:
                actual = type_of(value)
                if actual != tag:
                    raise SchemaError(
                        f"{_where(field, owner)}: expected {tag}, got {actual or 'unknown'}",
                        field=field,
                        owner=owner,
                        expected=tag,
                        actual=actual,
                    )
            return value
        case _:
            return _nest(value, prop.type, mode, field, owner, revalidate)


def copy_into(
    data: Any,
    target: Any,
    schema: Schema,
    mode: NestingMode,
    *,
    owner: str | None = None,
    checked: bool = True,
    revalidate: bool = False,
) -> Any:
    """
    Copy every field declared in the schema from data into target.

    Fields missing from data fail; fields not in the schema are ignored.

    Args:
        data: Plain dict or blueprint instance to read from.
        target: Blueprint instance (CLASS mode) or dict to write into.
        schema: Fields to copy, in canonical order.
        mode: What nested typed values become.
        owner: Blueprint name used in error messages.
        checked: Whether primitive fields are type-checked.
        revalidate: Passed down to nested values (see module notes).

    Returns:
        The filled target.

    Raises:
        SchemaError: On the first mismatch.
    """
    owner = owner or type(target).__name__
    for name, prop in schema.items():
        value = _read(data, name)
        if value is UNDEFINED:
            raise SchemaError(
                f"Missing field '{name}' in {owner}",
                field=name,
                owner=owner,
                expected=prop.describe(),
                actual="undefined",
            )
        _write(target, name, _convert(value, prop, mode, name, owner, checked, revalidate))
    return target


def _target(target: Any) -> tuple[PropertyType, Any, str]:
    """Split an entry point target into (declared type, fresh instance or None, display name)."""
    if is_class(target):
        return BlueprintRef(target), None, target.__name__
    if type_of(target) == "function":
        selector = Selector(target)
        return selector, None, str(selector)
    return BlueprintRef(type(target)), target, type(target).__name__


def to_class(data: Any, target: type[T] | T | Any, *, revalidate: bool = False) -> T | SchemaError:
    """
    Validate data and deep-copy it into a typed instance.

    Args:
        data: JSON string, plain dict, or an instance of the blueprint.
        target: A blueprint class, a fresh instance to fill, or a type-selector function.
            A supplied instance may be partially filled on failure and should be discarded.
        revalidate: Also type-check fields of values that are already typed instances.

    Returns:
        The new instance, or the SchemaError describing the first mismatch.
    """
    declared, into, name = _target(target)
    try:
        return _nest(data, declared, NestingMode.CLASS, None, name, revalidate, into=into)
    except SchemaError as e:
        logger.debug(f"Rejected input: {e}")
        return e
    except RecursionError:
        error = _too_deep(name)
        logger.debug(f"Rejected input: {error}")
        return error


def instantiate(data: Any, target: type[T] | T | Any, *, revalidate: bool = False) -> T | None:
    """Like to_class(), but returns None on failure."""
    result = to_class(data, target, revalidate=revalidate)
    if isinstance(result, SchemaError):
        return None
    return result


def validate(data: Any, target: Any, *, revalidate: bool = False) -> SchemaError | None:
    """
    Check data against a blueprint without building an instance.

    Returns:
        None if data is valid, otherwise the SchemaError describing the first mismatch.
    """
    declared, _, name = _target(target)
    try:
        _nest(data, declared, NestingMode.ASSIGN, None, name, revalidate)
    except SchemaError as e:
        logger.debug(f"Invalid input: {e}")
        return e
    except RecursionError:
        error = _too_deep(name)
        logger.debug(f"Invalid input: {error}")
        return error
    return None


def is_valid(data: Any, target: Any, *, revalidate: bool = False) -> bool:
    """Check if data is valid for a blueprint."""
    return validate(data, target, revalidate=revalidate) is None


def _objectify(instance: Any, revalidate: bool) -> dict[str, Any]:
    name = type(instance).__name__
    return _nest(instance, BlueprintRef(type(instance)), NestingMode.OBJECT, None, name, revalidate)


def to_object(instance: Any, *, revalidate: bool = False) -> dict[str, Any] | SchemaError:
    """
    Convert a typed instance into plain, JSON-serializable dicts and lists.

    Only schema fields are included, in declaration order.
    """
    try:
        return _objectify(instance, revalidate)
    except SchemaError as e:
        logger.debug(f"Cannot objectify {type(instance).__name__}: {e}")
        return e
    except RecursionError:
        error = _too_deep(type(instance).__name__)
        logger.debug(f"Cannot objectify {type(instance).__name__}: {error}")
        return error


def to_string(
    instance: Any,
    *,
    indent: int | None = None,
    revalidate: bool = False,
) -> str | SchemaError:
    """
    Serialize a typed instance to canonical JSON.

    Field order follows schema declaration order and compact separators are
    used unless indent is given, so equal data always gives identical strings.
    NaN and infinities are rejected rather than emitted as invalid JSON.
    """
    try:
        obj = _objectify(instance, revalidate)
        return json.dumps(
            obj,
            indent=indent,
            separators=(",", ":") if indent is None else None,
            ensure_ascii=False,
            allow_nan=False,
        )
    except SchemaError as e:
        logger.debug(f"Cannot serialize {type(instance).__name__}: {e}")
        return e
    except RecursionError:
        error = _too_deep(type(instance).__name__)
        logger.debug(f"Cannot serialize {type(instance).__name__}: {error}")
        return error
    except (TypeError, ValueError) as e:
        error = SchemaError(
            f"Input for {type(instance).__name__}: not JSON serializable ({e})",
            owner=type(instance).__name__,
        )
        logger.debug(f"Cannot serialize {type(instance).__name__}: {error}")
        return error


def copy(instance: T, target: T | None = None, *, revalidate: bool = False) -> T | SchemaError:
    """
    Deep-copy a typed instance into a new instance of the same blueprint.

    Untyped fields are shared by reference.
    """
    if target is None:
        target = type(instance)()
    return to_class(instance, target, revalidate=revalidate)
