"""Message codec: call descriptors <-> CosmWasm wire envelopes.

Every query or action is a frozen dataclass deriving from :class:`Variant`.
The class carries its wire name (derived from the class name unless given
explicitly) and the codec turns an instance into the single-key envelope the
contract expects::

    >>> encode_msg(HealthValues(account_id="2", action="default", kind="default"))
    {'health_values': {'account_id': '2', 'action': 'default', 'kind': 'default'}}

Optional fields left at ``None`` are omitted from the envelope. Values inside
plain mappings are passed through verbatim, ``None`` included.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any, ClassVar, Literal, TypeVar, Union, get_args, get_origin, get_type_hints

from .exceptions import ValidationError
from .utils import camel_to_snake, to_decimal_string

Envelope = dict[str, Any] | str

V = TypeVar("V", bound="Variant")
T = TypeVar("T")


class Variant:
    """Base for every query, action and nested enum variant.

    Subclass keywords:
        wire_name: snake_case key used on the wire (default: class name in snake_case)
        unit: encode as a bare string with no payload (e.g. ``"clear_proposed"``)
        newtype: the payload is the single field's value rather than an object
    """

    wire_name: ClassVar[str]
    unit: ClassVar[bool] = False
    newtype: ClassVar[bool] = False

    def __init_subclass__(
        cls,
        wire_name: str | None = None,
        unit: bool = False,
        newtype: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        cls.wire_name = wire_name or camel_to_snake(cls.__name__)
        cls.unit = unit
        cls.newtype = newtype


def _payload_fields(variant: Variant) -> list[dataclasses.Field]:
    if not dataclasses.is_dataclass(variant):
        return []
    return list(dataclasses.fields(variant))


def encode_msg(variant: Variant) -> Envelope:
    """Return the wire envelope for ``variant``."""
    if variant.unit:
        return variant.wire_name

    fields = _payload_fields(variant)
    if variant.newtype:
        if len(fields) != 1:
            raise ValidationError(
                f"Newtype variant {type(variant).__name__} must have exactly one field",
                field="newtype",
                value=[f.name for f in fields],
            )
        return {variant.wire_name: to_wire(getattr(variant, fields[0].name))}

    return {variant.wire_name: _record_to_wire(variant)}


def _record_to_wire(record: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {}
    for field in dataclasses.fields(record):
        value = getattr(record, field.name)
        if value is None:
            continue
        payload[camel_to_snake(field.name)] = to_wire(value)
    return payload


def to_wire(value: Any) -> Any:
    """Recursively convert descriptors and records into JSON-ready values."""
    if isinstance(value, Variant):
        return encode_msg(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _record_to_wire(value)
    if isinstance(value, Mapping):
        return {key: to_wire(item) for key, item in value.items()}
    if isinstance(value, bool | int | float | str) or value is None:
        return value
    if isinstance(value, Decimal):
        return to_decimal_string(value)
    if isinstance(value, bytes | bytearray | set | frozenset):
        raise ValidationError(
            f"{type(value).__name__} has no canonical wire encoding",
            field="value",
            value=value,
        )
    if isinstance(value, Iterable):
        return [to_wire(item) for item in value]
    raise ValidationError(
        f"Unsupported value type for wire encoding: {type(value).__name__}",
        field="value",
        value=value,
    )


def variant_tag(envelope: Envelope) -> str:
    """Return the wire name an envelope was built from."""
    if isinstance(envelope, str):
        return envelope
    if isinstance(envelope, Mapping) and len(envelope) == 1:
        return next(iter(envelope))
    raise ValidationError(
        "Envelope must be a bare string or a single-key mapping",
        field="envelope",
        value=envelope,
    )


def decode_msg(envelope: Envelope, variants: Iterable[type[V]]) -> V:
    """Rebuild a descriptor from ``envelope`` given the closed variant set."""
    registry = {cls.wire_name: cls for cls in variants}
    tag = variant_tag(envelope)
    cls = registry.get(tag)
    if cls is None:
        raise ValidationError(f"Unknown variant '{tag}'", field="envelope", value=envelope)

    if isinstance(envelope, str):
        if not cls.unit:
            raise ValidationError(
                f"Variant '{tag}' requires a payload", field="envelope", value=envelope
            )
        return cls()

    payload = envelope[tag]
    if cls.unit:
        raise ValidationError(
            f"Variant '{tag}' does not take a payload", field="envelope", value=envelope
        )

    hints = get_type_hints(cls)
    fields = dataclasses.fields(cls)  # type: ignore[arg-type]
    if cls.newtype:
        field = fields[0]
        return _construct(cls, {field.name: _from_wire(hints[field.name], payload)}, envelope)

    return _construct(cls, _record_kwargs(cls, fields, hints, payload), envelope)


def descriptor_from_args(cls: type[V], args: Mapping[str, Any] | None = None) -> V:
    """Build a descriptor from a camelCase or snake_case argument mapping."""
    kwargs = {camel_to_snake(key): value for key, value in (args or {}).items()}
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValidationError(
            f"Invalid arguments for {cls.wire_name}: {exc}",
            field=cls.wire_name,
            value=dict(args or {}),
        ) from exc


def _construct(cls: type[T], kwargs: dict[str, Any], source: Any) -> T:
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValidationError(
            f"Invalid payload for {cls.__name__}: {exc}", field=cls.__name__, value=source
        ) from exc


def _record_kwargs(
    cls: type, fields: Iterable[dataclasses.Field], hints: dict[str, Any], payload: Any
) -> dict[str, Any]:
    if not isinstance(payload, Mapping):
        raise ValidationError(
            f"Payload for {cls.__name__} must be an object", field=cls.__name__, value=payload
        )
    kwargs = {}
    for field in fields:
        key = camel_to_snake(field.name)
        if key in payload:
            kwargs[field.name] = _from_wire(hints[field.name], payload[key])
    return kwargs


def _from_wire(tp: Any, value: Any) -> Any:
    if value is None:
        return None

    origin = get_origin(tp)

    if origin is Union or origin is types.UnionType:
        candidates = [arg for arg in get_args(tp) if arg is not type(None)]
        variant_classes = [arg for arg in candidates if _is_variant_class(arg)]
        if variant_classes:
            return decode_msg(value, variant_classes)
        for candidate in candidates:
            if dataclasses.is_dataclass(candidate) and isinstance(value, Mapping):
                return _from_wire(candidate, value)
        if len(candidates) == 1:
            return _from_wire(candidates[0], value)
        return value

    if origin is Literal:
        return value

    if origin is list:
        (item_type,) = get_args(tp) or (Any,)
        return [_from_wire(item_type, item) for item in value]

    if origin is tuple:
        item_types = get_args(tp)
        if len(item_types) == 2 and item_types[1] is Ellipsis:
            return tuple(_from_wire(item_types[0], item) for item in value)
        return tuple(_from_wire(t, item) for t, item in zip(item_types, value, strict=False))

    if origin is not None:
        return value

    if _is_variant_class(tp):
        return decode_msg(value, [tp])

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        kwargs = _record_kwargs(tp, dataclasses.fields(tp), get_type_hints(tp), value)
        return _construct(tp, kwargs, value)

    return value


def _is_variant_class(tp: Any) -> bool:
    return get_origin(tp) is None and isinstance(tp, type) and issubclass(tp, Variant)
