"""Utility functions for the Mars contract clients."""

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any

from hexbytes import HexBytes

from .exceptions import ValidationError

UINT128_MAX = 2**128 - 1

# Enough significant digits for any Uint128 or cosmwasm Decimal value.
_PRECISION = 80

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def camel_to_snake(name: str) -> str:
    """Convert a camelCase (or PascalCase) identifier to snake_case.

    snake_case input is returned unchanged.
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    """Convert a snake_case identifier to lowerCamelCase."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _as_decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError("Boolean is not a numeric amount", field=field, value=value)
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError("Value is not numeric", field=field, value=value) from exc
    if not amount.is_finite():
        raise ValidationError("Value must be finite", field=field, value=value)
    return amount


def to_uint128(value: float | Decimal | int | str, decimals: int = 0) -> str:
    """Convert a value to its Uint128 wire representation (a decimal string)."""
    amount = _as_decimal(value, "value")
    if amount < 0:
        raise ValidationError("Value cannot be negative", field="value", value=value)

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        uint_value = int(amount.scaleb(decimals))

    if uint_value > UINT128_MAX:
        raise ValidationError("Value exceeds uint128 maximum", field="value", value=value)

    return str(uint_value)


def from_uint128(uint_value: str | int, decimals: int = 0) -> Decimal:
    """Convert a Uint128 wire value back to Decimal."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        return Decimal(str(uint_value)).scaleb(-decimals)


def to_decimal_string(value: float | Decimal | int | str) -> str:
    """Render a value as a cosmwasm ``Decimal`` string (no exponent, no sign)."""
    amount = _as_decimal(value, "value")
    if amount < 0:
        raise ValidationError("Decimal cannot be negative", field="value", value=value)
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        text = format(amount.normalize(), "f")
    return text if text != "-0" else "0"


def serialise_result(value: Any) -> Any:
    """Serialise transport result objects into JSON-friendly structures."""
    if value is None:
        return None
    if isinstance(value, Mapping):
        return {str(key): serialise_result(item) for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray | HexBytes):
        return [serialise_result(item) for item in value]
    if isinstance(value, bytes | bytearray | HexBytes):
        return HexBytes(value).hex()
    return value
