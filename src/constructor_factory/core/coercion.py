"""Coerção de valores para propriedades tipadas.

Regras (v1):
  - enums: parsing por nome declarado ou ordinal, via `EnumMapping`
  - int: int, float/Decimal integrais, strings com dígitos (sinal opcional)
  - float: int, float, Decimal, strings numéricas
  - Decimal: int, float, Decimal, strings numéricas
  - bool: bool, "true"/"false" (case-insensitive), 0/1
  - str: qualquer valor via `str()`
  - demais tipos: instância já compatível ou `tipo(valor)`

Diferente de uma conversão "safe", aqui uma coerção que falha
**não** vira None: ela levanta `ConversionError` e aborta a materialização.

Este módulo **não**:
  - decide se a propriedade é nullable (ver `Property`)
  - trata None (campos nulos nunca chegam aqui)
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from .descriptor.types import EnumMapping
from .exceptions import ConversionError


def _fail(value: Any, target: Any, field_name: Optional[str], reason: str) -> ConversionError:
    target_name = getattr(target, "__name__", repr(target))
    return ConversionError(
        message=f"Cannot convert {value!r} to {target_name}" + (f" for '{field_name}'" if field_name else ""),
        details={
            "field": field_name,
            "value": repr(value),
            "value_type": type(value).__name__,
            "target_type": target_name,
            "reason": reason,
        },
        hint="Ajuste o valor na fonte tabular ou o tipo declarado da propriedade.",
    )


# -----------------------------
# Helpers: coercions
# -----------------------------

def _coerce_int(v: Any) -> Optional[int]:
    if isinstance(v, bool):
        # evita True/False virar 1/0
        return None
    if isinstance(v, int):
        return v
    if isinstance(v, (float, Decimal)):
        try:
            return int(v) if v == int(v) else None
        except (ValueError, OverflowError):
            return None
    if isinstance(v, str):
        s = v.strip()
        digits = s[1:] if s.startswith(("+", "-")) else s
        return int(s) if digits.isdecimal() else None
    return None


def _coerce_float(v: Any) -> Optional[float]:
    if isinstance(v, bool):
        return None
    if isinstance(v, (int, float, Decimal)):
        return float(v)
    if isinstance(v, str):
        try:
            return float(v.strip())
        except ValueError:
            return None
    return None


def _coerce_decimal(v: Any) -> Optional[Decimal]:
    if isinstance(v, bool):
        return None
    if isinstance(v, Decimal):
        return v
    if isinstance(v, (int, float, str)):
        try:
            return Decimal(str(v).strip())
        except InvalidOperation:
            return None
    return None


def _coerce_bool(v: Any) -> Optional[bool]:
    if isinstance(v, bool):
        return v
    if isinstance(v, int) and v in (0, 1):
        return bool(v)
    if isinstance(v, str):
        s = v.strip().lower()
        if s == "true":
            return True
        if s == "false":
            return False
    return None


_COERCERS = {
    int: _coerce_int,
    float: _coerce_float,
    Decimal: _coerce_decimal,
    bool: _coerce_bool,
}


# -----------------------------
# API
# -----------------------------

def parse_enum(value: Any, mapping: EnumMapping, *, field_name: Optional[str] = None) -> Enum:
    """Resolve `value` para um membro do enum por nome ou ordinal."""
    member = mapping.lookup(value)
    if member is None:
        raise _fail(value, mapping.enum_type, field_name, "no matching enum member")
    return member


def convert_value(value: Any, target: Any, *, field_name: Optional[str] = None) -> Any:
    """Converte `value` para `target` seguindo as regras numéricas/textuais."""
    if target is Any or not isinstance(target, type):
        return value

    if issubclass(target, Enum):
        return parse_enum(value, EnumMapping.of(target), field_name=field_name)

    if target is str:
        return value if isinstance(value, str) else str(value)

    coercer = _COERCERS.get(target)
    if coercer is not None:
        converted = coercer(value)
        if converted is None:
            raise _fail(value, target, field_name, "incompatible value")
        return converted

    if isinstance(value, target):
        return value
    try:
        return target(value)
    except (TypeError, ValueError) as e:
        raise _fail(value, target, field_name, str(e)) from e
