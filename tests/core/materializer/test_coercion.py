# tests/core/materializer/test_coercion.py
"""
Testes das regras de coerção de valores (convert_value / parse_enum).

Diferente de uma conversão "safe", falhas aqui nunca viram None:
toda incompatibilidade levanta `ConversionError` com detalhes estruturados.
"""

from datetime import date
from decimal import Decimal
from typing import Any, List

import pytest

try:
    from constructor_factory.core.coercion import convert_value, parse_enum
    from constructor_factory.core.descriptor.types import EnumMapping
    from constructor_factory.core.exceptions import ConversionError
    from tests.fixtures.model.enums import KnowledgeCategory
except Exception as e:  # noqa: BLE001
    convert_value = None
    parse_enum = None
    ConversionError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing coercion module. Implement:\n"
            "- src/constructor_factory/core/coercion.py (convert_value, parse_enum)\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize(
    "value, target, expected",
    [
        (5, int, 5),
        (5.0, int, 5),
        (Decimal("3"), int, 3),
        (" -12 ", int, -12),
        ("+7", int, 7),
        (2, float, 2.0),
        ("2.5", float, 2.5),
        ("1.10", Decimal, Decimal("1.10")),
        (3, Decimal, Decimal("3")),
        (True, bool, True),
        (0, bool, False),
        (" TRUE ", bool, True),
        ("false", bool, False),
        (12, str, "12"),
        ("abc", str, "abc"),
    ],
)
def test_convert_value_accepts_compatible_values(value, target, expected):
    _require_imports()
    out = convert_value(value, target)

    assert out == expected
    assert type(out) is target


@pytest.mark.parametrize(
    "value, target",
    [
        (True, int),
        (2.5, int),
        ("2.5", int),
        ("abc", int),
        ("²", int),
        ("①", int),
        (False, float),
        ("x", float),
        ("x", Decimal),
        (2, bool),
        ("yes", bool),
    ],
)
def test_convert_value_rejects_incompatible_values(value, target):
    _require_imports()
    with pytest.raises(ConversionError):
        convert_value(value, target)


def test_conversion_error_details():
    _require_imports()
    with pytest.raises(ConversionError) as exc:
        convert_value("abc", int, field_name="Precision")

    details = exc.value.details
    assert details["field"] == "Precision"
    assert details["target_type"] == "int"
    assert details["value_type"] == "str"
    assert "Precision" in str(exc.value)


def test_any_and_generic_targets_pass_through():
    _require_imports()
    marker = object()

    assert convert_value(marker, Any) is marker
    assert convert_value([1, 2], List[int]) == [1, 2]


def test_other_types_use_constructor_or_isinstance():
    _require_imports()
    d = date(2024, 1, 31)

    assert convert_value(d, date) is d
    assert convert_value((1, 2), list) == [1, 2]
    with pytest.raises(ConversionError):
        convert_value("2024-01-31", date)


def test_enum_target_parses_by_name_or_ordinal():
    _require_imports()
    assert convert_value("FRAMEWORK_RUNTIME", KnowledgeCategory) is KnowledgeCategory.FRAMEWORK_RUNTIME
    assert convert_value(3, KnowledgeCategory) is KnowledgeCategory.OPERATING_SYSTEM


def test_parse_enum_unknown_value_raises():
    _require_imports()
    mapping = EnumMapping.of(KnowledgeCategory)

    with pytest.raises(ConversionError) as exc:
        parse_enum("LIBRARY", mapping, field_name="Knowledge_Category")

    assert exc.value.details["target_type"] == "KnowledgeCategory"
    assert exc.value.details["reason"] == "no matching enum member"
