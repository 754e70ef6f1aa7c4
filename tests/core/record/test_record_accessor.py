# tests/core/record/test_record_accessor.py
"""
Testes do Record Accessor (Field / Record).

Os testes asseguram que:
- lookup de campos é case-insensitive
- campo ausente é distinto de campo presente com valor nulo
- nomes duplicados (case-insensitive) são rejeitados
- a ordem das colunas é preservada

Limites explícitos:
    - Não valida adapters de fontes tabulares (ver test_tabular_sources.py)
"""

import pytest

try:
    from constructor_factory.core.exceptions import DuplicateFieldError
    from constructor_factory.core.record import Field, Record
except Exception as e:  # noqa: BLE001
    Field = None
    Record = None
    DuplicateFieldError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing record module. Implement:\n"
            "- src/constructor_factory/core/record.py (Field, Record)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_get_is_case_insensitive():
    _require_imports()
    rec = Record.of([Field("Data_Type", 2), Field("Precision", None)])

    assert rec.get("data_type").value == 2
    assert rec.get("DATA_TYPE").name == "Data_Type"
    assert "precision" in rec


def test_absent_is_distinct_from_null():
    """
    Verifica a distinção entre coluna inexistente e coluna nula.

    Invariantes:
        - `get` de coluna inexistente → None
        - `get` de coluna nula → Field com `is_null`
    """
    _require_imports()
    rec = Record.of([Field("Precision", None)])

    assert rec.get("Knowledge_Category") is None
    assert rec.get("Precision") is not None
    assert rec.get("Precision").is_null is True
    assert "Knowledge_Category" not in rec


def test_non_null_keys_ignore_null_fields(make_record):
    _require_imports()
    rec = make_record(1, True, 2, 2)

    assert rec.non_null_keys() == frozenset({"id", "is_required", "data_type", "precision"})
    assert len(rec) == 6


def test_falsy_values_are_not_null():
    _require_imports()
    rec = Record.of([Field("a", 0), Field("b", False), Field("c", "")])

    assert rec.non_null_keys() == frozenset({"a", "b", "c"})


def test_duplicate_names_raise():
    _require_imports()
    with pytest.raises(DuplicateFieldError) as exc:
        Record.of([Field("Id", 1), Field("ID", 2)])

    assert exc.value.details == {"field": "ID", "conflicts_with": "Id"}


def test_order_and_to_dict():
    _require_imports()
    rec = Record.from_mapping({"b": 1, "a": None, "c": "x"})

    assert [f.name for f in rec] == ["b", "a", "c"]
    assert rec.to_dict() == {"b": 1, "a": None, "c": "x"}


def test_from_mapping_keeps_declared_types():
    _require_imports()
    rec = Record.from_mapping({"Id": 1, "Precision": None}, declared_types={"Id": int})

    assert rec.get("id").declared_type is int
    assert rec.get("precision").declared_type is None
