# tests/core/batch/test_materialize_all.py
"""
Testes do batch builder (materialize_all).

Política fail-fast (v1):
    - uma entidade por registro, na ordem de entrada
    - a primeira falha aborta o batch e é propagada sem alteração
    - nenhuma lista parcial é retornada

Os testes também validam os eventos estruturados emitidos quando um
EventLog é fornecido.
"""

import pytest

try:
    from constructor_factory.core.batch import materialize_all
    from constructor_factory.core.config.policy import FactoryPolicy
    from constructor_factory.core.exceptions import NoMatchingConstructor
    from tests.fixtures.model.enums import ItemDataType
    from tests.fixtures.model.project_item import ProjectItem
except Exception as e:  # noqa: BLE001
    materialize_all = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing batch module. Implement:\n"
            "- src/constructor_factory/core/batch.py (materialize_all)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_one_entity_per_record_in_order(project_item_descriptor, make_record):
    """
    Verifica que o batch preserva cardinalidade e ordem.

    As três linhas exercitam construtores diferentes (precisão, lista de
    palavras-chave e genérico) dentro do mesmo batch.
    """
    _require_imports()
    records = [
        make_record(1, True, 2, 2),
        make_record(2, False, 6, None, 1),
        make_record(3, True, 7),
    ]

    items = materialize_all(project_item_descriptor, records, FactoryPolicy())

    assert [i.id for i in items] == [1, 2, 3]
    assert all(isinstance(i, ProjectItem) for i in items)
    assert [i.data_type for i in items] == [ItemDataType.CURRENCY, ItemDataType.KEYWORD_LIST, ItemDataType.STRING]


def test_empty_input_yields_empty_list(project_item_descriptor):
    _require_imports()
    assert materialize_all(project_item_descriptor, [], FactoryPolicy()) == []


def test_accepts_any_iterable(project_item_descriptor, make_record):
    _require_imports()
    records = (make_record(i, True, 7) for i in range(3))

    items = materialize_all(project_item_descriptor, records, FactoryPolicy())

    assert [i.id for i in items] == [0, 1, 2]


def test_parameterless_policy_applies_to_every_row(project_item_descriptor, make_record):
    _require_imports()
    records = [make_record(1, True, 2, 2), make_record(2, False, 6, None, 3)]

    items = materialize_all(
        project_item_descriptor, records, FactoryPolicy(prefer_parameterless_constructor=True)
    )

    assert [(i.id, i.precision) for i in items] == [(1, 2), (2, None)]
    assert items[1].knowledge_category is not None


def test_entity_error_aborts_batch(project_item_descriptor, make_record):
    """
    Verifica o fail-fast com erro de validação da entidade na segunda linha.

    A terceira linha nunca é processada e o ValueError original chega ao
    chamador.
    """
    _require_imports()
    processed = []

    def rows():
        for rec in [make_record(1, True, 7), make_record(2, True, 2), make_record(3, True, 7)]:
            processed.append(rec.get("id").value)
            yield rec

    with pytest.raises(ValueError, match="You must provide a precision"):
        materialize_all(project_item_descriptor, rows(), FactoryPolicy())

    assert processed == [1, 2]


def test_resolution_error_aborts_batch(project_item_descriptor, make_record):
    _require_imports()
    from constructor_factory.core.descriptor import TypeDescriptor

    no_parameterless = TypeDescriptor.of(
        ProjectItem,
        [c for c in project_item_descriptor.constructors if c.arity > 0],
        project_item_descriptor.properties.values(),
    )

    with pytest.raises(NoMatchingConstructor):
        materialize_all(no_parameterless, [make_record(1, True, 7), make_record(2)], FactoryPolicy())


def test_events_for_successful_batch(project_item_descriptor, make_record, event_log):
    _require_imports()
    materialize_all(project_item_descriptor, [make_record(1, True, 7)], FactoryPolicy(), events=event_log)

    messages = [e["message"] for e in event_log.events]
    assert messages == ["batch started", "batch finished"]
    assert event_log.events[-1]["rows"] == 1
    assert {e["source"] for e in event_log.events} == {"ProjectItem"}


def test_events_for_failed_batch(project_item_descriptor, make_record, event_log):
    """
    Verifica o evento de erro emitido antes da propagação.

    O evento carrega a linha que falhou e o payload canônico do erro;
    o evento "batch finished" nunca é emitido.
    """
    _require_imports()
    records = [make_record(1, True, 7), make_record(2, True, 2)]

    with pytest.raises(ValueError):
        materialize_all(project_item_descriptor, records, FactoryPolicy(), events=event_log)

    (failed,) = event_log.filter(level="error")
    assert failed["message"] == "batch failed"
    assert failed["row"] == 1
    assert failed["error"]["type"] == "CONSTRUCTION_ERROR"
    assert failed["error"]["details"] == {"exception_class": "ValueError"}
    assert "batch finished" not in [e["message"] for e in event_log.events]
