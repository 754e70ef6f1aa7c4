# src/constructor_factory/core/materializer.py
"""
Materialização de uma entidade a partir de um construtor e um registro.

Este módulo invoca o construtor escolhido com argumentos posicionais
extraídos do registro e, em seguida, aplica os campos remanescentes
como atribuições de propriedade.

Etapas:
    1. Para cada parâmetro, em ordem, localizar o campo homônimo
       (case-insensitive). Campo ausente → `UnmatchedConstructorParameter`,
       inclusive para parâmetros nullable. Campo nulo → argumento None.
    2. Invocar o construtor via `ConstructionOutcome`; falhas da lógica
       da própria entidade são relançadas sem encapsulamento.
    3. Campos usados por parâmetros são consumidos.
    4. Cada campo remanescente não-nulo exige uma propriedade gravável
       homônima (`UnmatchedProperty`); campos nulos são ignorados.
    5. Coerção: `Optional[Enum]` → parsing via EnumMapping;
       `Optional[T]` → conversão para T; demais tipos → valor bruto.

Limites explícitos:
    - Não escolhe o construtor (ver `resolver`)
    - Não captura nem reclassifica erros de validação da entidade
"""

from __future__ import annotations

from typing import Any, List, Set

from .coercion import convert_value, parse_enum
from .descriptor.types import ConstructorCandidate, Property, TypeDescriptor
from .exceptions import UnmatchedConstructorParameter, UnmatchedProperty
from .record import Field, Record


def _bind_arguments(candidate: ConstructorCandidate, descriptor: TypeDescriptor, record: Record) -> List[Any]:
    arguments: List[Any] = []
    for param in candidate.parameters:
        f = record.get(param.name)
        if f is None:
            raise UnmatchedConstructorParameter(
                message=f"Record has no field for parameter '{param.name}' of {descriptor.type_name}.{candidate.name}",
                details={
                    "type": descriptor.type_name,
                    "constructor": candidate.name,
                    "parameter": param.name,
                    "fields": [x.name for x in record],
                },
                hint="O schema do registro não corresponde ao construtor; inclua a coluna (mesmo que nula).",
            )
        arguments.append(None if f.is_null else f.value)
    return arguments


def _coerce(prop: Property, f: Field) -> Any:
    if prop.enum_mapping is not None:
        return parse_enum(f.value, prop.enum_mapping, field_name=f.name)
    if prop.nullable:
        return convert_value(f.value, prop.underlying_type, field_name=f.name)
    return f.value


def _assign_leftovers(instance: Any, descriptor: TypeDescriptor, record: Record, consumed: Set[str]) -> None:
    for f in record:
        if f.key in consumed or f.is_null:
            continue

        prop = descriptor.find_property(f.name)
        if prop is None or not prop.settable:
            raise UnmatchedProperty(
                message=f"No writable property '{f.name}' on {descriptor.type_name}",
                details={
                    "type": descriptor.type_name,
                    "field": f.name,
                    "read_only": prop is not None,
                },
                hint="Remova a coluna da fonte ou declare uma propriedade gravável com o mesmo nome.",
            )
        prop.assign(instance, _coerce(prop, f))


def materialize_one(candidate: ConstructorCandidate, descriptor: TypeDescriptor, record: Record) -> Any:
    """Constrói e popula uma instância de `descriptor.target` a partir de `record`."""
    arguments = _bind_arguments(candidate, descriptor, record)

    instance = candidate.invoke(arguments).unwrap()

    consumed = {p.key for p in candidate.parameters}
    _assign_leftovers(instance, descriptor, record, consumed)
    return instance
