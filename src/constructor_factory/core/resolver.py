# src/constructor_factory/core/resolver.py
"""
Resolução do construtor mais específico para um registro.

Algoritmo:
    1. Atalho: com `prefer_parameterless_constructor`, um candidato de
       aridade 0 é retornado imediatamente, sem inspecionar o registro.
    2. S = nomes dos campos com valor não-nulo.
    3. Um candidato qualifica quando todo parâmetro é nullable ou tem
       nome (case-insensitive) em S.
    4. Vence a maior aridade. Empates na aridade máxima são resolvidos
       pela menor tupla de nomes de parâmetros (casefold) e, persistindo,
       pela ordem de declaração.
    5. Sem candidato qualificado: `NoMatchingConstructor`.

Limites explícitos:
    - Não verifica presença de campos para parâmetros nullable
      (ausência é detectada apenas na materialização)
    - Não invoca construtores
"""

from __future__ import annotations

from typing import FrozenSet, List, Optional

from .config.policy import FactoryPolicy
from .descriptor.types import ConstructorCandidate, TypeDescriptor
from .events import EventLog
from .exceptions import NoMatchingConstructor
from .record import Record


def qualifies(candidate: ConstructorCandidate, non_null: FrozenSet[str]) -> bool:
    return all(p.is_nullable or p.key in non_null for p in candidate.parameters)


def rank_candidates(descriptor: TypeDescriptor, record: Record) -> List[ConstructorCandidate]:
    """Candidatos qualificados, do mais para o menos específico."""
    non_null = record.non_null_keys()
    ranked = [
        (-c.arity, c.parameter_keys, index, c)
        for index, c in enumerate(descriptor.constructors)
        if qualifies(c, non_null)
    ]
    ranked.sort(key=lambda item: item[:3])
    return [item[3] for item in ranked]


def resolve_constructor(
    descriptor: TypeDescriptor,
    record: Record,
    policy: FactoryPolicy,
    *,
    events: Optional[EventLog] = None,
) -> ConstructorCandidate:
    if policy.prefer_parameterless_constructor:
        parameterless = descriptor.parameterless()
        if parameterless is not None:
            return parameterless

    ranked = rank_candidates(descriptor, record)
    if not ranked:
        raise NoMatchingConstructor(
            message=f"No constructor of {descriptor.type_name} matches the record's non-null fields",
            details={
                "type": descriptor.type_name,
                "non_null_fields": sorted(f.name for f in record if not f.is_null),
                "candidates": [c.name for c in descriptor.constructors],
            },
            hint="Forneça valores para os parâmetros não-nullable de algum construtor.",
        )

    best = ranked[0]
    if events is not None and len(ranked) > 1 and ranked[1].arity == best.arity:
        tied = [c.name for c in ranked if c.arity == best.arity]
        events.add_warning(
            source=descriptor.type_name,
            message=f"constructor tie at arity {best.arity} between {tied}; selected {best.name}",
        )
    return best
