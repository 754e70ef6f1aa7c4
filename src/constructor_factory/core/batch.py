# src/constructor_factory/core/batch.py
"""
Batch builder: materialização de uma sequência de registros.

Política (v1, fail-fast):
    - uma entidade por registro, na mesma ordem de entrada
    - a primeira falha (resolução ou materialização) aborta o batch
    - a exceção original é propagada; nenhum resultado parcial é retornado

Limites explícitos:
    - Não coleta erros nem pula linhas
    - Não paraleliza
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .config.policy import FactoryPolicy
from .descriptor.types import TypeDescriptor
from .errors import exception_to_payload
from .events import EventLog
from .materializer import materialize_one
from .record import Record
from .resolver import resolve_constructor


def materialize_all(
    descriptor: TypeDescriptor,
    records: Iterable[Record],
    policy: FactoryPolicy,
    *,
    events: Optional[EventLog] = None,
) -> List[Any]:
    source = descriptor.type_name
    if events is not None:
        events.log(source=source, level="info", message="batch started")

    items: List[Any] = []
    for row, record in enumerate(records):
        try:
            candidate = resolve_constructor(descriptor, record, policy, events=events)
            items.append(materialize_one(candidate, descriptor, record))
        except Exception as e:
            if events is not None:
                events.log(
                    source=source,
                    level="error",
                    message="batch failed",
                    row=row,
                    error=exception_to_payload(e).to_dict(),
                )
            raise

    if events is not None:
        events.log(source=source, level="info", message="batch finished", rows=len(items))
    return items
