# src/constructor_factory/core/factory.py
"""
Factory registry: ponto de composição de resolver + materializer.

Este módulo define:
    - EntityFactory      → resolver + materializer ligados a um descriptor e política
    - ConstructorFactory → fornece uma EntityFactory por tipo alvo

Decisões arquiteturais:
    - A política é fixada na criação e nunca mutada
    - Factories não guardam estado além de descriptor, política e log
      opcional; uma mesma instância pode ser usada concorrentemente
    - Nenhuma validação adicional além da feita por resolver/materializer

Limites explícitos:
    - Não persiste entidades
    - Não faz cache de entidades criadas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .batch import materialize_all
from .config.policy import FactoryPolicy, policy_from_config
from .descriptor.registry import DescriptorRegistry, default_registry
from .descriptor.types import ConstructorCandidate, TypeDescriptor
from .events import EventLog
from .materializer import materialize_one
from .record import Record, to_records
from .resolver import resolve_constructor


RecordLike = Union[Record, Mapping[str, Any]]


def _as_record(record: RecordLike) -> Record:
    return record if isinstance(record, Record) else Record.from_mapping(record)


@dataclass(frozen=True)
class EntityFactory:
    """
    Cria e inicializa entidades de um tipo alvo a partir de registros.

    Operações:
        - find_constructor: construtor mais apropriado para um registro
        - invoke_constructor_and_initializers: constrói e popula a entidade
        - create_one: as duas operações acima em sequência
        - create_objects: uma entidade por linha de uma fonte tabular
    """

    descriptor: TypeDescriptor
    policy: FactoryPolicy
    events: Optional[EventLog] = field(default=None, compare=False, repr=False)

    @property
    def target(self) -> type:
        return self.descriptor.target

    def find_constructor(self, record: RecordLike) -> ConstructorCandidate:
        candidate = resolve_constructor(self.descriptor, _as_record(record), self.policy, events=self.events)
        if self.events is not None:
            self.events.log(
                source=self.descriptor.type_name,
                level="debug",
                message="constructor resolved",
                constructor=candidate.name,
                arity=candidate.arity,
            )
        return candidate

    def invoke_constructor_and_initializers(self, candidate: ConstructorCandidate, record: RecordLike) -> Any:
        return materialize_one(candidate, self.descriptor, _as_record(record))

    def create_one(self, record: RecordLike) -> Any:
        rec = _as_record(record)
        return self.invoke_constructor_and_initializers(self.find_constructor(rec), rec)

    def create_objects(self, source: Any) -> List[Any]:
        return materialize_all(self.descriptor, to_records(source), self.policy, events=self.events)


@dataclass
class ConstructorFactory:
    """
    Registro de factories de instanciação por tipo.

    `policy` é a política padrão entregue às factories; `factory_for`
    aceita uma política explícita por chamada.
    """

    policy: FactoryPolicy = field(default_factory=FactoryPolicy)
    registry: DescriptorRegistry = field(default_factory=lambda: default_registry)
    events: Optional[EventLog] = None

    @classmethod
    def from_config(
        cls,
        config: Dict[str, Any],
        *,
        registry: Optional[DescriptorRegistry] = None,
        events: Optional[EventLog] = None,
    ) -> "ConstructorFactory":
        return cls(
            policy=policy_from_config(config),
            registry=registry if registry is not None else default_registry,
            events=events,
        )

    def factory_for(self, target: type, policy: Optional[FactoryPolicy] = None) -> EntityFactory:
        return EntityFactory(
            descriptor=self.registry.describe(target),
            policy=policy if policy is not None else self.policy,
            events=self.events,
        )
