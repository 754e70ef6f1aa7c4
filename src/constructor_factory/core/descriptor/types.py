# src/constructor_factory/core/descriptor/types.py
"""
Tipos canônicos de descrição de entidades.

Este módulo define as estruturas imutáveis que descrevem, para um tipo
alvo, como instâncias podem ser construídas e populadas:

    - Parameter            → parâmetro nomeado, tipado e com nulabilidade
    - ConstructorCandidate → assinatura de construção (lista ordenada de Parameters)
    - Property             → propriedade nomeada, tipada e possivelmente gravável
    - EnumMapping          → tabela nome/ordinal → membro, resolvida uma única vez
    - TypeDescriptor       → conjunto de candidatos + propriedades de um tipo
    - ConstructionOutcome  → resultado explícito de uma invocação de construtor

Princípios fundamentais:
    - Descriptors são imutáveis durante toda a vida do tipo
    - Resolver e materializer dependem apenas destes tipos, nunca de uma
      API concreta de reflexão
    - Comparação de nomes é sempre case-insensitive por igualdade (casefold)

Limites explícitos:
    - Não inspeciona classes (ver `introspection`)
    - Não escolhe construtores (ver `resolver`)
    - Não converte valores (ver `coercion`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType, NoneType, UnionType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple, Union, get_args, get_origin


def name_key(name: str) -> str:
    """Chave canônica de comparação de nomes (igualdade case-insensitive)."""
    return name.casefold()


def unwrap_optional(declared_type: Any) -> Tuple[bool, Any]:
    """Separa `Optional[T]` / `T | None` em (nullable, T).

    Uniões com mais de um tipo não-nulo são mantidas como estão.
    """
    origin = get_origin(declared_type)
    if origin is Union or origin is UnionType:
        args = get_args(declared_type)
        if NoneType in args:
            non_none = [a for a in args if a is not NoneType]
            if len(non_none) == 1:
                return True, non_none[0]
            return True, Union[tuple(non_none)]
    return False, declared_type


def is_enum_type(tp: Any) -> bool:
    return isinstance(tp, type) and issubclass(tp, Enum)


# -----------------------------
# Enum mapping
# -----------------------------

@dataclass(frozen=True)
class EnumMapping:
    """
    Tabela de parsing de um enum: nome → membro e ordinal → membro.

    O ordinal de um membro é o seu valor quando o valor é inteiro
    (ex.: IntEnum); caso contrário, a posição de declaração (base 0).
    """

    enum_type: type
    by_name: Mapping[str, Enum]
    by_ordinal: Mapping[int, Enum]

    @classmethod
    def of(cls, enum_type: type) -> "EnumMapping":
        by_name: Dict[str, Enum] = dict(enum_type.__members__)
        by_ordinal: Dict[int, Enum] = {}
        for index, member in enumerate(enum_type):
            value = member.value
            if isinstance(value, int) and not isinstance(value, bool):
                by_ordinal.setdefault(value, member)
            else:
                by_ordinal.setdefault(index, member)
        return cls(
            enum_type=enum_type,
            by_name=MappingProxyType(by_name),
            by_ordinal=MappingProxyType(by_ordinal),
        )

    def lookup(self, value: Any) -> Optional[Enum]:
        """Retorna o membro correspondente a `value` ou None."""
        if isinstance(value, self.enum_type):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return self.by_ordinal.get(value)
        if isinstance(value, float):
            return self.by_ordinal.get(int(value)) if value.is_integer() else None
        if isinstance(value, str):
            text = value.strip()
            if text in self.by_name:
                return self.by_name[text]
            digits = text[1:] if text[:1] in ("+", "-") else text
            if digits.isdecimal():
                return self.by_ordinal.get(int(text))
        return None


# -----------------------------
# Construtores
# -----------------------------

@dataclass(frozen=True)
class Parameter:
    name: str
    declared_type: Any = Any
    is_nullable: bool = False

    @property
    def key(self) -> str:
        return name_key(self.name)


@dataclass(frozen=True)
class ConstructionOutcome:
    """
    Resultado explícito de uma invocação de construtor.

    Exatamente um entre `instance` e `cause` é significativo: quando a
    lógica do próprio construtor falha, `cause` guarda a exceção original,
    que é relançada por `unwrap()` com identidade e mensagem preservadas.
    """

    instance: Any = None
    cause: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.cause is not None

    def unwrap(self) -> Any:
        if self.cause is not None:
            raise self.cause
        return self.instance


@dataclass(frozen=True)
class ConstructorCandidate:
    """
    Assinatura de construção de um tipo alvo.

    Campos:
        - name: rótulo estável do candidato (ex.: "__init__", "with_precision")
        - parameters: parâmetros na ordem posicional de invocação
        - factory: callable que recebe os argumentos posicionais e
          devolve a nova instância
    """

    name: str
    parameters: Tuple[Parameter, ...]
    factory: Callable[..., Any] = field(repr=False, compare=False)

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def parameter_keys(self) -> Tuple[str, ...]:
        return tuple(p.key for p in self.parameters)

    def invoke(self, arguments: Sequence[Any]) -> ConstructionOutcome:
        try:
            instance = self.factory(*arguments)
        except Exception as exc:  # noqa: BLE001
            return ConstructionOutcome(cause=exc)
        return ConstructionOutcome(instance=instance)


# -----------------------------
# Propriedades
# -----------------------------

@dataclass(frozen=True)
class Property:
    """
    Propriedade nomeada de um tipo alvo.

    `nullable`, `underlying_type` e `enum_mapping` são derivados do tipo
    declarado uma única vez, na construção do descriptor.
    """

    name: str
    declared_type: Any = Any
    settable: bool = True
    nullable: bool = False
    underlying_type: Any = Any
    enum_mapping: Optional[EnumMapping] = None

    @classmethod
    def of(cls, name: str, declared_type: Any = Any, *, settable: bool = True) -> "Property":
        nullable, underlying = unwrap_optional(declared_type)
        mapping = EnumMapping.of(underlying) if nullable and is_enum_type(underlying) else None
        return cls(
            name=name,
            declared_type=declared_type,
            settable=settable,
            nullable=nullable,
            underlying_type=underlying,
            enum_mapping=mapping,
        )

    @property
    def key(self) -> str:
        return name_key(self.name)

    def assign(self, instance: Any, value: Any) -> None:
        setattr(instance, self.name, value)


# -----------------------------
# Descriptor
# -----------------------------

@dataclass(frozen=True)
class TypeDescriptor:
    """
    Descrição imutável de um tipo alvo.

    Invariantes:
        - `constructors` preserva a ordem de declaração
        - `properties` é indexado pelo nome canônico (casefold)
    """

    target: type
    constructors: Tuple[ConstructorCandidate, ...]
    properties: Mapping[str, Property] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def of(
        cls,
        target: type,
        constructors: Iterable[ConstructorCandidate],
        properties: Iterable[Property] = (),
    ) -> "TypeDescriptor":
        props: Dict[str, Property] = {}
        for prop in properties:
            if prop.key in props:
                raise ValueError(f"Duplicate property name for {target.__name__}: {prop.name}")
            props[prop.key] = prop
        return cls(
            target=target,
            constructors=tuple(constructors),
            properties=MappingProxyType(props),
        )

    @property
    def type_name(self) -> str:
        return getattr(self.target, "__qualname__", repr(self.target))

    def parameterless(self) -> Optional[ConstructorCandidate]:
        for candidate in self.constructors:
            if candidate.arity == 0:
                return candidate
        return None

    def find_property(self, name: str) -> Optional[Property]:
        return self.properties.get(name_key(name))
