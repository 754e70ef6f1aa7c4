# src/constructor_factory/core/descriptor/registry.py
"""
Registro de TypeDescriptors por tipo alvo.

Este módulo define o `DescriptorRegistry`, responsável por fornecer o
descriptor de cada tipo alvo, seja por registro manual explícito, seja
por introspecção lazy da classe.

Responsabilidades do módulo:
    - Aceitar descriptors registrados manualmente (sem reflexão)
    - Introspectar tipos não registrados sob demanda
    - Garantir que cada tipo seja descrito no máximo uma vez

Decisões arquiteturais:
    - O cache é populado sob lock (double-checked), sendo seguro para
      primeiro acesso concorrente por múltiplas factories
    - Registro manual duplicado é erro estrutural fatal
    - Descriptors são imutáveis; o registry apenas os indexa

Limites explícitos:
    - Não resolve construtores
    - Não materializa entidades
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from .introspection import describe_type
from .types import TypeDescriptor


class DuplicateDescriptorError(ValueError):
    """
    Exceção levantada quando um tipo recebe um segundo descriptor.

    Um tipo possui exatamente um descriptor durante a vida do processo;
    substituí-lo depois do primeiro uso quebraria a imutabilidade da qual
    factories concorrentes dependem.
    """


@dataclass
class DescriptorRegistry:
    """
    Registro canônico de descriptors por tipo.

    Invariantes:
        - Cada tipo possui no máximo um descriptor
        - A introspecção de um tipo ocorre no máximo uma vez
        - `list()` reflete a ordem em que os tipos foram descritos
    """

    describer: Callable[[type], TypeDescriptor] = describe_type

    _descriptors: Dict[type, TypeDescriptor] = field(default_factory=dict, init=False, repr=False)
    _order: List[type] = field(default_factory=list, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def register(self, target: type, descriptor: TypeDescriptor) -> None:
        if descriptor.target is not target:
            raise ValueError(
                f"Descriptor target mismatch: {descriptor.type_name} registered for {target.__qualname__}"
            )
        with self._lock:
            if target in self._descriptors:
                raise DuplicateDescriptorError(f"Duplicate descriptor for type: {target.__qualname__}")
            self._descriptors[target] = descriptor
            self._order.append(target)

    def describe(self, target: type) -> TypeDescriptor:
        descriptor = self._descriptors.get(target)
        if descriptor is not None:
            return descriptor

        with self._lock:
            descriptor = self._descriptors.get(target)
            if descriptor is None:
                descriptor = self.describer(target)
                self._descriptors[target] = descriptor
                self._order.append(target)
        return descriptor

    def __contains__(self, target: type) -> bool:
        return target in self._descriptors

    def list(self) -> List[TypeDescriptor]:
        return [self._descriptors[t] for t in self._order]


# registry compartilhado do processo
default_registry = DescriptorRegistry()
