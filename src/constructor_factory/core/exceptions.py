"""
Constructor Factory — Canonical Exceptions (v1)

Este módulo define as exceções tipadas internas da materialização de
entidades.

Objetivo:
- Permitir que resolver e materializer levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload
- Evitar ValueError/RuntimeError genéricos nas falhas do core

Regras:
- Não contém lógica de domínio de nenhuma entidade concreta.
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Erros levantados pelo construtor da própria entidade NÃO são
  representados aqui: eles atravessam o core sem encapsulamento.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MaterializationException(Exception):
    """Base class para exceções internas de materialização.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Resolução de construtor
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NoMatchingConstructor(MaterializationException):
    """Nenhum construtor candidato é coberto pelos campos não-nulos do registro."""


# ---------------------------------------------------------------------------
# Materialização
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnmatchedConstructorParameter(MaterializationException):
    """Parâmetro do construtor escolhido não existe no schema do registro."""


@dataclass(frozen=True)
class UnmatchedProperty(MaterializationException):
    """Campo remanescente não-nulo sem propriedade gravável correspondente."""


@dataclass(frozen=True)
class ConversionError(MaterializationException):
    """Valor não pode ser convertido para o tipo declarado da propriedade."""


# ---------------------------------------------------------------------------
# Estrutura (descriptor / registro)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DescriptorError(MaterializationException):
    """Tipo não pode ser descrito como TypeDescriptor (ex.: *args/**kwargs)."""


@dataclass(frozen=True)
class DuplicateFieldError(MaterializationException):
    """Registro possui dois campos com o mesmo nome (case-insensitive)."""
