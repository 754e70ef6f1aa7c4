"""
Constructor Factory — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros da materialização.
Erros são artefatos de diagnóstico e fazem parte do contrato operacional,
devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma falha é recuperada silenciosamente: o payload descreve o erro,
mas a exceção original continua sendo propagada ao chamador.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import (
    ConversionError,
    DescriptorError,
    DuplicateFieldError,
    MaterializationException,
    NoMatchingConstructor,
    UnmatchedConstructorParameter,
    UnmatchedProperty,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro da materialização.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

NO_MATCHING_CONSTRUCTOR = "NO_MATCHING_CONSTRUCTOR"
UNMATCHED_CONSTRUCTOR_PARAMETER = "UNMATCHED_CONSTRUCTOR_PARAMETER"
UNMATCHED_PROPERTY = "UNMATCHED_PROPERTY"
CONVERSION_ERROR = "CONVERSION_ERROR"
DESCRIPTOR_ERROR = "DESCRIPTOR_ERROR"
DUPLICATE_FIELD = "DUPLICATE_FIELD"

# Erro levantado pela lógica do próprio construtor da entidade
CONSTRUCTION_ERROR = "CONSTRUCTION_ERROR"


_CODES = {
    NoMatchingConstructor: NO_MATCHING_CONSTRUCTOR,
    UnmatchedConstructorParameter: UNMATCHED_CONSTRUCTOR_PARAMETER,
    UnmatchedProperty: UNMATCHED_PROPERTY,
    ConversionError: CONVERSION_ERROR,
    DescriptorError: DESCRIPTOR_ERROR,
    DuplicateFieldError: DUPLICATE_FIELD,
}


def exception_to_payload(exc: BaseException) -> ErrorPayload:
    """Converte exceções em ErrorPayload (serializável, acionável).

    Regras:
    - MaterializationException: já vem com message/details/hint.
    - Outras exceções: classificadas como CONSTRUCTION_ERROR, preservando
      a classe e a mensagem originais, sem expor stack trace.
    """
    if isinstance(exc, MaterializationException):
        code = _CODES.get(type(exc), type(exc).__name__)
        return ErrorPayload(
            type=code,
            message=exc.message,
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return ErrorPayload(
        type=CONSTRUCTION_ERROR,
        message=str(exc) or "Falha no construtor da entidade",
        details={"exception_class": exc.__class__.__name__},
        hint="A validação da própria entidade rejeitou os dados do registro.",
    )
