"""Política de seleção de construtores.

A política é um único flag booleano, fixado na criação da factory e
nunca mutado depois. Ela pode ser declarada em código ou lida da seção
`factory` da configuração:

    factory:
      prefer_parameterless_constructor: false
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .errors import InvalidPolicyConfigError


@dataclass(frozen=True)
class FactoryPolicy:
    """Controles de seleção de construtor."""
    prefer_parameterless_constructor: bool = False


def policy_from_config(config: Dict[str, Any]) -> FactoryPolicy:
    section = config.get("factory")
    if section is None:
        return FactoryPolicy()
    if not isinstance(section, dict):
        raise InvalidPolicyConfigError(
            f"Seção 'factory' deve ser dict, recebido: {type(section).__name__}"
        )

    flag = section.get("prefer_parameterless_constructor", False)
    if not isinstance(flag, bool):
        raise InvalidPolicyConfigError(
            f"factory.prefer_parameterless_constructor deve ser booleano, recebido: {flag!r}"
        )
    return FactoryPolicy(prefer_parameterless_constructor=flag)
