# src/constructor_factory/core/config/__init__.py
"""
Camada de configuração do Constructor Factory.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Interpretação da seção `factory` como `FactoryPolicy`

Limites explícitos:
    - Não materializa entidades
    - Não depende de pandas ou de tipos de domínio
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidPolicyConfigError,
    UnsupportedConfigFormatError,
)
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .policy import FactoryPolicy, policy_from_config  # noqa: F401
