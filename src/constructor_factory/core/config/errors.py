# src/constructor_factory/core/config/errors.py
"""
Exceções canônicas da camada de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa falha de materialização
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de erros de configuração, distinta das
    falhas de materialização (`MaterializationException`).
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de configuração base (defaults) não existe.

    O arquivo de defaults é obrigatório; o override local é opcional.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"factory": {"prefer_parameterless_constructor": false}}
        - override: {"factory": "shortcut"}
    """


class InvalidPolicyConfigError(ConfigError):
    """A seção `factory` da configuração não descreve uma política válida."""
