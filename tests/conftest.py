# tests/conftest.py
"""
Fixtures compartilhados para testes do Constructor Factory.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (YAML como string)
- o schema tabular do modelo de exemplo (ProjectItem)
- um construtor de Records alinhado a esse schema
- registry de descriptors isolado por teste
- EventLog vazio

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Cada teste recebe seu próprio DescriptorRegistry (sem cache global)
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest


PROJECT_ITEM_COLUMNS = ("Id", "Is_Required", "Data_Type", "Precision", "Knowledge_Category", "Test")


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de configuração padrão (defaults), como `config.defaults.yaml`.

    Returns:
        str: Conteúdo YAML com a política padrão e metadados de exemplo.
    """
    return """\
factory:
  prefer_parameterless_constructor: false
sources:
  project_items:
    format: csv
    columns: [Id, Is_Required, Data_Type]
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de configuração local (override), como `config.local.yaml`.

    Returns:
        str: Conteúdo YAML sobrescrevendo apenas a política da factory.
    """
    return """\
factory:
  prefer_parameterless_constructor: true
"""


# =====================================================
# Registros tabulares (ProjectItem)
# =====================================================

@pytest.fixture
def make_record():
    """
    Fixture factory que monta um Record no schema de ProjectItem.

    Os valores são posicionais, como em uma linha de DataTable; colunas
    não informadas ficam presentes com valor nulo.

    Returns:
        Callable[..., Record]: `make_record(1, True, 2, 2)`.
    """
    from constructor_factory.core.record import Field, Record

    def _make(*values, columns=PROJECT_ITEM_COLUMNS):
        if len(values) > len(columns):
            raise ValueError("more values than columns")
        padded = list(values) + [None] * (len(columns) - len(values))
        return Record.of(Field(name=n, value=v) for n, v in zip(columns, padded))

    return _make


@pytest.fixture
def registry():
    """DescriptorRegistry isolado (sem estado compartilhado entre testes)."""
    from constructor_factory.core.descriptor.registry import DescriptorRegistry

    return DescriptorRegistry()


@pytest.fixture
def project_item_descriptor(registry):
    from tests.fixtures.model.project_item import ProjectItem

    return registry.describe(ProjectItem)


@pytest.fixture
def event_log():
    from constructor_factory.core.events import EventLog

    return EventLog(name="pytest")
