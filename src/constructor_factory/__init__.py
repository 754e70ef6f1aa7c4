# src/constructor_factory/__init__.py
"""
Constructor Factory — materialização de entidades a partir de dados tabulares.

Dado um registro (campos nomeados e possivelmente nulos) e um tipo alvo,
o pacote escolhe o construtor que consome o máximo de dados diretamente
e aplica os campos restantes como atribuições de propriedade.

Arquitetura em alto nível:
    - core.descriptor   → TypeDescriptor, introspecção e registry
    - core.record       → Field, Record e fontes tabulares (pandas, list[dict])
    - core.resolver     → resolve_constructor
    - core.materializer → materialize_one
    - core.batch        → materialize_all
    - core.factory      → ConstructorFactory / EntityFactory
    - core.config       → load_config + FactoryPolicy
"""

from .core.batch import materialize_all
from .core.config import FactoryPolicy, load_config, policy_from_config
from .core.descriptor import (
    ConstructorCandidate,
    DescriptorRegistry,
    Parameter,
    Property,
    TypeDescriptor,
    constructor,
    describe_type,
)
from .core.events import EventLog
from .core.exceptions import (
    ConversionError,
    DescriptorError,
    DuplicateFieldError,
    MaterializationException,
    NoMatchingConstructor,
    UnmatchedConstructorParameter,
    UnmatchedProperty,
)
from .core.factory import ConstructorFactory, EntityFactory
from .core.materializer import materialize_one
from .core.record import Field, Record, records_from_dataframe, records_from_rows
from .core.resolver import resolve_constructor

__all__ = [
    "ConstructorCandidate",
    "ConstructorFactory",
    "ConversionError",
    "DescriptorError",
    "DescriptorRegistry",
    "DuplicateFieldError",
    "EntityFactory",
    "EventLog",
    "FactoryPolicy",
    "Field",
    "MaterializationException",
    "NoMatchingConstructor",
    "Parameter",
    "Property",
    "Record",
    "TypeDescriptor",
    "UnmatchedConstructorParameter",
    "UnmatchedProperty",
    "constructor",
    "describe_type",
    "load_config",
    "materialize_all",
    "materialize_one",
    "policy_from_config",
    "records_from_dataframe",
    "records_from_rows",
    "resolve_constructor",
]
