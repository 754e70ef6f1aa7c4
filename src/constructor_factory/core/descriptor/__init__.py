"""Constructor Factory — Type Descriptors (core).

Componentes canônicos da capacidade de *Type Introspection*:
 - tipos imutáveis de descrição (candidatos, parâmetros, propriedades)
 - introspecção via reflexão nativa (`describe_type`, `@constructor`)
 - registry com cache idempotente por tipo
"""

from .types import (  # noqa: F401
    ConstructionOutcome,
    ConstructorCandidate,
    EnumMapping,
    Parameter,
    Property,
    TypeDescriptor,
    name_key,
)
from .introspection import constructor, describe_type  # noqa: F401
from .registry import DescriptorRegistry, DuplicateDescriptorError, default_registry  # noqa: F401
