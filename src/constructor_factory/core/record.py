# src/constructor_factory/core/record.py
"""
Registros tabulares — Record Accessor e Tabular Source.

Este módulo define a representação de uma linha de entrada tabular:

    - Field  → valor nomeado e tipado de uma coluna, podendo ser nulo
    - Record → sequência ordenada de Fields com lookup case-insensitive

E os adapters de fontes tabulares:

    - records_from_rows       → list[dict] (convenção de dataset em memória)
    - records_from_dataframe  → pandas.DataFrame
    - to_records              → despacho a partir de qualquer fonte suportada

Convenções:
    - `None` é o sentinela de nulo
    - Campo *ausente* (coluna inexistente) é distinto de campo presente com None
    - Marcadores de ausência do pandas (NaN, pd.NA, NaT) viram None
    - Escalares numpy são convertidos para escalares Python nativos

Limites explícitos:
    - Não converte tipos além da normalização de nulos/escalares
    - Não lê arquivos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .descriptor.types import name_key
from .exceptions import DuplicateFieldError


@dataclass(frozen=True)
class Field:
    name: str
    value: Any = None
    declared_type: Any = None

    @property
    def key(self) -> str:
        return name_key(self.name)

    @property
    def is_null(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class Record:
    """
    Uma linha de entrada: campos nomeados, ordenados e possivelmente nulos.

    Invariantes:
        - Nomes de campos são únicos sob comparação case-insensitive
        - A ordem dos campos reflete a ordem das colunas de origem
    """

    fields: Tuple[Field, ...]
    _index: Dict[str, Field] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: Dict[str, Field] = {}
        for f in self.fields:
            if f.key in index:
                raise DuplicateFieldError(
                    message=f"Duplicate field name in record: {f.name}",
                    details={"field": f.name, "conflicts_with": index[f.key].name},
                    hint="Nomes de colunas devem ser únicos ignorando maiúsculas/minúsculas.",
                )
            index[f.key] = f
        object.__setattr__(self, "_index", index)

    @classmethod
    def of(cls, fields: Iterable[Field]) -> "Record":
        return cls(fields=tuple(fields))

    @classmethod
    def from_mapping(
        cls,
        row: Mapping[str, Any],
        declared_types: Optional[Mapping[str, Any]] = None,
    ) -> "Record":
        types = declared_types or {}
        return cls.of(
            Field(name=str(k), value=_normalize_value(v), declared_type=types.get(k))
            for k, v in row.items()
        )

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name_key(name) in self._index

    def get(self, name: str) -> Optional[Field]:
        """Retorna o campo de nome `name` (case-insensitive) ou None se ausente."""
        return self._index.get(name_key(name))

    def non_null_keys(self) -> frozenset:
        return frozenset(f.key for f in self.fields if not f.is_null)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: f.value for f in self.fields}


# -----------------------------
# Helpers: normalização
# -----------------------------

def _normalize_value(v: Any) -> Any:
    if v is None:
        return None
    if pd.api.types.is_scalar(v) and pd.isna(v):
        return None
    if isinstance(v, np.generic):
        return v.item()
    return v


# -----------------------------
# Tabular sources
# -----------------------------

def records_from_rows(rows: Sequence[Mapping[str, Any]]) -> List[Record]:
    """Converte `list[dict]` em Records, preservando a ordem das linhas."""
    out: List[Record] = []
    for i, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise TypeError(f"Row {i} must be a mapping, got {type(row).__name__}")
        out.append(Record.from_mapping(row))
    return out


def records_from_dataframe(df: pd.DataFrame) -> List[Record]:
    """Converte um DataFrame em Records; dtypes viram `Field.declared_type`."""
    names = [str(c) for c in df.columns]
    dtypes = [str(t) for t in df.dtypes]
    out: List[Record] = []
    for values in df.itertuples(index=False, name=None):
        out.append(
            Record.of(
                Field(name=n, value=_normalize_value(v), declared_type=t)
                for n, v, t in zip(names, values, dtypes)
            )
        )
    return out


def to_records(source: Any) -> List[Record]:
    """Normaliza qualquer fonte tabular suportada em uma lista de Records.

    Fontes aceitas:
        - pandas.DataFrame
        - Record (linha única)
        - iterável de Records e/ou mappings
    """
    if isinstance(source, pd.DataFrame):
        return records_from_dataframe(source)
    if isinstance(source, Record):
        return [source]
    if isinstance(source, (str, bytes)) or isinstance(source, Mapping):
        raise TypeError(f"Unsupported tabular source: {type(source).__name__}")

    out: List[Record] = []
    for i, item in enumerate(source):
        if isinstance(item, Record):
            out.append(item)
        elif isinstance(item, Mapping):
            out.append(Record.from_mapping(item))
        else:
            raise TypeError(f"Row {i} must be a Record or mapping, got {type(item).__name__}")
    return out
