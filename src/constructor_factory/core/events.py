# src/constructor_factory/core/events.py
"""
Log estruturado de eventos da materialização.

Este módulo define o `EventLog`, a estrutura utilizada para registrar
eventos estruturados produzidos por factories e pelo batch builder.

Princípios fundamentais:
    - Eventos são dicionários simples e serializáveis
    - Todo evento carrega `source`, `level`, `message` e `timestamp`
    - Dados adicionais entram como chaves extras do evento
    - O log é opcional: sem EventLog, nada é registrado

Invariantes:
    - Eventos são armazenados na ordem em que foram registrados
    - Warnings são agrupados por `source`

Limites explícitos:
    - Não persiste eventos
    - Não formata saída para console
    - Não altera o fluxo de materialização
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class EventLog:
    """
    Coletor de eventos estruturados de materialização.

    Decisões arquiteturais:
        - `list.append` é a única mutação, mantendo o log utilizável por
          factories compartilhadas entre threads
        - `name` identifica o log quando vários coexistem (ex.: por job)
    """
    name: str = "materialization"
    events: List[Dict[str, Any]] = field(default_factory=list)
    warnings: Dict[str, List[str]] = field(default_factory=dict)

    def log(self, *, source: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "log": self.name,
            "source": source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, source: str, message: str) -> None:
        self.warnings.setdefault(source, []).append(message)

    def filter(self, *, source: str | None = None, level: str | None = None) -> List[Dict[str, Any]]:
        return [
            e
            for e in self.events
            if (source is None or e["source"] == source) and (level is None or e["level"] == level)
        ]
