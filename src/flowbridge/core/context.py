# src/flowbridge/core/context.py
"""
Contexto de uma conversão de flow.

Este módulo define o `ConversionContext`, a estrutura canônica que
acompanha uma conversão do início ao fim, reunindo:
    - identidade da conversão (conversion_id, created_at)
    - projeto de destino e settings efetivos
    - relógio injetável usado na nomeação de sub-flows promovidos
    - log estruturado de eventos
    - warnings não fatais agrupados por estágio

Princípios fundamentais:
    - Isolamento por conversão (nenhum estado global compartilhado)
    - Eventos explícitos e rastreáveis
    - Estrutura simples e testável

Invariantes:
    - Eventos sempre incluem `conversion_id` e `stage`
    - Warnings são agrupados por `stage`

Limites explícitos:
    - Não converte nada por conta própria
    - Não persiste eventos
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from flowbridge.core.config.hashing import compute_structure_hash
from flowbridge.core.config.settings import default_settings
from flowbridge.core.graph.subflows import SubflowNamer


@dataclass
class ConversionContext:
    """
    Contexto compartilhado de uma conversão.

    Decisões arquiteturais:
        - O relógio é injetado para tornar nomes de sub-flows reproduzíveis
        - Os settings são resolvidos antes da conversão e não mudam durante ela
        - Logs e warnings são estruturados (dicts), não texto livre

    Limites explícitos:
        - Não valida semântica dos settings
        - Não decide políticas de erro (toda falha aborta a conversão)
    """
    project_name: str
    settings: Dict[str, Any] = field(default_factory=default_settings)
    clock: Callable[[], datetime] = datetime.now
    conversion_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Settings
    # -----------------------------
    @property
    def settings_hash(self) -> str:
        return compute_structure_hash(self.settings)

    @property
    def strict_placeholders(self) -> bool:
        return bool(self.settings["placeholders"]["strict"])

    def namer(self) -> SubflowNamer:
        naming = self.settings["naming"]
        return SubflowNamer(
            self.clock,
            template=naming["template"],
            timestamp_format=naming["timestamp_format"],
        )

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "conversion_id": self.conversion_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
        self.log(stage=stage, level="WARNING", message=message)

    def events_for(self, stage: Optional[str] = None) -> List[Dict[str, Any]]:
        if stage is None:
            return list(self.events)
        return [e for e in self.events if e["stage"] == stage]
