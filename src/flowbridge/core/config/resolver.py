# src/flowbridge/core/config/resolver.py
"""
Resolução do escopo de configuração de um flow.

A partir do `scope_config` de um FlowTree este módulo produz:
    - os parâmetros globais publicados no documento de saída
    - a política de retry aplicada uniformemente a todas as tasks do flow

Chaves reservadas (nunca publicadas como parâmetro global):
    - project.name
    - retry.backoff
    - retries

Limites explícitos:
    - Não resolve placeholders nos valores publicados
    - Não valida `retries` além de presença/default
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .errors import InvalidRetryConfigError


RESERVED_KEYS = frozenset({"project.name", "retry.backoff", "retries"})

RETRIES_KEY = "retries"
RETRY_BACKOFF_KEY = "retry.backoff"
DEFAULT_RETRIES = "0"
DEFAULT_RETRY_BACKOFF = "0"

_MS_PER_MINUTE = 60 * 1000
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class RetryPolicy:
    """Política de retry de um flow (valores opacos em texto, como no destino)."""
    max_retry_times: str
    retry_interval: str


def resolve_global_params(scope_config: Mapping[str, str]) -> List[Dict[str, Any]]:
    """
    Converte o escopo de um flow na lista de parâmetros globais.

    Cada chave não reservada vira um parâmetro de entrada textual, com o
    valor bruto (sem substituição de placeholders), na ordem de declaração.
    """
    return [
        {
            "prop": key,
            "direct": "IN",
            "type": "VARCHAR",
            "value": value,
        }
        for key, value in scope_config.items()
        if key not in RESERVED_KEYS
    ]


def bucketize_retry_interval(backoff: str) -> str:
    """
    Converte `retry.backoff` (milissegundos) no intervalo de retry do destino.

    Política (v1):
        - valor em branco → devolvido sem processamento
        - 0 ms            → "0" (sem backoff configurado)
        - minutos <= 1    → "1"
        - minutos <= 10   → "10"
        - demais          → "30"

    Minutos são inteiros (divisão inteira por 60000). Sinal explícito é
    aceito; valores negativos caem na faixa "1".

    Raises:
        InvalidRetryConfigError: Se o valor não for um inteiro.
    """
    if not backoff or not backoff.strip():
        return backoff

    raw = backoff.strip()
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidRetryConfigError(
            message=f"retry.backoff inválido: '{backoff}'",
            details={"key": RETRY_BACKOFF_KEY, "value": backoff},
            hint="Declare retry.backoff como inteiro de milissegundos (ex.: 60000).",
        )

    interval_ms = int(raw)
    if interval_ms == 0:
        return DEFAULT_RETRY_BACKOFF

    minutes = interval_ms // _MS_PER_MINUTE
    if minutes <= 1:
        return "1"
    if minutes <= 10:
        return "10"
    return "30"


def resolve_retry_policy(scope_config: Mapping[str, str]) -> RetryPolicy:
    """
    Deriva a política de retry de um flow.

    Args:
        scope_config (Mapping[str, str]): Escopo do flow.

    Returns:
        RetryPolicy: Quantidade de retries (opaca) e intervalo bucketizado.

    Raises:
        InvalidRetryConfigError: Se `retry.backoff` não for numérico.
    """
    retries = scope_config.get(RETRIES_KEY, DEFAULT_RETRIES)
    backoff = scope_config.get(RETRY_BACKOFF_KEY, DEFAULT_RETRY_BACKOFF)
    return RetryPolicy(
        max_retry_times=retries,
        retry_interval=bucketize_retry_interval(backoff),
    )
