# src/flowbridge/core/config/hashing.py
"""
Hashing canônico de estruturas do flowbridge.

Este módulo gera o hash determinístico usado para identificar:
    - os settings efetivos de uma conversão
    - cada documento de definição produzido pelo assembler

O hash é registrado no event log da conversão, permitindo auditar qual
configuração produziu qual saída.

Política de hashing (v1):
    - JSON canônico: chaves ordenadas, separadores compactos, UTF-8
    - SHA-256 em hexadecimal (64 caracteres)

Invariantes:
    - Estruturas equivalentes produzem o mesmo hash, qualquer que seja a
      ordem de inserção das chaves
    - Apenas mapeamentos são aceitos na raiz
"""

from __future__ import annotations

import hashlib
import json
from typing import Any, Mapping


def canonical_json(payload: Mapping[str, Any]) -> str:
    """Serializa `payload` na forma canônica usada para hashing."""
    if not isinstance(payload, Mapping):
        raise TypeError(
            f"Estrutura para hashing deve ser um mapa, recebido: {type(payload).__name__}"
        )
    return json.dumps(dict(payload), sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def compute_structure_hash(payload: Mapping[str, Any]) -> str:
    """
    Identidade de uma estrutura (settings ou documento codificado).

    Raises:
        TypeError: Se `payload` não for um mapeamento.
    """
    return hashlib.sha256(canonical_json(payload).encode("utf-8")).hexdigest()
