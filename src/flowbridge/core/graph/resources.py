# src/flowbridge/core/graph/resources.py
"""
Extração de referências a arquivos de recurso em comandos de task.

Um recurso é o primeiro trecho sem espaços do comando que termina em
`.jar` ou `.hql`. Placeholders `${key}` dentro desse trecho são resolvidos
contra o escopo do flow, e o valor resolvido passa a ser a referência.

Atenção à assimetria: apenas o primeiro match é usado para calcular o
valor resolvido, mas **todos** os trechos que casam com o padrão são
substituídos por esse valor no comando.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from flowbridge.core.placeholders import resolve_placeholders


RESOURCE_RE = re.compile(r"\S*\.(jar|hql)")


@dataclass(frozen=True)
class ResolvedCommand:
    command: str
    resource: str = ""


def extract_resource(
    command: str,
    scope_config: Mapping[str, str],
    *,
    strict: bool = False,
) -> ResolvedCommand:
    """
    Resolve o recurso referenciado por um comando.

    Args:
        command (str): Comando shell da task.
        scope_config (Mapping[str, str]): Escopo do flow dono da task.
        strict (bool): Repassado ao resolvedor de placeholders.

    Returns:
        ResolvedCommand: Comando resolvido e referência de recurso
        (vazia quando não há match; o comando volta inalterado).
    """
    match = RESOURCE_RE.search(command)
    if match is None:
        return ResolvedCommand(command=command, resource="")

    resource = resolve_placeholders(match.group(0), scope_config, strict=strict)
    # substituição literal (sem interpretar escapes no valor)
    resolved = RESOURCE_RE.sub(lambda _m: resource, command)
    return ResolvedCommand(command=resolved, resource=resource)
