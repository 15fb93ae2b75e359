# src/flowbridge/core/placeholders.py
"""
Resolução de placeholders `${key}` contra um mapa plano chave → valor.

A substituição é de passo único e não recursiva: o valor inserido no
lugar de um placeholder nunca é reexaminado.

Placeholders sem valor no mapa:
    - modo padrão → permanecem intactos no texto
    - modo estrito → `UnresolvedPlaceholderError`
"""

from __future__ import annotations

import re
from typing import List, Mapping

from flowbridge.core.exceptions import UnresolvedPlaceholderError


PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")


def find_placeholders(text: str) -> List[str]:
    return PLACEHOLDER_RE.findall(text)


def resolve_placeholders(text: str, values: Mapping[str, str], *, strict: bool = False) -> str:
    """
    Substitui cada `${key}` de `text` por `values[key]`.

    Args:
        text (str): Texto de entrada.
        values (Mapping[str, str]): Valores disponíveis.
        strict (bool): Se True, placeholders sem valor geram erro.

    Returns:
        str: Texto com placeholders resolvidos.

    Raises:
        UnresolvedPlaceholderError: Em modo estrito, para a primeira chave ausente.
    """

    def _replace(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key in values:
            return values[key]
        if strict:
            raise UnresolvedPlaceholderError(
                message=f"Placeholder sem valor: '${{{key}}}'",
                details={"key": key, "text": text},
                hint="Declare a chave no config do flow ou desative o modo estrito.",
            )
        return match.group(0)

    return PLACEHOLDER_RE.sub(_replace, text)
