"""
flowbridge: Canonical Exceptions (v1)

Este módulo define as exceções tipadas da conversão de flows.

Objetivo:
- Permitir que loader, resolvers e assembler levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para ErrorPayload (CLI, relatórios)
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Toda falha de conversão é fatal: não existe saída parcial.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro de conversão.

    Campos:
    - type: código estável do erro (nome da classe da exceção)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ConversionError(Exception):
    """Base class para exceções de conversão.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Não embedar stack trace em payloads de erro
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.__class__.__name__,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Entrada
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class LoadError(ConversionError):
    """Arquivo de flow ausente, ilegível, malformado ou vazio."""


# ---------------------------------------------------------------------------
# Grafo de dependências
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UndefinedDependencyError(ConversionError):
    """Um `depends_on` referencia um nome sem irmão correspondente."""


@dataclass(eq=False)
class CyclicDependencyError(ConversionError):
    """O grafo `depends_on` de um escopo contém ciclo."""


@dataclass(eq=False)
class DuplicateNodeError(ConversionError):
    """Dois nós irmãos compartilham o mesmo nome."""


# ---------------------------------------------------------------------------
# Resolução de texto
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnresolvedPlaceholderError(ConversionError):
    """Placeholder `${key}` sem valor no escopo (apenas em modo estrito)."""
