# src/flowbridge/core/config/errors.py
"""
Exceções canônicas da camada de configuração do flowbridge.

Este módulo define duas famílias de exceções:

    - `ConfigError` e derivadas: falhas no carregamento e na resolução
      dos settings do próprio conversor (defaults + override local)
    - `InvalidRetryConfigError`: falha ao interpretar a política de retry
      declarada no escopo de um flow

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Exceções de settings herdam de `ConfigError`
    - Exceções de escopo de flow herdam de `ConversionError`

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de loader de flows, assembler ou CLI
"""

from __future__ import annotations

from dataclasses import dataclass

from flowbridge.core.exceptions import ConversionError


class ConfigError(Exception):
    """
    Exceção base para erros relacionados aos settings do conversor.

    Todas as exceções levantadas durante carregamento, validação estrutural
    e resolução de settings devem herdar desta classe.

    Limites explícitos:
        - Não representa erro de conversão de um flow específico
    """


class SettingsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de override de settings informado
    não existe.

    Decisões arquiteturais:
        - Um override pedido explicitamente é obrigatório
        - Não existe fallback silencioso para os defaults
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de settings
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigSyntaxError(ConfigError):
    """
    Exceção levantada quando o arquivo de settings não é YAML/JSON válido.

    A exceção original do parser fica encadeada em `__cause__`.
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz dos settings
    não é um dicionário (`dict`).

    Invariantes:
        - O loader só opera sobre estruturas do tipo dicionário
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"task": {"worker_group_id": 1}}
        - override: {"task": "SHELL"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito

    Limites explícitos:
        - Não realiza coerção ou conversão de tipos
    """


@dataclass(eq=False)
class InvalidRetryConfigError(ConversionError):
    """
    Exceção levantada quando `retry.backoff` não é um inteiro
    de milissegundos.

    Decisões arquiteturais:
        - A política de retry é aplicada a todas as tasks do flow,
          portanto um valor inválido invalida o flow inteiro
        - Nenhum valor padrão substitui silenciosamente um valor inválido
    """
