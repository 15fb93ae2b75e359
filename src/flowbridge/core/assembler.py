# src/flowbridge/core/assembler.py
"""
Montagem do documento de definição de processo de um flow.

Este módulo combina os resolvedores de nível, recurso e configuração em
um `TargetDocument` por FlowTree, com três payloads:

    - definição: tenant, timeout, parâmetros globais e tasks
    - layout: uma entrada por nó com suas dependências ordenadas por
      nível decrescente e coordenadas zeradas
    - conexões: uma aresta por par (dependência, dependente) declarado

Decisões arquiteturais:
    - A árvore recebida já passou pela extração: todos os nós são tasks
    - A política de retry é do flow e se repete em todas as tasks
    - Constantes de engine (worker group, prioridade, tipo, run flag)
      vêm dos settings, não do modelo
    - O posicionamento real no canvas é responsabilidade do destino

Limites explícitos:
    - Não codifica JSON (ver serializer)
    - Não extrai sub-flows
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from flowbridge.core.config.resolver import (
    RetryPolicy,
    resolve_global_params,
    resolve_retry_policy,
)
from flowbridge.core.config.settings import DEFAULT_SETTINGS
from flowbridge.core.graph.levels import compute_levels
from flowbridge.core.graph.resources import extract_resource
from flowbridge.core.model import FlowNode, FlowTree


@dataclass(frozen=True)
class TargetDocument:
    """Documento de definição de processo, antes da codificação."""
    project_name: str
    name: str
    definition: Dict[str, Any]
    locations: Dict[str, Dict[str, Any]]
    connects: List[Dict[str, str]]
    description: str = ""


def build_task(
    node: FlowNode,
    scope_config: Mapping[str, str],
    retry: RetryPolicy,
    task_settings: Mapping[str, Any],
    *,
    strict_placeholders: bool = False,
) -> Dict[str, Any]:
    if node.is_nested_flow:
        raise ValueError(f"Nested flow '{node.name}' must be extracted before assembly")

    resolved = extract_resource(node.command or "", scope_config, strict=strict_placeholders)
    return {
        "workerGroupId": task_settings["worker_group_id"],
        "description": "",
        "runFlag": task_settings["run_flag"],
        "type": task_settings["type"],
        "params": {
            "rawScript": resolved.command,
            "localParams": [],
            "resourceList": [{"res": resolved.resource}],
        },
        "timeout": {"enable": False, "strategy": ""},
        "maxRetryTimes": retry.max_retry_times,
        "taskInstancePriority": task_settings["priority"],
        "name": node.name,
        "dependence": {},
        "retryInterval": retry.retry_interval,
        "preTasks": list(node.depends_on),
        "id": node.name,
    }


def sort_by_level_desc(depends_on: List[str], levels: Mapping[str, int]) -> List[str]:
    """Ordena dependências por nível decrescente; empates mantêm a ordem declarada."""
    return sorted(depends_on, key=lambda name: -levels[name])


def build_locations(nodes: List[FlowNode], levels: Mapping[str, int]) -> Dict[str, Dict[str, Any]]:
    return {
        node.name: {
            "name": node.name,
            "targetarr": ",".join(sort_by_level_desc(node.depends_on, levels)),
            "x": 0,
            "y": 0,
        }
        for node in nodes
    }


def build_connects(nodes: List[FlowNode]) -> List[Dict[str, str]]:
    return [
        {"endPointSourceId": dep, "endPointTargetId": node.name}
        for node in nodes
        for dep in node.depends_on
    ]


def assemble(
    tree: FlowTree,
    project_name: str,
    *,
    settings: Optional[Mapping[str, Any]] = None,
    strict_placeholders: Optional[bool] = None,
) -> TargetDocument:
    """
    Monta o documento de definição de processo de um FlowTree.

    Args:
        tree (FlowTree): Flow já extraído (somente tasks).
        project_name (str): Projeto de destino.
        settings (Mapping[str, Any]): Settings efetivos (defaults quando omitido).
        strict_placeholders (bool): Sobrescreve `placeholders.strict` dos settings.

    Returns:
        TargetDocument: Documento pronto para serialização.

    Raises:
        UndefinedDependencyError, CyclicDependencyError, DuplicateNodeError:
            Se o grafo do flow for inválido.
        InvalidRetryConfigError: Se `retry.backoff` não for numérico.
        UnresolvedPlaceholderError: Em modo estrito.
    """
    settings = settings or DEFAULT_SETTINGS
    if strict_placeholders is None:
        strict_placeholders = bool(settings["placeholders"]["strict"])

    levels = compute_levels(tree.nodes)
    retry = resolve_retry_policy(tree.scope_config)

    definition = {
        "tenantId": settings["definition"]["tenant_id"],
        "timeout": settings["definition"]["timeout"],
        "globalParams": resolve_global_params(tree.scope_config),
        "tasks": [
            build_task(
                node,
                tree.scope_config,
                retry,
                settings["task"],
                strict_placeholders=strict_placeholders,
            )
            for node in tree.nodes
        ],
    }

    return TargetDocument(
        project_name=project_name,
        name=tree.name,
        definition=definition,
        locations=build_locations(tree.nodes, levels),
        connects=build_connects(tree.nodes),
    )
