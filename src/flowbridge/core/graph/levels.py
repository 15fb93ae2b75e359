# src/flowbridge/core/graph/levels.py
"""
Resolvedor de níveis de dependência de um escopo de irmãos.

O nível de um nó é a distância da maior cadeia de dependências que
termina nele:

    level(n) = 0                                  se n.depends_on é vazio
    level(n) = 1 + max(level(d) for d in n.depends_on)

Os níveis são usados apenas para ordenar listas de dependências no
layout visual, nunca para decidir ordem de execução.

Princípios fundamentais:
    - O escopo de irmãos deve formar um DAG válido
    - Nomes são resolvidos apenas dentro do escopo (nunca entre escopos)
    - Nenhuma decisão silenciosa: grafos inválidos falham explicitamente

Decisões arquiteturais:
    - Cálculo iterativo (Kahn com relaxamento de maior caminho), de modo
      que cadeias profundas não dependem do limite de recursão
    - Nós que sobram sem processamento indicam ciclo

Invariantes:
    - Todo nó do escopo recebe exatamente um nível
    - A mesma entrada sempre produz os mesmos níveis

Limites explícitos:
    - Não ordena execução
    - Não desce em sub-flows aninhados (cada escopo é resolvido à parte)
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from flowbridge.core.exceptions import (
    CyclicDependencyError,
    DuplicateNodeError,
    UndefinedDependencyError,
)
from flowbridge.core.model import FlowNode, FlowTree


def _index_by_name(nodes: Iterable[FlowNode]) -> Dict[str, FlowNode]:
    by_name: Dict[str, FlowNode] = {}
    for node in nodes:
        if node.name in by_name:
            raise DuplicateNodeError(
                message=f"Nome de nó duplicado no escopo: '{node.name}'",
                details={"node": node.name},
                hint="Renomeie um dos nós irmãos.",
            )
        by_name[node.name] = node
    return by_name


def compute_levels(nodes: Iterable[FlowNode]) -> Dict[str, int]:
    """
    Calcula o nível de dependência de cada nó de um escopo de irmãos.

    Args:
        nodes (Iterable[FlowNode]): Irmãos de um mesmo escopo.

    Returns:
        Dict[str, int]: Nível por nome de nó, na ordem declarada.

    Raises:
        DuplicateNodeError: Se dois irmãos compartilharem o nome.
        UndefinedDependencyError: Se um `depends_on` não tiver irmão correspondente.
        CyclicDependencyError: Se o grafo de dependências contiver ciclo.
    """
    by_name = _index_by_name(nodes)

    for name, node in by_name.items():
        for dep in node.depends_on:
            if dep not in by_name:
                raise UndefinedDependencyError(
                    message=f"Nó '{name}' depende de nó inexistente '{dep}'",
                    details={"node": name, "dependency": dep},
                    hint="Dependências só podem referenciar irmãos do mesmo flow.",
                )

    # uma aresta por declaração (duplicatas em depends_on contam separadamente)
    pending: Dict[str, int] = {name: len(node.depends_on) for name, node in by_name.items()}
    dependents: Dict[str, List[str]] = {name: [] for name in by_name}
    for name, node in by_name.items():
        for dep in node.depends_on:
            dependents[dep].append(name)

    levels: Dict[str, int] = {name: 0 for name in by_name}
    ready: List[str] = [name for name, count in pending.items() if count == 0]
    processed = 0

    while ready:
        current = ready.pop()
        processed += 1
        for child in dependents[current]:
            levels[child] = max(levels[child], levels[current] + 1)
            pending[child] -= 1
            if pending[child] == 0:
                ready.append(child)

    if processed != len(by_name):
        stuck = sorted(name for name, count in pending.items() if count > 0)
        raise CyclicDependencyError(
            message=f"Ciclo detectado no grafo de dependências: {stuck}",
            details={"nodes": stuck},
            hint="Remova a dependência circular entre os nós listados.",
        )

    return levels


def node_level(tree: FlowTree, node_name: str) -> int:
    """
    Retorna o nível de um nó de topo de `tree`.

    Raises:
        KeyError: Se `node_name` não for um nó de topo da árvore.
    """
    levels = compute_levels(tree.nodes)
    if node_name not in levels:
        raise KeyError(node_name)
    return levels[node_name]
