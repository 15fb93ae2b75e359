# src/flowbridge/core/model.py
"""
Modelo canônico de flows do flowbridge.

Este módulo define as estruturas que representam uma definição de flow
já carregada em memória: uma árvore de nós nomeados, cada um com
configuração local, dependências declaradas entre irmãos e, no caso de
tasks, um comando shell.

Componentes principais:
    - NodeKind → enum de tipos de nó (task, nestedFlow)
    - FlowNode → passo de um grafo de dependências
    - FlowTree → unidade de topo produzida pelo loader ou pela extração

Princípios fundamentais:
    - Estruturas são imutáveis (frozen dataclasses)
    - Valores calculados durante a conversão (níveis, comandos resolvidos)
      nunca são gravados de volta no modelo
    - Nenhuma lógica de conversão vive neste módulo

Invariantes:
    - Nomes são únicos dentro do escopo imediato de irmãos
    - `depends_on` referencia apenas irmãos do mesmo escopo
    - O grafo `depends_on` é acíclico
    (a validação acontece no resolver de níveis, não na construção)

Limites explícitos:
    - Não carrega arquivos
    - Não valida o grafo
    - Não resolve configuração
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


FLOW_NODE_TYPE = "flow"


class NodeKind(str, Enum):
    """
    Tipos de nó de um flow.

    Os valores são strings para facilitar serialização e inspeção.

    Tipos definidos:
        - TASK: passo executável, carrega um comando shell
        - NESTED_FLOW: sub-flow aninhado, carrega uma lista ordenada de filhos
    """
    TASK = "task"
    NESTED_FLOW = "nestedFlow"


@dataclass(frozen=True)
class FlowNode:
    """
    Um passo em um grafo de dependências.

    Campos:
        - name: identificador único no escopo de irmãos
        - kind: TASK ou NESTED_FLOW
        - local_config: configuração do próprio nó (sem herança);
          `None` indica ausência de configuração local
        - depends_on: nomes de irmãos dos quais o nó depende, em ordem
        - command: comando shell (apenas tasks)
        - nodes: filhos ordenados (apenas nested flows)
        - node_type: tipo declarado na origem ("command", "flow", "noop", ...)
    """
    name: str
    kind: NodeKind = NodeKind.TASK
    local_config: Optional[Dict[str, str]] = None
    depends_on: List[str] = field(default_factory=list)
    command: Optional[str] = None
    nodes: List["FlowNode"] = field(default_factory=list)
    node_type: str = "command"

    @property
    def is_nested_flow(self) -> bool:
        return self.kind == NodeKind.NESTED_FLOW

    @classmethod
    def task(
        cls,
        name: str,
        command: str = "",
        *,
        depends_on: Optional[List[str]] = None,
        local_config: Optional[Dict[str, str]] = None,
        node_type: str = "command",
    ) -> "FlowNode":
        return cls(
            name=name,
            kind=NodeKind.TASK,
            local_config=local_config,
            depends_on=list(depends_on or []),
            command=command,
            node_type=node_type,
        )

    @classmethod
    def nested_flow(
        cls,
        name: str,
        nodes: Optional[List["FlowNode"]] = None,
        *,
        depends_on: Optional[List[str]] = None,
        local_config: Optional[Dict[str, str]] = None,
    ) -> "FlowNode":
        return cls(
            name=name,
            kind=NodeKind.NESTED_FLOW,
            local_config=local_config,
            depends_on=list(depends_on or []),
            command=None,
            nodes=list(nodes or []),
            node_type=FLOW_NODE_TYPE,
        )


@dataclass(frozen=True)
class FlowTree:
    """
    Unidade de topo de uma conversão.

    Produzida uma única vez pelo loader a partir da entrada bruta, ou
    criada como valor novo e independente pelo extrator de sub-flows.

    Invariantes:
        - `scope_config` é entrada imutável: merges sempre produzem
          um novo dicionário
        - `nodes` é a lista de irmãos de topo, na ordem declarada
    """
    name: str
    scope_config: Dict[str, str] = field(default_factory=dict)
    nodes: List[FlowNode] = field(default_factory=list)

    def node_names(self) -> List[str]:
        return [n.name for n in self.nodes]

    def iter_all_nodes(self):
        """Percorre todos os nós da árvore em pré-ordem (incluindo filhos de sub-flows)."""
        stack = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.nodes))
