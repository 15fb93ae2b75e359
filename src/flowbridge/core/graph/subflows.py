# src/flowbridge/core/graph/subflows.py
"""
Extrator de sub-flows aninhados.

Este módulo decompõe uma árvore de flow em árvores de topo independentes:
cada nó do tipo nested flow é promovido a um FlowTree próprio, e os nós
restantes formam um FlowTree adicional com o nome e o escopo originais.

Política de extração (v1):
    - Promoção: nome novo `az-<yyyyMMddHHmmss>-<nome original>`, gerado
      por um `SubflowNamer` com relógio injetável
    - Configuração: `merge_parent_config(local, escopo do pai)`, pai vence
    - Partição: uma única passagem produz duas listas disjuntas
      (promovidos e restantes); a lista original nunca é mutada
    - Recursão: a árvore promovida passa pelo mesmo extrator, usando o
      próprio escopo mesclado como escopo pai dos seus sub-flows

Ordem de saída:
    - sub-flows na ordem em que aparecem no flow
    - os sub-flows de um sub-flow promovido vêm antes dele
    - o flow restante, quando houver nós restantes, vem por último

Invariantes:
    - Todo nó da árvore original aparece em exatamente uma árvore de saída
    - Árvores de saída são valores novos (sem aliasing de listas ou dicts)
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from flowbridge.core.config.merge import merge_parent_config
from flowbridge.core.model import FlowNode, FlowTree


Clock = Callable[[], datetime]

DEFAULT_NAME_TEMPLATE = "az-{timestamp}-{name}"
DEFAULT_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class SubflowNamer:
    """
    Gera o nome de um sub-flow promovido.

    O timestamp vem do relógio injetado (`datetime.now` por padrão), de
    modo que testes possam fixar o nome gerado.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        *,
        template: str = DEFAULT_NAME_TEMPLATE,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ):
        self.clock: Clock = clock or datetime.now
        self.template = template
        self.timestamp_format = timestamp_format

    def __call__(self, original_name: str) -> str:
        timestamp = self.clock().strftime(self.timestamp_format)
        return self.template.format(timestamp=timestamp, name=original_name)


def promote(node: FlowNode, parent: FlowTree, namer: Callable[[str], str]) -> FlowTree:
    """Converte um nó nested flow em um FlowTree independente."""
    return FlowTree(
        name=namer(node.name),
        scope_config=merge_parent_config(node.local_config, parent.scope_config),
        nodes=list(node.nodes),
    )


def partition_nodes(nodes: List[FlowNode]):
    """Separa uma lista de irmãos em (nested flows, demais), preservando a ordem."""
    promoted: List[FlowNode] = []
    remaining: List[FlowNode] = []
    for node in nodes:
        (promoted if node.is_nested_flow else remaining).append(node)
    return promoted, remaining


def extract_subflows(
    tree: FlowTree,
    *,
    namer: Optional[Callable[[str], str]] = None,
    on_promote: Optional[Callable[[FlowNode, FlowTree], None]] = None,
) -> List[FlowTree]:
    """
    Decompõe `tree` em uma lista ordenada de FlowTrees independentes.

    Args:
        tree (FlowTree): Árvore de entrada (não é mutada).
        namer (Callable[[str], str]): Gerador de nomes para promoções.
        on_promote (Callable): Callback opcional chamado a cada promoção
            com o nó original e a árvore gerada (usado para event log).

    Returns:
        List[FlowTree]: Sub-flows promovidos e, por último, o flow restante
        quando houver nós restantes.
    """
    namer = namer or SubflowNamer()
    promoted, remaining = partition_nodes(tree.nodes)

    out: List[FlowTree] = []
    for node in promoted:
        subtree = promote(node, tree, namer)
        if on_promote is not None:
            on_promote(node, subtree)

        nested = extract_subflows(subtree, namer=namer, on_promote=on_promote)
        out.extend(nested)
        # sub-flow vazio ainda gera documento
        if not subtree.nodes:
            out.append(subtree)

    if remaining:
        out.append(FlowTree(
            name=tree.name,
            scope_config=dict(tree.scope_config),
            nodes=list(remaining),
        ))

    return out
