# src/flowbridge/converter.py
"""
Pipeline completo de conversão de flows.

    loader → FlowTree → extração de sub-flows → (níveis + recursos +
    config) → assembler → serializer

Toda falha aborta a conversão inteira: não há saída parcial nem modo
"pular e continuar". Trata-se de uma ferramenta de migração em lote,
onde uma saída parcial silenciosa é pior que a falha.
"""

from __future__ import annotations

from typing import List, Optional

from flowbridge.core.assembler import TargetDocument, assemble
from flowbridge.core.config.hashing import compute_structure_hash
from flowbridge.core.context import ConversionContext
from flowbridge.core.graph.subflows import extract_subflows
from flowbridge.core.model import FlowNode, FlowTree
from flowbridge.core.serializer import document_to_dict, serialize_documents
from flowbridge.loader import load_flow_bytes


def convert_tree(tree: FlowTree, ctx: ConversionContext) -> List[TargetDocument]:
    """
    Converte um FlowTree já carregado em documentos de definição.

    Args:
        tree (FlowTree): Flow de entrada (não é mutado).
        ctx (ConversionContext): Contexto da conversão.

    Returns:
        List[TargetDocument]: Um documento por flow resultante da extração.
    """

    def _on_promote(node: FlowNode, subtree: FlowTree) -> None:
        ctx.log(
            stage="extract",
            level="INFO",
            message="sub-flow promovido",
            original_name=node.name,
            promoted_name=subtree.name,
            node_count=len(subtree.nodes),
        )

    trees = extract_subflows(tree, namer=ctx.namer(), on_promote=_on_promote)
    if not trees:
        ctx.add_warning(stage="extract", message=f"Flow '{tree.name}' não possui nós")

    documents: List[TargetDocument] = []
    for flow in trees:
        doc = assemble(
            flow,
            ctx.project_name,
            settings=ctx.settings,
            strict_placeholders=ctx.strict_placeholders,
        )
        ctx.log(
            stage="assemble",
            level="INFO",
            message="documento montado",
            flow=flow.name,
            task_count=len(flow.nodes),
            edge_count=len(doc.connects),
            document_hash=compute_structure_hash(document_to_dict(doc)),
        )
        documents.append(doc)
    return documents


def convert(
    project_name: str,
    data: bytes,
    filename: str,
    *,
    ctx: Optional[ConversionContext] = None,
) -> List[str]:
    """
    Converte os bytes de um arquivo `.flow` em definições codificadas.

    Args:
        project_name (str): Projeto de destino.
        data (bytes): Conteúdo bruto do arquivo.
        filename (str): Nome original do arquivo (deve terminar em `.flow`).
        ctx (ConversionContext): Contexto opcional (relógio, settings, log).

    Returns:
        List[str]: Um documento JSON codificado por flow resultante.

    Raises:
        ConversionError: Qualquer falha de carga, grafo, retry ou placeholder.
    """
    if ctx is None:
        ctx = ConversionContext(project_name=project_name)
    elif ctx.project_name != project_name:
        raise ValueError(
            f"Context project '{ctx.project_name}' does not match '{project_name}'"
        )

    ctx.log(
        stage="load",
        level="INFO",
        message="carregando flow",
        filename=filename,
        settings_hash=ctx.settings_hash,
    )
    tree = load_flow_bytes(data, filename)
    ctx.log(stage="load", level="INFO", message="flow carregado", flow=tree.name, node_count=len(tree.nodes))

    return serialize_documents(convert_tree(tree, ctx))
