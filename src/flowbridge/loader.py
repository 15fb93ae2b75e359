# src/flowbridge/loader.py
"""
Loader de arquivos `.flow` (YAML) para o modelo de flow.

Formato esperado (raiz):

    config:
      retries: 3
      retry.backoff: 60000
    nodes:
      - name: extract
        type: command
        config:
          command: hive -f ${base}/extract.hql
      - name: daily_sub
        type: flow
        dependsOn: [extract]
        config: {...}
        nodes: [...]

Regras de carregamento:
    - o nome do arquivo deve terminar em `.flow`
    - o nome do flow de topo é o nome do arquivo sem extensão
    - nós `type: flow` viram nested flows; qualquer outro tipo vira task
    - o comando de uma task vem de `config.command` e é retirado da
      configuração local
    - valores de config escalares são convertidos para texto
      (booleanos como `true`/`false`)

Qualquer violação gera `LoadError` e aborta a conversão inteira.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml  # PyYAML

from flowbridge.core.exceptions import LoadError
from flowbridge.core.model import FLOW_NODE_TYPE, FlowNode, FlowTree, NodeKind


FLOW_FILE_SUFFIX = ".flow"
COMMAND_KEY = "command"


def flow_name_from_filename(filename: str) -> str:
    if not filename or not filename.endswith(FLOW_FILE_SUFFIX):
        raise LoadError(
            message=f"Arquivo não é um .flow: '{filename}'",
            details={"filename": filename},
            hint="Apenas definições com sufixo .flow são aceitas.",
        )
    return Path(filename).name[: -len(FLOW_FILE_SUFFIX)]


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _coerce_config(raw: Any, *, where: str) -> Optional[Dict[str, str]]:
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise LoadError(
            message=f"config de '{where}' deve ser um mapa",
            details={"where": where, "received": type(raw).__name__},
        )
    config: Dict[str, str] = {}
    for key, value in raw.items():
        if isinstance(value, (dict, list)):
            raise LoadError(
                message=f"Valor de config não escalar em '{where}': '{key}'",
                details={"where": where, "key": str(key)},
                hint="Valores de config devem ser texto ou números.",
            )
        config[str(key)] = _to_text(value)
    return config


def _coerce_depends_on(raw: Any, *, where: str) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [raw]
    if not isinstance(raw, list):
        raise LoadError(
            message=f"dependsOn de '{where}' deve ser uma lista",
            details={"where": where, "received": type(raw).__name__},
        )
    return [_to_text(dep) for dep in raw]


def _parse_nodes(raw: Any, *, where: str) -> List[FlowNode]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise LoadError(
            message=f"nodes de '{where}' deve ser uma lista",
            details={"where": where, "received": type(raw).__name__},
        )
    return [_parse_node(item, parent=where) for item in raw]


def _parse_node(raw: Any, *, parent: str) -> FlowNode:
    if not isinstance(raw, dict):
        raise LoadError(
            message=f"Nó inválido em '{parent}'",
            details={"where": parent, "received": type(raw).__name__},
        )

    name = raw.get("name")
    if name is None or not str(name).strip():
        raise LoadError(
            message=f"Nó sem nome em '{parent}'",
            details={"where": parent},
            hint="Todo nó precisa declarar `name`.",
        )
    name = _to_text(name)
    where = f"{parent}/{name}"

    node_type = _to_text(raw.get("type") or "")
    config = _coerce_config(raw.get("config"), where=where)
    depends_on = _coerce_depends_on(raw.get("dependsOn"), where=where)

    if node_type == FLOW_NODE_TYPE:
        return FlowNode(
            name=name,
            kind=NodeKind.NESTED_FLOW,
            local_config=config,
            depends_on=depends_on,
            nodes=_parse_nodes(raw.get("nodes"), where=where),
            node_type=node_type,
        )

    command = ""
    if config is not None and COMMAND_KEY in config:
        config = dict(config)
        command = config.pop(COMMAND_KEY)

    return FlowNode(
        name=name,
        kind=NodeKind.TASK,
        local_config=config,
        depends_on=depends_on,
        command=command,
        node_type=node_type,
    )


def parse_flow(text: str, filename: str) -> FlowTree:
    """
    Constrói um FlowTree a partir do texto YAML de um arquivo `.flow`.

    Raises:
        LoadError: Se o conteúdo for malformado, vazio ou estruturalmente inválido.
    """
    flow_name = flow_name_from_filename(filename)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise LoadError(
            message=f"Falha ao interpretar '{filename}'",
            details={"filename": filename, "error": str(e)},
        ) from e

    if data is None:
        raise LoadError(
            message=f"Arquivo de flow vazio: '{filename}'",
            details={"filename": filename},
        )
    if not isinstance(data, dict):
        raise LoadError(
            message=f"Raiz do flow deve ser um mapa: '{filename}'",
            details={"filename": filename, "received": type(data).__name__},
        )

    return FlowTree(
        name=flow_name,
        scope_config=_coerce_config(data.get("config"), where=flow_name) or {},
        nodes=_parse_nodes(data.get("nodes"), where=flow_name),
    )


def load_flow_bytes(data: bytes, filename: str) -> FlowTree:
    """Carrega um flow a partir dos bytes brutos de um upload."""
    flow_name_from_filename(filename)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(
            message=f"Arquivo de flow não é UTF-8: '{filename}'",
            details={"filename": filename},
        ) from e
    return parse_flow(text, filename)


def load_flow_file(path: Union[str, Path]) -> FlowTree:
    """
    Carrega um flow do disco.

    Raises:
        LoadError: Se o arquivo não existir, não for `.flow` ou for inválido.
    """
    p = Path(path)
    flow_name_from_filename(p.name)
    if not p.is_file():
        raise LoadError(
            message=f"Arquivo de flow não encontrado: {p}",
            details={"path": str(p)},
        )
    return load_flow_bytes(p.read_bytes(), p.name)
