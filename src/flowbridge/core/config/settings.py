# src/flowbridge/core/config/settings.py
"""
Settings canônicos do conversor flowbridge.

Os settings reúnem as constantes de engine que não derivam do modelo de
flow (worker group, prioridade, tipo de task, tenant, template de nome
de sub-flows promovidos, modo estrito de placeholders).

A configuração efetiva é resolvida a partir de:
    - `DEFAULT_SETTINGS` (embutido, sempre presente)
    - um arquivo local de overrides (opcional, YAML ou JSON)

Princípios fundamentais:
    - Configuração é declarativa e explícita
    - Nenhuma heurística implícita é aplicada
    - Erros estruturais são tratados como falhas fatais
    - A mesma entrada sempre produz a mesma configuração final

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - Overrides nunca mutam os defaults

Limites explícitos:
    - Não carrega flows
    - Não persiste configuração ou hash
"""

import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml  # PyYAML

from .errors import (
    InvalidConfigRootTypeError,
    InvalidConfigSyntaxError,
    SettingsNotFoundError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


DEFAULT_SETTINGS: Dict[str, Any] = {
    "definition": {
        "tenant_id": -1,
        "timeout": 0,
    },
    "task": {
        "worker_group_id": 1,
        "run_flag": "NORMAL",
        "type": "SHELL",
        "priority": "MEDIUM",
    },
    "naming": {
        "template": "az-{timestamp}-{name}",
        "timestamp_format": "%Y%m%d%H%M%S",
    },
    "placeholders": {
        "strict": False,
    },
}


def default_settings() -> Dict[str, Any]:
    """Retorna uma cópia independente dos defaults."""
    return deepcopy(DEFAULT_SETTINGS)


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de settings e valida sua estrutura básica.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Decisões arquiteturais:
        - O conteúdo raiz deve ser um dicionário (`dict`)
        - Arquivos vazios são interpretados como dicionários vazios

    Raises:
        SettingsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigSyntaxError: Se o conteúdo não for YAML/JSON válido.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise SettingsNotFoundError(f"Arquivo de settings não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidConfigSyntaxError(f"YAML inválido em {path}: {e}") from e

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidConfigSyntaxError(f"JSON inválido em {path}: {e}") from e

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Settings root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_settings(local_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Resolve os settings efetivos do conversor.

    Política de resolução:
        - Os defaults embutidos são sempre a base
        - Quando informado, o arquivo local tem prioridade sobre os defaults
        - A resolução utiliza `deep_merge`

    Args:
        local_path (Optional[str]): Caminho opcional para overrides locais.

    Returns:
        Dict[str, Any]: Settings efetivos.

    Raises:
        SettingsNotFoundError: Se o arquivo local informado não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigSyntaxError: Se o conteúdo não for YAML/JSON válido.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = default_settings()

    if local_path is not None:
        local = _load_file(Path(local_path))
        effective = deep_merge(effective, local)

    return effective
