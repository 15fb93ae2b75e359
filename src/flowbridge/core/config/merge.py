# src/flowbridge/core/config/merge.py
"""
Utilitários canônicos de merge de configuração.

Este módulo implementa as duas políticas de merge usadas pelo flowbridge:

    1. `merge_parent_config`: herança de escopo durante a promoção de
       um sub-flow: mapas planos de string → string, onde o **pai vence**
       em colisão de chave.
    2. `deep_merge`: resolução dos settings do conversor a partir dos
       defaults e de um override local explícito.

Política de merge de escopo (v1):
    - sem configuração local → o filho adota o escopo do pai por inteiro
    - com configuração local → entradas do pai sobrescrevem as do filho

Política de deep-merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Princípios fundamentais:
    - Os merges são determinísticos e puramente funcionais
    - Nenhum input é mutado durante o processo
    - A precedência é explícita e nomeada, nunca implícita na ordem
      de iteração de uma primitiva de coleção

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não valida semântica de domínio
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigTypeConflictError


def merge_parent_config(
    child: Optional[Mapping[str, str]],
    parent: Mapping[str, str],
) -> Dict[str, str]:
    """
    Mescla o escopo do flow pai na configuração local de um sub-flow promovido.

    O pai vence em colisão de chave: uma entrada do filho só sobrevive
    quando o pai não declara a mesma chave. Esta precedência é uma regra
    de herança deliberada e deve ser preservada exatamente.

    Exemplo:
        child  = {"a": "1"}
        parent = {"a": "2", "b": "3"}
        →        {"a": "2", "b": "3"}

    Invariantes:
        - O retorno é sempre um novo dicionário
        - Nenhum dos inputs é mutado
        - merge(merge(c, p), p) == merge(c, p)

    Args:
        child (Optional[Mapping[str, str]]): Configuração local do nó
            (`None` quando o nó não declara configuração).
        parent (Mapping[str, str]): `scope_config` do flow pai.

    Returns:
        Dict[str, str]: Configuração efetiva do sub-flow promovido.
    """
    if child is None:
        return dict(parent)

    merged: Dict[str, str] = dict(child)
    # pai aplicado por último: vence em colisão
    for key, value in parent.items():
        merged[key] = value
    return merged


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de settings.

    Esta função combina os settings base com um conjunto de overrides
    explícitos, produzindo uma nova estrutura resultante sem mutar
    nenhum dos inputs.

    Política de merge (v1):
        - dict + dict → merge recursivo por chave
        - list        → sobrescrita total
        - escalar     → sobrescrita direta pelo override
        - conflito de tipos → erro estrutural explícito

    Invariantes:
        - A estrutura retornada é sempre um novo dicionário
        - Chaves não presentes no override são preservadas da base
        - O mesmo par (base, override) sempre produz o mesmo resultado

    Args:
        base (Dict[str, Any]): Settings base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Novos settings resultantes do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list -> sobrescrita total
        if isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}"
            )

        result[key] = deepcopy(override_value)

    return result
