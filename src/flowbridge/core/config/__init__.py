# src/flowbridge/core/config/__init__.py

"""
Camada de configuração do flowbridge.

Este pacote reúne duas responsabilidades distintas:

    - escopo de flow: herança de configuração entre flow pai e sub-flow
      promovido, parâmetros globais e política de retry
    - settings do conversor: constantes de engine resolvidas a partir de
      defaults embutidos e de um override local opcional, com hash
      canônico para rastreabilidade

Princípios fundamentais:
    - Nenhuma heurística implícita durante merge
    - Overrides são sempre explícitos
    - A mesma entrada sempre produz a mesma configuração final
"""

from .merge import deep_merge, merge_parent_config
from .resolver import RetryPolicy, resolve_global_params, resolve_retry_policy
from .settings import DEFAULT_SETTINGS, load_settings

__all__ = [
    "deep_merge",
    "merge_parent_config",
    "RetryPolicy",
    "resolve_global_params",
    "resolve_retry_policy",
    "DEFAULT_SETTINGS",
    "load_settings",
]
