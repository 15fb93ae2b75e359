"""
Algoritmos de grafo da conversão: níveis de dependência, extração de
sub-flows e extração de recursos em comandos.
"""

from .levels import compute_levels, node_level
from .resources import ResolvedCommand, extract_resource
from .subflows import SubflowNamer, extract_subflows

__all__ = [
    "compute_levels",
    "node_level",
    "ResolvedCommand",
    "extract_resource",
    "SubflowNamer",
    "extract_subflows",
]
