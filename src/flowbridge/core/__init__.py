# src/flowbridge/core/__init__.py
"""
Core do flowbridge.

Este pacote contém a implementação canônica da conversão, independente
de loader de arquivos e de CLI.

O core é projetado para ser:
    - determinístico (exceto pelo relógio injetável de nomeação)
    - testável de forma isolada
    - livre de I/O

Componentes principais:
    - model      → FlowNode, FlowTree
    - config     → merge de escopo, parâmetros globais, retry, settings
    - graph      → níveis de dependência, sub-flows, recursos
    - assembler  → montagem do documento de destino
    - serializer → codificação JSON
    - context    → relógio, settings e event log da conversão

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - O modelo de entrada nunca é mutado
"""
