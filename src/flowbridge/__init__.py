# src/flowbridge/__init__.py
"""
flowbridge: conversor de definições de flow para definições de processo.

Este pacote raiz define o namespace público do flowbridge, uma ferramenta
de migração em lote que traduz definições de flow no estilo Azkaban
(arquivos `.flow` com grafo de dependências, configuração com escopo e
sub-flows aninhados) para os documentos de definição de processo
consumidos por um scheduler de workflows.

Princípios centrais:
    - A conversão é uma transformação pura, síncrona e em memória
    - Grafos inválidos (dependências inexistentes, ciclos) falham explicitamente
    - Toda falha aborta a conversão inteira, sem saída parcial
    - O único não-determinismo (timestamp em nomes) é injetável

Arquitetura em alto nível:
    - core.model      → nós e árvores de flow
    - core.config     → herança de escopo, retry, settings e hashing
    - core.graph      → níveis, extração de sub-flows e de recursos
    - core.assembler  → documento de definição por flow
    - core.serializer → formato de transporte
    - loader          → arquivos `.flow` (YAML)
    - converter       → pipeline completo
    - cli             → linha de comando

Limites explícitos:
    - Não faz upload, transporte ou persistência das definições
    - Não executa os processos gerados
"""
# src/flowbridge/__init__.py
from .converter import convert, convert_tree

__all__ = ["convert", "convert_tree"]
