# tests/conftest.py
"""
Fixtures compartilhados para testes do flowbridge.

Este módulo define fixtures reutilizáveis que fornecem:
- relógio fixo para nomes determinísticos de sub-flows
- árvores de flow pequenas e explícitas (sem loader)
- conteúdo `.flow` em YAML para testes de loader e ponta a ponta
- contexto de conversão controlado

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Árvores são construídas diretamente com o modelo, sem I/O
    - O relógio é sempre fixo: nenhum teste depende do horário real

Limites explícitos:
    - Não substituir testes de integração
    - Não conter lógica condicional complexa
"""

from datetime import datetime

import pytest


FIXED_NOW = datetime(2026, 1, 16, 8, 30, 5)
FIXED_STAMP = "20260116083005"


# =====================================================
# Relógio / contexto
# =====================================================

@pytest.fixture
def fixed_clock():
    """
    Relógio que sempre retorna o mesmo instante.

    Usado para tornar reproduzível o nome `az-<timestamp>-<nome>` de
    sub-flows promovidos.
    """
    return lambda: FIXED_NOW


@pytest.fixture
def fixed_stamp() -> str:
    return FIXED_STAMP


@pytest.fixture
def conversion_ctx(fixed_clock):
    """
    Contexto de conversão isolado e previsível para testes.

    O import é feito de forma lazy para melhorar a legibilidade dos erros
    quando o core não está disponível.
    """
    from flowbridge.core.context import ConversionContext

    return ConversionContext(
        project_name="analytics",
        clock=fixed_clock,
        conversion_id="conv-test-001",
        meta={"source": "pytest"},
    )


# =====================================================
# Árvores de flow
# =====================================================

@pytest.fixture
def daily_tree():
    """
    Flow `daily` com três tasks: A → B, (A, B) → C.

    Níveis esperados: A=0, B=1, C=2.
    """
    from flowbridge.core.model import FlowNode, FlowTree

    return FlowTree(
        name="daily",
        scope_config={"retries": "2", "retry.backoff": "300000", "env": "prod"},
        nodes=[
            FlowNode.task("A", "echo a"),
            FlowNode.task("B", "echo b", depends_on=["A"]),
            FlowNode.task("C", "echo c", depends_on=["A", "B"]),
        ],
    )


@pytest.fixture
def nested_tree():
    """
    Flow `parent` com uma task solta e dois sub-flows.

    - `prep`: task de topo
    - `sub1`: nested flow sem config local (herda o escopo inteiro)
    - `sub2`: nested flow com config local que colide com o pai
    """
    from flowbridge.core.model import FlowNode, FlowTree

    return FlowTree(
        name="parent",
        scope_config={"x": "1", "a": "2"},
        nodes=[
            FlowNode.nested_flow(
                "sub1",
                [
                    FlowNode.task("s1_a", "echo s1a"),
                    FlowNode.task("s1_b", "echo s1b", depends_on=["s1_a"]),
                ],
            ),
            FlowNode.task("prep", "echo prep"),
            FlowNode.nested_flow(
                "sub2",
                [FlowNode.task("s2_a", "echo s2a")],
                local_config={"a": "local", "only_child": "yes"},
            ),
        ],
    )


# =====================================================
# Conteúdo `.flow`
# =====================================================

@pytest.fixture
def sample_flow_yaml() -> str:
    """
    Conteúdo `.flow` semelhante ao uso real: escopo com retry, uma task
    com recurso `.hql` parametrizado e um sub-flow aninhado.
    """
    return """\
config:
  project.name: legacy
  retries: 3
  retry.backoff: 60000
  base: /data/sql
  failure.emails: ops@example.com
nodes:
  - name: extract
    type: command
    config:
      command: hive -f ${base}/extract.hql
  - name: load
    type: command
    dependsOn:
      - extract
    config:
      command: java -jar loader.jar --date ${dt}
  - name: report
    type: flow
    config:
      owner: bi
    nodes:
      - name: build
        type: command
        config:
          command: echo build
      - name: publish
        type: command
        dependsOn: [build]
        config:
          command: echo publish
"""
