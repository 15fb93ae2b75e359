# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do flowbridge.

Garantem apenas que:
- o pacote pode ser importado
- a API pública de conversão está exposta
- a CLI está registrada

Limites explícitos:
    - Não testar lógica de conversão
    - Não acumular asserts funcionais
"""


def test_smoke():
    """
    Smoke test mínimo do pacote.

    Invariantes:
        - Deve sempre passar enquanto o setup básico do projeto estiver correto
        - Não depende de filesystem ou settings locais
    """
    import flowbridge
    from flowbridge.cli import cli

    assert callable(flowbridge.convert)
    assert callable(flowbridge.convert_tree)
    assert "convert" in cli.commands
