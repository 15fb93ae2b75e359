# tests/core/config/test_scope_merge.py
"""
Testes da herança de escopo entre flow pai e sub-flow promovido.

Os testes asseguram que:
- sem config local, o filho adota o escopo do pai por inteiro
- o pai vence em colisão de chave
- o merge é determinístico e idempotente
- nenhum input é mutado

Decisões arquiteturais:
    - A precedência "pai vence" é uma regra de herança deliberada
"""

from flowbridge.core.config.merge import merge_parent_config


def test_parent_wins_on_collision():
    out = merge_parent_config({"a": "1"}, {"a": "2", "b": "3"})

    assert out == {"a": "2", "b": "3"}


def test_child_keys_without_collision_survive():
    out = merge_parent_config({"only_child": "c"}, {"p": "1"})

    assert out == {"only_child": "c", "p": "1"}


def test_missing_child_config_adopts_parent_wholesale():
    parent = {"x": "1"}

    out = merge_parent_config(None, parent)

    assert out == {"x": "1"}
    assert out is not parent


def test_empty_child_config_behaves_like_missing():
    assert merge_parent_config({}, {"x": "1"}) == merge_parent_config(None, {"x": "1"})


def test_merge_is_idempotent():
    child = {"a": "1", "c": "4"}
    parent = {"a": "2", "b": "3"}

    once = merge_parent_config(child, parent)
    twice = merge_parent_config(once, parent)

    assert once == twice


def test_inputs_are_not_mutated():
    child = {"a": "1"}
    parent = {"a": "2"}

    merge_parent_config(child, parent)

    assert child == {"a": "1"}
    assert parent == {"a": "2"}
