# tests/core/model/test_flow_model.py
"""
Testes do modelo canônico de flows.
"""

import dataclasses

import pytest

from flowbridge.core.model import FlowNode, FlowTree, NodeKind


def test_task_factory_defaults():
    node = FlowNode.task("t", "echo t")

    assert node.kind == NodeKind.TASK
    assert node.command == "echo t"
    assert node.depends_on == []
    assert node.local_config is None
    assert node.nodes == []
    assert not node.is_nested_flow


def test_nested_flow_factory_owns_children():
    child = FlowNode.task("c")
    node = FlowNode.nested_flow("sub", [child], depends_on=["x"])

    assert node.is_nested_flow
    assert node.command is None
    assert node.nodes == [child]
    assert node.node_type == "flow"
    assert node.depends_on == ["x"]


def test_factories_copy_input_lists():
    deps = ["a"]
    node = FlowNode.task("t", depends_on=deps)
    deps.append("b")

    assert node.depends_on == ["a"]


def test_nodes_are_frozen():
    node = FlowNode.task("t")

    with pytest.raises(dataclasses.FrozenInstanceError):
        node.name = "other"


def test_node_kind_values_are_text():
    assert NodeKind.TASK.value == "task"
    assert NodeKind.NESTED_FLOW.value == "nestedFlow"


def test_iter_all_nodes_is_preorder(nested_tree):
    names = [n.name for n in nested_tree.iter_all_nodes()]

    assert names == ["sub1", "s1_a", "s1_b", "prep", "sub2", "s2_a"]


def test_node_names_of_top_level(nested_tree):
    assert nested_tree.node_names() == ["sub1", "prep", "sub2"]


def test_tree_defaults():
    tree = FlowTree(name="t")

    assert tree.scope_config == {}
    assert tree.nodes == []
