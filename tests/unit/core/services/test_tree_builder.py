from __future__ import annotations

"""
Unit tests for the Company Hierarchy Builder.

Verifies:
1. Parent/child partitioning and mapping-order preservation.
2. Bottom-up cost roll-up at arbitrary depth.
3. Orphan handling and cycle detection.
"""

import json
from typing import Iterator, List

import pytest

from companytree.core.services.aggregator import index_companies
from companytree.core.services.tree_builder import build_tree, render_tree_json, total_cost, tree_to_dicts
from companytree.domain.company_models import TreeNode
from companytree.domain.errors import TreeCycleError


def _walk(nodes: List[TreeNode]) -> Iterator[TreeNode]:
    """Pre-order traversal with an explicit stack."""
    stack = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def test_single_child_scenario() -> None:
    companies = [{"id": "1", "parentId": "0"}, {"id": "2", "parentId": "1"}]
    travels = [{"companyId": "2", "price": 100}]

    tree = build_tree(index_companies(companies, travels), "0")

    assert len(tree) == 1
    assert tree[0].id == "1"
    assert tree[0].cost == 100
    assert len(tree[0].children) == 1
    assert tree[0].children[0].id == "2"
    assert tree[0].children[0].cost == 100


def test_empty_input_builds_empty_tree() -> None:
    assert build_tree(index_companies([], []), "0") == []
    assert build_tree({}) == []


def test_rollup_sums_whole_subtree(companies_payload, travels_payload) -> None:
    indexed = index_companies(companies_payload, travels_payload)
    tree = build_tree(indexed)

    root = tree[0]
    stamm, blanda = root.children
    price = stamm.children[0]

    assert price.cost == 75
    assert stamm.cost == 250 + 75
    assert blanda.cost == 10
    assert root.cost == 100 + 325 + 10
    assert total_cost(tree) == 435


def test_rollup_invariant_holds_at_every_node(companies_payload, travels_payload) -> None:
    indexed = index_companies(companies_payload, travels_payload)

    for node in _walk(build_tree(indexed)):
        own = indexed[node.id].cost
        assert node.cost == own + sum(child.cost for child in node.children)


def test_children_follow_mapping_order() -> None:
    companies = [
        {"id": "1", "parentId": "0"},
        {"id": "z", "parentId": "1"},
        {"id": "a", "parentId": "1"},
        {"id": "m", "parentId": "1"},
    ]
    tree = build_tree(index_companies(companies, []))

    assert [c.id for c in tree[0].children] == ["z", "a", "m"]


def test_orphans_are_dropped(companies_payload, travels_payload) -> None:
    tree = build_tree(index_companies(companies_payload, travels_payload))
    ids = {node.id for node in _walk(tree)}

    assert "9" not in ids
    assert ids == {"1", "2", "3", "4"}


def test_index_is_not_mutated_by_rollup(companies_payload, travels_payload) -> None:
    indexed = index_companies(companies_payload, travels_payload)
    build_tree(indexed)

    assert indexed["1"].cost == 100


def test_custom_parent_id_builds_subtree(companies_payload, travels_payload) -> None:
    tree = build_tree(index_companies(companies_payload, travels_payload), "2")

    assert [n.id for n in tree] == ["4"]


def test_self_parented_root_raises_cycle_error() -> None:
    indexed = index_companies([{"id": "0", "parentId": "0"}], [])

    with pytest.raises(TreeCycleError) as exc:
        build_tree(indexed, "0")

    assert exc.value.company_id == "0"


def test_two_node_cycle_raises_when_entered() -> None:
    indexed = index_companies([{"id": "a", "parentId": "b"}, {"id": "b", "parentId": "a"}], [])

    # Unreachable from the root: simply absent
    assert build_tree(indexed, "0") == []

    with pytest.raises(TreeCycleError):
        build_tree(indexed, "a")


def test_tree_to_dicts_renders_json_ready_structure() -> None:
    companies = [{"id": "1", "name": "Root", "parentId": "0"}, {"id": "2", "name": "Leaf", "parentId": "1"}]
    rendered = tree_to_dicts(build_tree(index_companies(companies, [{"companyId": "2", "price": 7}])))

    assert rendered == [
        {
            "id": "1", "name": "Root", "parentId": "0", "cost": 7,
            "children": [
                {"id": "2", "name": "Leaf", "parentId": "1", "cost": 7, "children": []},
            ],
        }
    ]


def test_deep_chain_rolls_up_beyond_recursion_limit() -> None:
    depth = 3000
    companies = [{"id": str(i), "parentId": str(i - 1)} for i in range(1, depth + 1)]
    travels = [{"companyId": str(depth), "price": 7}, {"companyId": "1", "price": 1}]

    tree = build_tree(index_companies(companies, travels), "0")

    assert len(tree) == 1
    assert tree[0].cost == 8
    nodes = list(_walk(tree))
    assert len(nodes) == depth
    assert nodes[-1].id == str(depth)
    assert nodes[-1].cost == 7

    rendered = render_tree_json(tree, indent=2)
    assert rendered.count('"children": [') == depth
    assert rendered.count('"children": []') == 1
    assert rendered.endswith("]")


def test_nan_price_does_not_poison_rollup() -> None:
    companies = [{"id": "1", "parentId": "0"}, {"id": "2", "parentId": "1"}]
    travels = [{"companyId": "2", "price": "nan"}, {"companyId": "2", "price": 4}]

    tree = build_tree(index_companies(companies, travels))

    assert tree[0].cost == 4
    assert "NaN" not in render_tree_json(tree)


@pytest.mark.parametrize("indent", [0, 2, 4])
def test_render_tree_json_matches_json_dumps(companies_payload, travels_payload, indent) -> None:
    tree = build_tree(index_companies(companies_payload, travels_payload))

    assert render_tree_json(tree, indent=indent) == json.dumps(tree_to_dicts(tree), ensure_ascii=False, indent=indent)


def test_render_tree_json_empty_tree() -> None:
    assert render_tree_json([]) == "[]"
