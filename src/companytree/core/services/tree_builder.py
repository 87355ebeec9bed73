from __future__ import annotations

"""
Company Hierarchy Builder.

Partitions the indexed companies by parent id and rolls each subtree's cost
up into its ancestors. Children keep the iteration order of the index.
"""

import json
import logging
from typing import Any, Dict, List, Mapping, Sequence, Set, Tuple, Union

from companytree.domain.company_models import ROOT_PARENT_ID, Company, Number, TreeNode
from companytree.domain.errors import TreeCycleError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(indexed: Mapping[str, Company], parent_id: str = ROOT_PARENT_ID) -> List[TreeNode]:
    """
    Build the subtree of companies whose parent is parent_id.

    A node's cost is its own travel spend plus the rolled-up cost of every
    direct child. Companies whose parent never appears under parent_id are
    not part of the result. The walk uses an explicit stack, so depth is
    bounded only by memory.

    Args:
        indexed: Mapping of company id to Company.
        parent_id: Parent id of the returned top-level nodes.

    Returns:
        List[TreeNode]: Top-level nodes in mapping order.

    Raises:
        TreeCycleError: If a company is its own ancestor along the descent.
    """
    children_of = _group_by_parent(indexed)
    root_ids = children_of.get(parent_id, [])

    seen: Set[str] = {parent_id}
    built: Dict[str, TreeNode] = {}
    stack: List[Tuple[str, bool]] = [(cid, False) for cid in reversed(root_ids)]

    while stack:
        company_id, expanded = stack.pop()
        child_ids = children_of.get(company_id, [])

        if not expanded:
            # Single-parent records can only be reached twice through a cycle
            if company_id in seen:
                logger.error(f"Cycle detected: company '{company_id}' is its own ancestor.")
                raise TreeCycleError(company_id)
            seen.add(company_id)
            stack.append((company_id, True))
            stack.extend((cid, False) for cid in reversed(child_ids))
            continue

        children = tuple(built.pop(cid) for cid in child_ids)
        company = indexed[company_id]
        if children:
            company = company.with_cost(total_cost(children))
        built[company_id] = TreeNode(company=company, children=children)

    return [built[cid] for cid in root_ids]


def tree_to_dicts(nodes: Sequence[TreeNode]) -> List[Dict[str, Any]]:
    """Render nodes as plain dictionaries for JSON serialization."""
    return [node.to_dict() for node in nodes]


def total_cost(nodes: Sequence[TreeNode]) -> Number:
    """Sum the rolled-up cost of the given nodes."""
    return sum(node.cost for node in nodes)


def render_tree_json(nodes: Sequence[TreeNode], indent: int = 4) -> str:
    """
    Serialize nodes to pretty-printed JSON without recursing per level.

    Produces the same layout as json.dumps(tree_to_dicts(nodes), indent=indent)
    for records with scalar fields; nested record values are written inline.
    """
    pad = " " * indent
    parts: List[str] = []
    stack: List[Union[str, Tuple[str, Any, int]]] = [("list", tuple(nodes), 0)]

    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
            continue

        kind, payload, depth = item
        if kind == "list":
            if not payload:
                parts.append("[]")
                continue
            work: List[Union[str, Tuple[str, Any, int]]] = ["["]
            for i, child in enumerate(payload):
                work.append("\n" + pad * (depth + 1))
                work.append(("node", child, depth + 1))
                if i < len(payload) - 1:
                    work.append(",")
            work.append("\n" + pad * depth + "]")
            stack.extend(reversed(work))
        else:
            inner = "\n" + pad * (depth + 1)
            fields = "".join(
                f"{inner}{_dump(key)}: {_dump(value)},"
                for key, value in payload.company.to_dict().items()
            )
            stack.extend(reversed([
                "{" + fields + inner + '"children": ',
                ("list", payload.children, depth + 1),
                "\n" + pad * depth + "}",
            ]))

    return "".join(parts)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _group_by_parent(indexed: Mapping[str, Company]) -> Dict[str, List[str]]:
    """Map each parent id to its children's ids, in mapping order."""
    children_of: Dict[str, List[str]] = {}
    for company_id, company in indexed.items():
        children_of.setdefault(company.parent_id, []).append(company_id)
    return children_of


def _dump(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
