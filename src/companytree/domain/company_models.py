from __future__ import annotations

"""
Company Hierarchy Data Models.

Immutable value objects for the records fetched from the remote API and the
tree nodes produced by cost roll-up. Cost changes never mutate an instance;
they produce a replacement value that the caller stores back into its
mapping.
"""

import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Tuple, Union

Number = Union[int, float]

ROOT_PARENT_ID = "0"

# -----------------------------------------------------------------------------
# SOURCE RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Company:
    """
    A company with its aggregated cost.

    Attributes:
        id: Unique company identifier.
        parent_id: Identifier of the parent company ("0" for top-level).
        name: Display name.
        cost: Aggregated travel cost. Starts at 0.
        attributes: The raw remote record, preserved for output.
    """
    id: str
    parent_id: str
    name: str = ""
    cost: Number = 0
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Company":
        """Build a zero-cost Company from a raw API record."""
        return cls(
            id=_as_id(record.get("id")),
            parent_id=_as_id(record.get("parentId")),
            name=str(record.get("name") or ""),
            cost=0,
            attributes=dict(record),
        )

    def with_cost(self, delta: Number) -> "Company":
        """Return a copy whose cost is increased by delta."""
        return replace(self, cost=self.cost + delta)

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the original record in key order with the cost appended.

        Companies built without a source record fall back to their core fields.
        """
        if self.attributes:
            out: Dict[str, Any] = dict(self.attributes)
        else:
            out = {"id": self.id, "parentId": self.parent_id, "name": self.name}
        out["cost"] = self.cost
        return out


@dataclass(frozen=True)
class Travel:
    """
    A single travel expense.

    Attributes:
        company_id: Identifier of the company that owns the expense.
        price: Amount charged.
        attributes: The raw remote record.
    """
    company_id: str
    price: Number
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Travel":
        return cls(
            company_id=_as_id(record.get("companyId")),
            price=_as_number(record.get("price")),
            attributes=dict(record),
        )

# -----------------------------------------------------------------------------
# TREE STRUCTURE
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class TreeNode:
    """
    A company placed in the hierarchy.

    Nodes compare by identity; hierarchies may be deeper than the
    interpreter's recursion limit, so no recursive dunder methods are generated.

    Attributes:
        company: The company, with cost already rolled up from descendants.
        children: Direct children in mapping order.
    """
    company: Company
    children: Tuple["TreeNode", ...] = field(default=(), repr=False)

    @property
    def id(self) -> str:
        return self.company.id

    @property
    def cost(self) -> Number:
        return self.company.cost

    def to_dict(self) -> Dict[str, Any]:
        """Render the subtree as nested dictionaries, walking it iteratively."""
        rendered: Dict[int, Dict[str, Any]] = {}
        stack: List[Tuple["TreeNode", bool]] = [(self, False)]

        while stack:
            node, expanded = stack.pop()
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children)
                continue
            out = node.company.to_dict()
            out["children"] = [rendered.pop(id(child)) for child in node.children]
            rendered[id(node)] = out

        return rendered[id(self)]

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

# Plain decimal or exponent notation; rejects "nan", "inf" and "1_000"
_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _as_id(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_number(value: Any) -> Number:
    """Accept finite numbers and plain numeric strings; anything else counts as 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else 0
    if not isinstance(value, str):
        return 0

    text = value.strip()
    if not _NUMERIC_RE.match(text):
        return 0
    if text.lstrip("+-").isdigit():
        return int(text)
    number = float(text)
    return number if math.isfinite(number) else 0
