from __future__ import annotations

from companytree.domain.company_models import ROOT_PARENT_ID, Company, Travel, TreeNode
from companytree.domain.errors import (
    CompanyTreeError,
    ConfigError,
    DecodeError,
    ErrorCode,
    NetworkError,
    TreeCycleError,
)
from companytree.domain.result_models import AggregationResult

__all__ = [
    "ROOT_PARENT_ID",
    "Company",
    "Travel",
    "TreeNode",
    "AggregationResult",
    "CompanyTreeError",
    "ConfigError",
    "DecodeError",
    "ErrorCode",
    "NetworkError",
    "TreeCycleError",
]
