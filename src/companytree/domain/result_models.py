from __future__ import annotations

"""
Aggregation Result Models.

Explicit success/failure envelope returned by the aggregation service so
callers can tell an empty data set apart from a failed fetch.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from companytree.domain.company_models import Company
from companytree.domain.errors import ErrorCode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AggregationResult:
    """
    Outcome of fetching and aggregating companies and travels.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_code: Failure category, None on success.
        companies: Indexed mapping of company id to Company. Empty on failure.
        company_count: Number of company records fetched.
        travel_count: Number of travel records fetched.
        unmatched_travels: Travels whose company id was not found.
    """
    ok: bool
    error: str = ""
    error_code: Optional[ErrorCode] = None
    companies: Dict[str, Company] = field(default_factory=dict)
    company_count: int = 0
    travel_count: int = 0
    unmatched_travels: int = 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR) -> AggregationResult:
    """Create a failed result carrying an empty mapping."""
    return AggregationResult(ok=False, error=error, error_code=code, companies={})


def create_success_result(
        companies: Dict[str, Company],
        company_count: int,
        travel_count: int,
        unmatched_travels: int = 0,
) -> AggregationResult:
    """Create a successful result wrapping the indexed mapping."""
    return AggregationResult(
        ok=True,
        companies=companies,
        company_count=company_count,
        travel_count=travel_count,
        unmatched_travels=unmatched_travels,
    )
