from __future__ import annotations

"""
Company Cost Aggregation Service.

Fetches the company and travel collections and indexes companies by id with
their direct travel spend. Fetch failures are converted into a failed
AggregationResult instead of propagating.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from companytree.domain.company_models import Company, Travel
from companytree.domain.config import COMPANIES_URL, DEFAULT_TIMEOUT, TRAVELS_URL
from companytree.domain.errors import DecodeError, NetworkError
from companytree.domain.result_models import (
    AggregationResult,
    create_error_result,
    create_success_result,
)
from companytree.infra.network import fetch_records

logger = logging.getLogger(__name__)

Fetcher = Callable[..., List[Dict[str, Any]]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_indexed_companies(
        companies_url: str = COMPANIES_URL,
        travels_url: str = TRAVELS_URL,
        *,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        fetch: Fetcher = fetch_records,
) -> AggregationResult:
    """
    Fetch both collections and build the cost-annotated company index.

    Both fetches must succeed. If either raises NetworkError or DecodeError
    the failure is logged and a failed result with an empty mapping is
    returned.

    Args:
        companies_url: Endpoint serving the company array.
        travels_url: Endpoint serving the travel array.
        timeout: Per-request timeout in seconds, None to wait indefinitely.
        fetch: Callable used to retrieve each collection.

    Returns:
        AggregationResult: Indexed companies on success, error details otherwise.
    """
    try:
        companies_raw = fetch(companies_url, timeout=timeout)
        travels_raw = fetch(travels_url, timeout=timeout)
    except (NetworkError, DecodeError) as e:
        logger.error(f"Aggregation aborted: {e.message}")
        return create_error_result(f"Error: {e.message}", e.code)

    indexed, unmatched = _index_with_stats(companies_raw, travels_raw)
    logger.info(
        f"Aggregated {len(travels_raw)} travels onto {len(indexed)} companies "
        f"({unmatched} unmatched)."
    )
    return create_success_result(
        indexed,
        company_count=len(companies_raw),
        travel_count=len(travels_raw),
        unmatched_travels=unmatched,
    )


def index_companies(
        companies: Iterable[Mapping[str, Any]],
        travels: Iterable[Mapping[str, Any]],
) -> Dict[str, Company]:
    """
    Index companies by id and add each travel's price to its company.

    Duplicate company ids keep the last record. Travels pointing at unknown
    companies are ignored.
    """
    indexed, _ = _index_with_stats(companies, travels)
    return indexed

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _index_with_stats(
        companies: Iterable[Mapping[str, Any]],
        travels: Iterable[Mapping[str, Any]],
) -> Tuple[Dict[str, Company], int]:
    indexed: Dict[str, Company] = {}
    for record in companies:
        company = Company.from_record(record)
        indexed[company.id] = company

    unmatched = 0
    for record in travels:
        travel = Travel.from_record(record)
        owner = indexed.get(travel.company_id)
        if owner is None:
            unmatched += 1
            continue
        indexed[travel.company_id] = owner.with_cost(travel.price)

    if unmatched:
        logger.debug(f"Dropped {unmatched} travels referencing unknown companies.")
    return indexed, unmatched
