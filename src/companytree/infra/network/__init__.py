from __future__ import annotations

"""
Network Communication Infrastructure.

Blocking HTTP retrieval of the JSON collections consumed by the aggregator.
"""

from companytree.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT
from companytree.infra.network.json_client import fetch_records

__all__ = [
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "fetch_records",
]
