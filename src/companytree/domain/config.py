from __future__ import annotations

"""
Runtime Configuration Defaults.

Holds the default endpoints and output options. The CLI layers its overrides
on top of this dictionary before validation.
"""

from typing import Any, Dict

from companytree.domain.company_models import ROOT_PARENT_ID

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
MOCK_API_BASE = "https://5f27781bf5d27e001612e057.mockapi.io/webprovise"
COMPANIES_URL = f"{MOCK_API_BASE}/companies"
TRAVELS_URL = f"{MOCK_API_BASE}/travels"

DEFAULT_TIMEOUT = 10.0
DEFAULT_INDENT = 4


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Sources
        "companies_url": COMPANIES_URL,
        "travels_url": TRAVELS_URL,
        "timeout": DEFAULT_TIMEOUT,

        # Hierarchy
        "root_parent_id": ROOT_PARENT_ID,

        # Output
        "indent": DEFAULT_INDENT,
        "show_timing": True,
        "output_path": "",
    }
