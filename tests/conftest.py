from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path.
2. Provides sample company and travel payloads shaped like the remote API.
"""

import os
import sys
from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def companies_payload() -> List[Dict[str, Any]]:
    """
    Three-level hierarchy plus one orphan.

        1 Webprovise Corp
        ├── 2 Stamm LLC
        │   └── 4 Price and Sons
        └── 3 Blanda, Langosh and Barton
        9 Orphan Inc (parent 42 does not exist)
    """
    return [
        {"id": "1", "createdAt": "2021-02-26T00:55:36.632Z", "name": "Webprovise Corp", "parentId": "0"},
        {"id": "2", "createdAt": "2021-02-25T10:35:32.978Z", "name": "Stamm LLC", "parentId": "1"},
        {"id": "3", "createdAt": "2021-02-25T15:16:30.887Z", "name": "Blanda, Langosh and Barton", "parentId": "1"},
        {"id": "4", "createdAt": "2021-02-25T06:11:47.519Z", "name": "Price and Sons", "parentId": "2"},
        {"id": "9", "createdAt": "2021-02-25T06:11:47.519Z", "name": "Orphan Inc", "parentId": "42"},
    ]


@pytest.fixture
def travels_payload() -> List[Dict[str, Any]]:
    return [
        {"id": "t1", "employeeName": "Garry", "price": 100, "companyId": "1"},
        {"id": "t2", "employeeName": "Anna", "price": 250, "companyId": "2"},
        {"id": "t3", "employeeName": "Otto", "price": 50, "companyId": "4"},
        {"id": "t4", "employeeName": "Otto", "price": 25, "companyId": "4"},
        {"id": "t5", "employeeName": "Lia", "price": 10, "companyId": "3"},
        {"id": "t6", "employeeName": "Ghost", "price": 999, "companyId": "777"},
        {"id": "t7", "employeeName": "Rae", "price": 5, "companyId": "9"},
    ]


def make_response(payload: Any = None, *, status_code: int = 200, json_error: bool = False) -> MagicMock:
    """Build a requests.Response stand-in for patched requests.get calls."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.content = b"x" * 64
    if json_error:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def response_factory():
    return make_response
