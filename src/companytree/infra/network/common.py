from __future__ import annotations

from companytree import __version__
from companytree.domain.config import DEFAULT_TIMEOUT

USER_AGENT = f"companytree-client/{__version__}"

__all__ = ["USER_AGENT", "DEFAULT_TIMEOUT"]
