"""Response envelope helpers shared by the routers."""
from __future__ import annotations

from typing import Any, Dict, List, Optional


def ok(data: Any, warnings: Optional[List[str]] = None) -> Dict[str, Any]:
    return {"ok": True, "data": data, "warnings": list(warnings or []), "errors": []}


def err(messages: List[str]) -> Dict[str, Any]:
    """Failure envelope; ``data`` is always null."""

    return {"ok": False, "data": None, "warnings": [], "errors": messages}


__all__ = ["err", "ok"]
