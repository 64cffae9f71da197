"""Error codes and exceptions raised while building nid policies."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    PATTERN_ERROR = "PATTERN_ERROR"
    TABLE_ERROR = "TABLE_ERROR"


class NidError(ValueError):
    """Exception carrying a structured error code for policy construction."""

    def __init__(self, code: ErrorCode, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        base = super().__str__()
        return f"[{self.code.value}] {base}" if base else self.code.value
