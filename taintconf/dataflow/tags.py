"""Taint state enumeration shared by class summaries and the rules catalog."""
from __future__ import annotations

from enum import Enum


class TaintState(str, Enum):
    TAINTED = "TAINTED"
    UNKNOWN = "UNKNOWN"
    SAFE = "SAFE"
    NULL = "NULL"
    INVALID = "INVALID"
