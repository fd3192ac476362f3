"""Shared domain models for pg-conf-appender."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AppendPlan:
    """What a single run writes and where."""

    version: str
    target_path: str
    lines: Tuple[str, ...]
