"""Data models for unresolved inheritance declarations."""

from dataclasses import dataclass
from enum import Enum


class InheritMode(Enum):
    """How much documentation is copied from an ancestor."""

    PARAMS_ONLY = "params_only"  # params and returns
    FULL = "full"  # params, returns, description, summary, classdesc


@dataclass
class PendingAncestor:
    """Represents an ancestor a doclet still has to inherit from."""

    identity: str
    mode: InheritMode
    rank: int = 0  # declaration order on the dependent, 0 first
