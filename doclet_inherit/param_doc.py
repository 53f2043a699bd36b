"""Data models for documented parameters and return values."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParamDoc:
    """Represents one documented (or synthesized) parameter of a doclet."""

    name: str
    description: str | None = None
    synthesized: bool = False  # placeholder for an undocumented slot
    raw: dict[str, Any] = field(default_factory=dict)


@dataclass
class ReturnDoc:
    """Represents one documented return value of a doclet."""

    description: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)
