from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class CipherError(ValueError):
    stage: str
    reason: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.stage}:{self.reason}"


@dataclass
class InvalidArgument(CipherError):
    param: Optional[str] = None


@dataclass
class MalformedInput(CipherError):
    pass
