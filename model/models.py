from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional


@dataclass
class CaseRow:
    case_id: str        # URL-safe slug, primary key
    title: str
    created_at: Optional[datetime]
    created_by: str     # instructor email


@dataclass
class RemoteResult:
    """Outcome of one call to the backing store."""
    ok: bool
    data: List[Any] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, data: Optional[List[Any]] = None) -> "RemoteResult":
        return cls(ok=True, data=list(data or []))

    @classmethod
    def failure(cls, error: str) -> "RemoteResult":
        return cls(ok=False, error=error)
