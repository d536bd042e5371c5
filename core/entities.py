from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Role(str, Enum):
    AGENT = "agent"
    MANAGER = "manager"
    ADMIN = "admin"
    CEO = "ceo"


@dataclass(frozen=True)
class User:
    """
    Snapshot of a CRM user as supplied by the caller.
    manager_id is a lookup key to the direct manager, not an ownership link.
    """
    id: str
    role: str
    manager_id: Optional[str] = None
    name: str = ""
    email: str = ""


@dataclass(frozen=True)
class Lead:
    """
    Snapshot of a lead. Only id/assigned_to matter for access checks;
    everything else rides along in `payload`.
    """
    id: str
    assigned_to: Optional[str] = None
    payload: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)
