from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from core.entities import User


@dataclass(frozen=True)
class RequestContext:
    actor: Optional[User]
    request_id: str
    source: str = "api"
    ip: str = ""
    user_agent: str = ""


def build_ctx(request, actor: Optional[User] = None) -> RequestContext:
    """
    Helper to build RequestContext from a standard Django Request.
    The actor is the snapshot user sent by the caller, not request.user.
    """
    return RequestContext(
        actor=actor,
        request_id=getattr(request, "request_id", ""),
        source="api",
        ip=request.META.get("REMOTE_ADDR", ""),
        user_agent=request.META.get("HTTP_USER_AGENT", "")[:256],
    )
