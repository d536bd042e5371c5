from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from core.utils.context import RequestContext

audit_logger = logging.getLogger("audit")


def record(
    *,
    ctx: RequestContext,
    action: str,
    entity_type: str,
    entity_id: str = "",
    message: str = "",
    metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Emit one audit event on the `audit` logger.
    Nothing is persisted; handlers configured in settings.LOGGING decide where it lands.
    """
    actor = ctx.actor
    event = {
        "request_id": ctx.request_id,
        "source": ctx.source,
        "ip": ctx.ip,
        "user_agent": ctx.user_agent,
        "actor_id": actor.id if actor else None,
        "actor_role": actor.role if actor else None,
        "action": action,
        "entity_type": entity_type,
        "entity_id": entity_id,
        "metadata": metadata or {},
    }
    audit_logger.info("%s %s:%s %s", action, entity_type, entity_id, message, extra={"audit": event})
    return event
