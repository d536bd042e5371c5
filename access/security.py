from __future__ import annotations

from typing import Callable, Dict, Sequence

from audit.utils.recorder import record as audit_record
from core.api.exceptions import PermissionDeniedError
from core.entities import Lead, User
from core.utils.context import RequestContext
from access.controller import (
    can_access_route,
    can_access_settings,
    can_assign_managers,
    can_delete_lead,
    can_edit_lead,
    can_manage_team,
    can_modify_team_members,
    can_view_lead,
)

LEAD_ENTITY_TYPE = "leads.Lead"

# Policy:
# - CEO/Admin: everything
# - Manager: own + direct team leads, can view team, no settings, no team changes
# - Agent: own leads only
# - Nobody but CEO/Admin deletes leads


def _deny(ctx: RequestContext, code: str, message: str, entity_type: str = "", entity_id: str = ""):
    audit_record(
        ctx=ctx,
        action="access.denied",
        entity_type=entity_type,
        entity_id=entity_id,
        message=code,
    )
    raise PermissionDeniedError(code=code, message=message)


def ensure_can_view_lead(ctx: RequestContext, lead: Lead, team_members: Sequence[User] = ()):
    if can_view_lead(ctx.actor, lead, team_members):
        return
    _deny(ctx, "lead.read.forbidden", "Not allowed to view lead", LEAD_ENTITY_TYPE, lead.id)


def ensure_can_edit_lead(ctx: RequestContext, lead: Lead, team_members: Sequence[User] = ()):
    if can_edit_lead(ctx.actor, lead, team_members):
        return
    _deny(ctx, "lead.edit.forbidden", "Not allowed to edit lead", LEAD_ENTITY_TYPE, lead.id)


def ensure_can_delete_lead(ctx: RequestContext, lead: Lead, team_members: Sequence[User] = ()):
    # team_members is accepted for a uniform signature; deletion ignores ownership
    if can_delete_lead(ctx.actor):
        return
    _deny(ctx, "lead.delete.forbidden", "Only admins can delete leads", LEAD_ENTITY_TYPE, lead.id)


def ensure_can_access_settings(ctx: RequestContext):
    if can_access_settings(ctx.actor):
        return
    _deny(ctx, "settings.access.forbidden", "Not allowed to access settings", "settings")


def ensure_can_manage_team(ctx: RequestContext):
    if can_manage_team(ctx.actor):
        return
    _deny(ctx, "team.manage.forbidden", "Not allowed to manage the team", "team")


def ensure_can_modify_team_members(ctx: RequestContext):
    if can_modify_team_members(ctx.actor):
        return
    _deny(ctx, "team.modify.forbidden", "Not allowed to add or remove team members", "team")


def ensure_can_assign_managers(ctx: RequestContext):
    if can_assign_managers(ctx.actor):
        return
    _deny(ctx, "team.assign_manager.forbidden", "Not allowed to assign managers", "team")


def ensure_can_access_route(ctx: RequestContext, route: str, *, unknown_routes_allowed: bool = True):
    if can_access_route(ctx.actor, route, unknown_routes_allowed=unknown_routes_allowed):
        return
    _deny(ctx, "route.access.forbidden", "Not allowed to open this page", "route", route)


LEAD_ACTION_GUARDS: Dict[str, Callable[..., None]] = {
    "view": ensure_can_view_lead,
    "edit": ensure_can_edit_lead,
    "delete": ensure_can_delete_lead,
}
