"""
Role-based visibility rules for leads, team members and dashboard routes.

Every function here is a pure read over the snapshots passed in:
- no I/O, no mutation, nothing cached between calls
- a missing user, unknown role or dangling id resolves to False / []
  (the only fail-open case is an unregistered route, see ROUTE_POLICIES)

Role ladder: agent(1) < manager(2) < admin(3) < ceo(4).
"""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from core.entities import Lead, User
from core.utils.permissions import (
    ROLE_AGENT,
    ROLE_EXECUTIVE,
    ROLE_MANAGER,
    role_level,
    user_has_role,
)


def _team_ids(user: User, team_members: Iterable[User]) -> set:
    # Direct reports only; managers of managers are not followed.
    return {m.id for m in team_members if m.manager_id == user.id}


def can_view_all_leads(user: Optional[User]) -> bool:
    return user_has_role(user, ROLE_EXECUTIVE)


def can_view_lead(user: Optional[User], lead: Lead, team_members: Sequence[User] = ()) -> bool:
    if user is None:
        return False

    if user_has_role(user, ROLE_EXECUTIVE):
        return True

    if not lead.assigned_to:
        return False

    if user_has_role(user, ROLE_AGENT):
        return lead.assigned_to == user.id

    if user_has_role(user, ROLE_MANAGER):
        if lead.assigned_to == user.id:
            return True
        return lead.assigned_to in _team_ids(user, team_members)

    return False


def can_edit_lead(user: Optional[User], lead: Lead, team_members: Sequence[User] = ()) -> bool:
    # Same rules as viewing for now. Add a distinct rule here rather than
    # changing can_view_lead if editing ever gets stricter.
    return can_view_lead(user, lead, team_members)


def can_delete_lead(user: Optional[User]) -> bool:
    # Ownership is irrelevant: an agent cannot delete even their own lead.
    return user_has_role(user, ROLE_EXECUTIVE)


def can_access_settings(user: Optional[User]) -> bool:
    return user_has_role(user, ROLE_EXECUTIVE)


def can_manage_team(user: Optional[User]) -> bool:
    # Managers may view their team here, but not change it (see can_modify_team_members)
    return user_has_role(user, ROLE_EXECUTIVE + ROLE_MANAGER)


def can_modify_team_members(user: Optional[User]) -> bool:
    return user_has_role(user, ROLE_EXECUTIVE)


def can_assign_managers(user: Optional[User]) -> bool:
    return user_has_role(user, ROLE_EXECUTIVE)


def get_visible_team_members(user: Optional[User], all_members: Sequence[User]) -> List[User]:
    if user is None:
        return []

    if user_has_role(user, ROLE_EXECUTIVE):
        return list(all_members)

    if user_has_role(user, ROLE_MANAGER):
        return [m for m in all_members if m.manager_id == user.id or m.id == user.id]

    # Agents (and anything else) see only themselves
    return [m for m in all_members if m.id == user.id]


def get_visible_leads(
    user: Optional[User],
    all_leads: Sequence[Lead],
    team_members: Sequence[User] = (),
) -> List[Lead]:
    if user is None:
        return []

    if user_has_role(user, ROLE_EXECUTIVE):
        return list(all_leads)

    if user_has_role(user, ROLE_AGENT):
        return [lead for lead in all_leads if lead.assigned_to and lead.assigned_to == user.id]

    if user_has_role(user, ROLE_MANAGER):
        owners = _team_ids(user, team_members)
        owners.add(user.id)
        return [lead for lead in all_leads if lead.assigned_to and lead.assigned_to in owners]

    return []


def has_role_level(user: Optional[User], min_role: str) -> bool:
    if user is None:
        return False
    required = role_level(min_role)
    if required == 0:
        # Unknown minimum role: nothing can satisfy it
        return False
    return role_level(user.role) >= required


# ---------- Routes ----------

RoutePolicy = Callable[[User], bool]


def allow_authenticated(user: User) -> bool:
    return True


def deny_all(user: User) -> bool:
    return False


ROUTE_POLICIES: Dict[str, RoutePolicy] = {
    "/": allow_authenticated,
    "/leads": allow_authenticated,
    "/inventory": allow_authenticated,
    "/tasks": allow_authenticated,
    "/team": can_manage_team,
    "/settings": can_access_settings,
}

# Paths are matched exactly: "/settings/" is not "/settings".
# Routes missing from ROUTE_POLICIES are allowed for any signed-in user.
# A new sensitive route must be registered above or it is open to every role.
UNKNOWN_ROUTE_POLICY: RoutePolicy = allow_authenticated


def is_registered_route(route_path: str) -> bool:
    return route_path in ROUTE_POLICIES


def resolve_route_policy(route_path: str, *, unknown_routes_allowed: bool = True) -> RoutePolicy:
    policy = ROUTE_POLICIES.get(route_path)
    if policy is not None:
        return policy
    return UNKNOWN_ROUTE_POLICY if unknown_routes_allowed else deny_all


def can_access_route(user: Optional[User], route_path: str, *, unknown_routes_allowed: bool = True) -> bool:
    if user is None:
        return False
    policy = resolve_route_policy(route_path, unknown_routes_allowed=unknown_routes_allowed)
    return policy(user)


def capabilities(user: Optional[User]) -> Dict[str, object]:
    """
    Flat summary of what `user` may do, for clients that render menus once.
    """
    return {
        "role": user.role if user else None,
        "role_level": role_level(user.role) if user else 0,
        "can_view_all_leads": can_view_all_leads(user),
        "can_delete_lead": can_delete_lead(user),
        "can_access_settings": can_access_settings(user),
        "can_manage_team": can_manage_team(user),
        "can_modify_team_members": can_modify_team_members(user),
        "can_assign_managers": can_assign_managers(user),
        "routes": {path: can_access_route(user, path) for path in ROUTE_POLICIES},
    }
