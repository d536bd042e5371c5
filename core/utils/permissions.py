from __future__ import annotations

from typing import Iterable, Optional

from core.entities import Role, User

# Higher level = more privilege
ROLE_LEVELS = {
    Role.AGENT.value: 1,
    Role.MANAGER.value: 2,
    Role.ADMIN.value: 3,
    Role.CEO.value: 4,
}

ROLE_EXECUTIVE = [Role.CEO.value, Role.ADMIN.value]
ROLE_MANAGER = [Role.MANAGER.value]
ROLE_AGENT = [Role.AGENT.value]


def role_level(role: Optional[str]) -> int:
    # Unknown roles rank below every real role
    return ROLE_LEVELS.get(getattr(role, "value", role), 0)


def user_has_role(user: Optional[User], allowed: Iterable[str]) -> bool:
    if user is None:
        return False
    return getattr(user.role, "value", user.role) in list(allowed)
