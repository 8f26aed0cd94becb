from collections.abc import Awaitable
from typing import Callable

from fastapi import Depends, HTTPException, status

from pipo.core.authentication import get_current_user
from pipo.core.schemas import AuthenticatedUser, UserRole


# A dependency factory
def require_roles(
    allowed_roles: list[UserRole],
) -> Callable[..., Awaitable[AuthenticatedUser]]:
    """
    Factory for creating a dependency that checks if a user has one of
    the allowed roles.
    """

    async def role_checker(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        """
        The actual dependency that checks the user's role.
        """
        if user.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return role_checker


# --- Create your specific role dependencies ---
is_admin = require_roles([UserRole.ADMIN])
is_tutor = require_roles([UserRole.TUTOR])
is_any_user = require_roles([UserRole.ADMIN, UserRole.TUTOR])
