"""User roles shared by the API and the mobile client."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paytrack.core.config import Settings

ADMIN_ROLE = "admin"

# Server-side role set. The mobile client historically offered "manager"
# instead of "viewer"; clients should read GET /auth/roles rather than hardcode.
DEFAULT_USER_ROLES = (ADMIN_ROLE, "viewer", "intern")


def is_valid_role(role: str, settings: "Settings") -> bool:
    """True if role is one of the configured USER_ROLES (exact, case-sensitive)."""
    return role in settings.USER_ROLES
