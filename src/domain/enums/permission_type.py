"""Permission types.

Types:
    - MENU: visibility of navigation entries
    - BUTTON: visibility of UI actions
    - API: access to backend endpoints (conditions allowed)
    - DATA: access to records (conditions and field lists allowed)
"""

from enum import Enum


class PermissionType(str, Enum):
    """Kind of resource a permission guards."""

    MENU = "menu"
    BUTTON = "button"
    API = "api"
    DATA = "data"

    def can_have_conditions(self) -> bool:
        """Attribute conditions only make sense for API and DATA permissions."""
        return self in (PermissionType.API, PermissionType.DATA)

    def can_have_fields(self) -> bool:
        """Field lists only make sense for DATA permissions."""
        return self is PermissionType.DATA
