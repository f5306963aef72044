"""Role assignment error messages."""


class RoleErrorMessage:
    """Role error message constants (format placeholders in braces)."""

    ROLE_NOT_FOUND = "Role not found"
    INVALID_CODE = (
        "Role code must start with an uppercase letter and contain 2-50 "
        "uppercase letters, digits or underscores"
    )
    INVALID_NAME = "Role name must be between 1 and 100 characters"
    CODE_EXISTS = "Role code '{code}' already exists"
    NAME_EXISTS = "Role name '{name}' already exists"
    PARENT_NOT_FOUND = "Parent role not found"
    NOT_ASSIGNABLE = "Role status '{status}' does not allow user assignment"
    USER_ALREADY_ASSIGNED = "User is already assigned to this role"
    USER_NOT_ASSIGNED = "User is not assigned to this role"
    CAPACITY_REACHED = "Role has reached its maximum of {limit} users"
    EXPIRED = "Role expired at {expires_at}"
    SYSTEM_ROLE = "System roles cannot be deleted"
    DEFAULT_ROLE = "Default roles cannot be deleted"
    HAS_USERS = "Role still has {count} assigned users"
    HAS_CHILDREN = "Role still has child roles"
