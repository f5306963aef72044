"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_*, *_HAS_*)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, SESSION_*)
- Authorization errors (*_IMMUTABLE, *_NOT_ASSIGNABLE, ACCOUNT_*)
- Business rule violations (*_CAPACITY_REACHED, *_EXPIRED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_CONDITION = "invalid_condition"
    INVALID_ROLE_CODE = "invalid_role_code"
    INVALID_ROLE_NAME = "invalid_role_name"
    CONDITIONS_NOT_SUPPORTED = "conditions_not_supported"
    FIELDS_NOT_SUPPORTED = "fields_not_supported"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    PERMISSION_NOT_FOUND = "permission_not_found"
    SESSION_NOT_FOUND = "session_not_found"
    USER_NOT_ASSIGNED = "user_not_assigned"

    # Conflict errors
    ROLE_CODE_ALREADY_EXISTS = "role_code_already_exists"
    ROLE_NAME_ALREADY_EXISTS = "role_name_already_exists"
    USER_ALREADY_ASSIGNED = "user_already_assigned"
    ROLE_HAS_USERS = "role_has_users"
    ROLE_HAS_CHILDREN = "role_has_children"
    PERMISSION_STATE_CONFLICT = "permission_state_conflict"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    AUTHENTICATION_FAILED = "authentication_failed"
    TOKEN_INVALID = "token_invalid"
    TOKEN_REVOKED = "token_revoked"
    SESSION_REVOKED = "session_revoked"

    # Authorization errors
    ACCOUNT_INACTIVE = "account_inactive"
    ACCOUNT_LOCKED = "account_locked"
    SYSTEM_ROLE_IMMUTABLE = "system_role_immutable"
    DEFAULT_ROLE_IMMUTABLE = "default_role_immutable"
    ROLE_NOT_ASSIGNABLE = "role_not_assignable"
    PERMISSION_INACTIVE = "permission_inactive"

    # Business rule violations
    ROLE_CAPACITY_REACHED = "role_capacity_reached"
    ROLE_EXPIRED = "role_expired"
    TOKEN_EXPIRED = "token_expired"
    SESSION_EXPIRED = "session_expired"
