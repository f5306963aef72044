"""Authentication error messages.

Message constants shared by the Authentication Guard and the Token/Session
Service. They travel inside core error kinds (AuthenticationError,
LockedError, ForbiddenError); they are not exceptions.

Usage:
    from src.domain.errors import AuthErrorMessage

    return Failure(
        error=AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=AuthErrorMessage.INVALID_CREDENTIALS,
        )
    )
"""


class AuthErrorMessage:
    """Authentication error message constants.

    Error Categories:
        - Credential errors: INVALID_CREDENTIALS, ACCOUNT_INACTIVE
        - Lockout: ACCOUNT_LOCKED_UNTIL (format with the unlock timestamp)
        - Token errors: INVALID_TOKEN, EXPIRED_TOKEN, REVOKED_TOKEN
        - Session errors: SESSION_NOT_FOUND, SESSION_EXPIRED, SESSION_REVOKED
    """

    # Unknown identifier and wrong password share this message
    INVALID_CREDENTIALS = "Invalid credentials"
    ACCOUNT_INACTIVE = "Account is not active"
    ACCOUNT_LOCKED_UNTIL = "Account is locked until {locked_until}"
    ACCOUNT_LOCKED_TOO_MANY_ATTEMPTS = "Too many failed login attempts"
    AUTHENTICATION_FAILED = "Authentication failed"

    # Token validation errors
    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token expired"
    REVOKED_TOKEN = "Token has been revoked"
    WRONG_TOKEN_TYPE = "Invalid token type"
    UNBOUND_REFRESH_TOKEN = "Refresh token is not bound to a session"

    # Session errors
    SESSION_NOT_FOUND = "Session not found"
    SESSION_EXPIRED = "Session expired"
    SESSION_REVOKED = "Session revoked"
