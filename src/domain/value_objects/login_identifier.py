"""Login identifier value object.

A login identifier is either an email address or a username. Anything that
contains ``@`` is treated as an email and normalised with email-validator;
everything else is a username compared case-sensitively.
"""

from dataclasses import dataclass
from typing import Literal

from email_validator import EmailNotValidError, validate_email


@dataclass(frozen=True, slots=True)
class LoginIdentifier:
    """Email or username supplied at login.

    Attributes:
        value: Normalised identifier (lowercased domain for emails, stripped).
        kind: "email" or "username".

    Raises:
        ValueError: If the identifier is empty or an invalid email.

    Example:
        >>> LoginIdentifier.parse("User@Example.com").kind
        'email'
        >>> LoginIdentifier.parse("alice").kind
        'username'
    """

    value: str
    kind: Literal["email", "username"]

    @classmethod
    def parse(cls, raw: str) -> "LoginIdentifier":
        """Classify and normalise a raw identifier.

        Raises:
            ValueError: If the identifier is empty or a malformed email.
        """
        candidate = (raw or "").strip()
        if not candidate:
            raise ValueError("Login identifier must not be empty")

        if "@" not in candidate:
            return cls(value=candidate, kind="username")

        try:
            validated = validate_email(candidate, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e
        return cls(value=validated.normalized.lower(), kind="email")

    @property
    def is_email(self) -> bool:
        return self.kind == "email"

    def __str__(self) -> str:
        return self.value
