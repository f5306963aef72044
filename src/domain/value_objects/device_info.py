"""Device metadata captured when a session is created."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class DeviceInfo:
    """Client device metadata.

    Attributes:
        user_agent: Raw User-Agent header.
        ip_address: Client IP address.
        device_type: "mobile", "tablet", "desktop" or "other". Derived from the
            user agent when not supplied.
    """

    user_agent: str | None = None
    ip_address: str | None = None
    device_type: str | None = None
