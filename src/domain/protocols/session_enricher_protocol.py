"""Session enricher protocol for device enrichment.

Enrichers turn a raw user agent into the device metadata stored on a
Session.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, kw_only=True)
class DeviceEnrichmentResult:
    """Result of device information enrichment.

    Attributes:
        device_info: Human-readable device info ("Chrome on Mac OS X").
        browser: Browser name ("Chrome", "Firefox", "Safari").
        os: Operating system ("Mac OS X", "Windows", "Android").
        device_type: Device category ("desktop", "mobile", "tablet", "other").
        is_bot: Whether user agent appears to be a bot.
    """

    device_info: str | None = None
    browser: str | None = None
    os: str | None = None
    device_type: str | None = None
    is_bot: bool = False


class DeviceEnricher(Protocol):
    """Device enricher protocol (port) for user agent parsing.

    Behavior:
        - Fail-open: Returns empty result on errors
        - Best-effort: Unknown agents return partial data
    """

    async def enrich(self, user_agent: str) -> DeviceEnrichmentResult:
        """Parse user agent string to extract device information.

        Returns:
            DeviceEnrichmentResult, empty (all None) on parse failure.
        """
        ...
