"""Device enricher implementation using user-agents library.

Parses user agent strings into the device description and device type
stored on sessions. Implements DeviceEnricher with fail-open behavior.
"""

from user_agents import parse as parse_user_agent  # type: ignore[import-untyped]
from user_agents.parsers import UserAgent  # type: ignore[import-untyped]

from src.domain.protocols import LoggerProtocol
from src.domain.protocols.session_enricher_protocol import DeviceEnrichmentResult

_UNKNOWN_FAMILY = "Other"


class UserAgentDeviceEnricher:
    """Device enricher using the user-agents library.

    Behavior:
        - Fail-open: Returns empty result on parse errors
        - Non-blocking: Pure string parsing (<1ms)
        - Best-effort: Unknown agents return partial data
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def enrich(self, user_agent: str) -> DeviceEnrichmentResult:
        """Parse user agent string to extract device information.

        Returns:
            DeviceEnrichmentResult, empty (all None) for a blank agent or on
            parse failure.
        """
        if not user_agent:
            return DeviceEnrichmentResult()

        try:
            ua: UserAgent = parse_user_agent(user_agent)
            browser = self._family(ua.browser.family)
            os_name = self._family(ua.os.family)

            return DeviceEnrichmentResult(
                device_info=self._build_device_info(browser, os_name),
                browser=browser,
                os=os_name,
                device_type=self._determine_device_type(ua),
                is_bot=ua.is_bot,
            )
        except Exception as e:
            self._logger.warning(
                "Failed to parse user agent",
                user_agent=user_agent[:100],
                error_type=type(e).__name__,
            )
            return DeviceEnrichmentResult()

    @staticmethod
    def _family(family: str | None) -> str | None:
        if not family or family == _UNKNOWN_FAMILY:
            return None
        return family

    @staticmethod
    def _determine_device_type(ua: UserAgent) -> str:
        """Map the parsed agent to "mobile", "tablet", "desktop" or "other"."""
        if ua.is_mobile:
            return "mobile"
        if ua.is_tablet:
            return "tablet"
        if ua.is_pc:
            return "desktop"
        return "other"

    @staticmethod
    def _build_device_info(browser: str | None, os_name: str | None) -> str | None:
        """Build "Chrome on Mac OS X" style text, or None if nothing is known."""
        if browser and os_name:
            return f"{browser} on {os_name}"
        if browser:
            return browser
        if os_name:
            return f"Unknown browser on {os_name}"
        return None
