"""Session enrichers."""

from src.infrastructure.enrichers.device_enricher import UserAgentDeviceEnricher

__all__ = ["UserAgentDeviceEnricher"]
