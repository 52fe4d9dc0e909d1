"""Construction of the shared Adyen API client.

The server builds exactly one client at startup and hands it to every tool
invocation. Tools build their resource-scoped service objects from it per
call and never keep a reference.
"""
import logging
from typing import Any, Dict

from Adyen import AdyenClient

from adyen_mcp.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def build_client(adyen_config: Dict[str, Any]) -> AdyenClient:
    """Create an AdyenClient from the `adyen` section of the configuration."""
    api_key = adyen_config.get("api_key")
    if not api_key:
        raise ConfigurationError("ADYEN_API_KEY must be set in the environment or a .env file")

    environment = adyen_config.get("environment") or "test"
    live_prefix = adyen_config.get("live_endpoint_prefix") or None
    http_timeout = int(adyen_config.get("http_timeout") or 30)

    client = AdyenClient(
        xapikey=api_key,
        platform=environment,
        live_endpoint_prefix=live_prefix,
        http_timeout=http_timeout,
    )
    logger.info(f"Adyen client created for the {environment} environment (timeout={http_timeout}s)")
    return client
