from unittest.mock import MagicMock

import pytest

from adyen_mcp.core import client as client_module
from adyen_mcp.core.exceptions import ConfigurationError


def test_build_client_forwards_settings(monkeypatch):
    adyen_client = MagicMock(name="AdyenClient")
    monkeypatch.setattr(client_module, "AdyenClient", adyen_client)

    result = client_module.build_client(
        {"api_key": "AQE-secret", "environment": "live", "live_endpoint_prefix": "abc-Demo", "http_timeout": 10}
    )

    assert result is adyen_client.return_value
    adyen_client.assert_called_once_with(
        xapikey="AQE-secret",
        platform="live",
        live_endpoint_prefix="abc-Demo",
        http_timeout=10,
    )


def test_build_client_defaults(monkeypatch):
    adyen_client = MagicMock(name="AdyenClient")
    monkeypatch.setattr(client_module, "AdyenClient", adyen_client)

    client_module.build_client({"api_key": "AQE-secret", "live_endpoint_prefix": ""})

    adyen_client.assert_called_once_with(
        xapikey="AQE-secret",
        platform="test",
        live_endpoint_prefix=None,
        http_timeout=30,
    )


def test_build_client_requires_api_key():
    with pytest.raises(ConfigurationError, match="ADYEN_API_KEY"):
        client_module.build_client({"environment": "test"})
