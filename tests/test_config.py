import pytest

from adyen_mcp.core.config import DEFAULT_CONFIG_PATH, load_config
from adyen_mcp.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ADYEN_API_KEY", "ADYEN_ENVIRONMENT", "ADYEN_LIVE_ENDPOINT_PREFIX", "ADYEN_MCP_CONFIG"):
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_config_defaults():
    config = load_config(DEFAULT_CONFIG_PATH)

    assert config["adyen"]["environment"] == "test"
    assert config["server"]["transport"] == "stdio"
    assert "api_key" not in config["adyen"]


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    path = write_config(tmp_path, "adyen:\n  environment: test\n")
    monkeypatch.setenv("ADYEN_API_KEY", "AQE-secret")
    monkeypatch.setenv("ADYEN_ENVIRONMENT", "LIVE")
    monkeypatch.setenv("ADYEN_LIVE_ENDPOINT_PREFIX", "1797a841fbb37ca7-AdyenDemo")

    config = load_config(path)

    assert config["adyen"]["api_key"] == "AQE-secret"
    assert config["adyen"]["environment"] == "live"
    assert config["adyen"]["live_endpoint_prefix"] == "1797a841fbb37ca7-AdyenDemo"


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = write_config(tmp_path, "server:\n  name: payments\n")
    monkeypatch.setenv("ADYEN_MCP_CONFIG", str(path))

    assert load_config()["server"]["name"] == "payments"


def test_missing_sections_are_created(tmp_path):
    config = load_config(write_config(tmp_path, ""))

    assert config["server"] == {}
    assert config["logging"] == {}
    assert config["adyen"] == {"environment": "test"}


def test_live_requires_prefix(tmp_path):
    path = write_config(tmp_path, "adyen:\n  environment: live\n")

    with pytest.raises(ConfigurationError, match="live_endpoint_prefix"):
        load_config(path)
    assert load_config(path, validate=False)["adyen"]["environment"] == "live"


def test_unknown_environment(tmp_path):
    with pytest.raises(ConfigurationError, match="environment"):
        load_config(write_config(tmp_path, "adyen:\n  environment: staging\n"))


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path):
    with pytest.raises(ConfigurationError, match="YAML"):
        load_config(write_config(tmp_path, "adyen: [unclosed\n"))
