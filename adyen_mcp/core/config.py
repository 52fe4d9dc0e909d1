import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from adyen_mcp.core.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

ENVIRONMENTS = ("test", "live")

# environment variable -> (section, key)
ENV_OVERRIDES = {
    "ADYEN_API_KEY": ("adyen", "api_key"),
    "ADYEN_ENVIRONMENT": ("adyen", "environment"),
    "ADYEN_LIVE_ENDPOINT_PREFIX": ("adyen", "live_endpoint_prefix"),
}


def load_config(config_path: Optional[str | Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Read the YAML configuration and apply ADYEN_* environment overrides.

    The path defaults to $ADYEN_MCP_CONFIG, then to the config.yaml shipped
    with the package. Missing sections are created empty so callers can use
    ``config["adyen"].get(...)`` without guarding. Pass ``validate=False``
    when more overrides (CLI flags) are still to be applied.
    """
    if config_path is None:
        config_path = os.environ.get("ADYEN_MCP_CONFIG") or DEFAULT_CONFIG_PATH
    config_path = Path(config_path).resolve()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError as e:
        raise ConfigurationError(f"Config file not found: {config_path}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Config file {config_path} is not valid YAML: {e}") from e

    for section in ("server", "adyen", "logging"):
        if not isinstance(config.get(section), dict):
            config[section] = {}

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            config[section][key] = value

    if validate:
        validate_config(config)
    return config


def validate_config(config: Dict[str, Any]) -> None:
    adyen_cfg = config["adyen"]
    environment = str(adyen_cfg.get("environment") or "test").lower()
    if environment not in ENVIRONMENTS:
        raise ConfigurationError(
            f"adyen.environment must be one of {', '.join(ENVIRONMENTS)}, got '{environment}'"
        )
    adyen_cfg["environment"] = environment
    if environment == "live" and not adyen_cfg.get("live_endpoint_prefix"):
        raise ConfigurationError("adyen.live_endpoint_prefix must be set when environment is 'live'")

