import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict

import yaml

from .errors import SettingsError

logger = logging.getLogger("coupon_cart.config")


@dataclass
class Settings:
    env: str = "development"
    log_level: str = "INFO"
    round_digits: int = 2
    config_dir: str = "configs"
    values: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        """Dotted lookup into the merged YAML, e.g. ``"receipt.round_digits"``."""
        value = self.values
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value


def _read_yaml(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise SettingsError("config file must hold a mapping", {"path": path})
    logger.debug("loaded config %s", path)
    return data


def load_settings(environ: Dict[str, str] = None) -> Settings:
    env = os.environ if environ is None else environ
    settings = Settings(
        env=env.get("CART_ENV", "development"),
        config_dir=env.get("CART_CONFIG_DIR", "configs"),
    )

    values = _read_yaml(os.path.join(settings.config_dir, f"{settings.env}.yaml"))
    # common.yaml never overrides environment specific keys
    for key, value in _read_yaml(os.path.join(settings.config_dir, "common.yaml")).items():
        values.setdefault(key, value)
    settings.values = values

    # environment variables win over YAML
    level = str(env.get("CART_LOG_LEVEL") or settings.get("log_level", settings.log_level)).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise SettingsError("unknown log level", {"log_level": level})
    settings.log_level = level

    digits = env.get("CART_ROUND_DIGITS")
    if digits is None:
        digits = settings.get("receipt.round_digits", settings.round_digits)
    try:
        settings.round_digits = int(digits)
    except (TypeError, ValueError):
        raise SettingsError("round digits must be an integer", {"round_digits": digits}) from None
    return settings
