"""Config service: layered YAML + environment configuration.

Sources, lowest precedence first:
  1) built-in defaults
  2) /etc/smartlinker/config.yaml
  3) ./config/config.yaml (relative to the working directory)
  4) the file named by $SMARTLINKER_CONFIG_PATH
  5) overrides passed to ConfigService
  6) SMARTLINKER_<KEY> / SMARTLINKER_<SECTION>_<FIELD> environment variables

Missing or unreadable files are skipped with a warning, never fatal.
"""

from __future__ import annotations

import copy
import logging
import os
from typing import Any

import yaml

from smartlinker.components.smartlink.odesli_client_comp import ODESLI_API_URL, ResolverConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "SMARTLINKER_"
CONFIG_PATH_ENV = "SMARTLINKER_CONFIG_PATH"
SYSTEM_CONFIG_FILE = "/etc/smartlinker/config.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "db_path": "./data/smartlinks.sqlite",
    "log_level": "INFO",
    "resolver": {
        "base_url": ODESLI_API_URL,
        "proxy_url": None,  # e.g. https://api.allorigins.win/get
        "user_country": None,
        "timeout_s": None,  # no timeout
    },
}


class ConfigService:
    """
    Composes configuration once and serves lookups from the cached result.

    Example:
        >>> config = ConfigService(overrides={"log_level": "DEBUG"})
        >>> config.get("resolver.base_url")
        'https://api.song.link/v1-alpha.1/links'
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """
        Args:
            overrides: Values layered on top of YAML files but below env vars
        """
        self._overrides = overrides or {}
        self._cache: dict[str, Any] | None = None

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """Return the full composed configuration, composing it on first use."""
        if force_reload or self._cache is None:
            self._cache = self._compose()
        return self._cache

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Read a value by dotted path ("resolver.timeout_s").

        Returns ``default`` when any segment is missing or the value is null.
        """
        value: Any = self.get_config()
        for segment in key_path.split("."):
            if not isinstance(value, dict) or segment not in value:
                return default
            value = value[segment]
        return default if value is None else value

    def reload(self) -> dict[str, Any]:
        """Drop the cache and compose again from every source."""
        logger.info("Reloading configuration")
        return self.get_config(force_reload=True)

    def make_resolver_config(self) -> ResolverConfig:
        """Typed resolver settings for OdesliClient."""
        timeout = self.get("resolver.timeout_s")
        return ResolverConfig(
            base_url=str(self.get("resolver.base_url", ODESLI_API_URL)),
            proxy_url=self.get("resolver.proxy_url") or None,
            user_country=self.get("resolver.user_country") or None,
            timeout_s=float(timeout) if timeout is not None else None,
        )

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        cfg = copy.deepcopy(DEFAULT_CONFIG)

        for path in self._config_files():
            self._deep_merge(cfg, self._load_yaml(path))
        self._deep_merge(cfg, self._overrides)
        self._apply_env_overrides(cfg)

        logger.debug(f"Configuration composed: db_path={cfg.get('db_path')} log_level={cfg.get('log_level')}")
        return cfg

    @staticmethod
    def _config_files() -> list[str]:
        files = [SYSTEM_CONFIG_FILE, os.path.join(os.getcwd(), "config", "config.yaml")]
        explicit = os.getenv(CONFIG_PATH_ENV)
        if explicit:
            files.append(explicit)
        return files

    def _deep_merge(self, base: dict[str, Any], extra: dict[str, Any]) -> dict[str, Any]:
        """Merge ``extra`` into ``base`` in place; nested dicts merge key by key."""
        for key, value in extra.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value
        return base

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """Read one YAML mapping; anything else yields {}."""
        if not os.path.isfile(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Skipping config file {path}: {e}")
            return {}
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            logger.warning(f"Skipping config file {path}: expected a mapping at top level")
            return {}
        logger.debug(f"Loaded config file {path}")
        return loaded

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Apply SMARTLINKER_* variables, e.g.:
          SMARTLINKER_DB_PATH=/data/links.sqlite          -> db_path
          SMARTLINKER_RESOLVER_TIMEOUT_S=15               -> resolver.timeout_s
        """
        for name, raw in os.environ.items():
            if not name.startswith(ENV_PREFIX) or name == CONFIG_PATH_ENV:
                continue

            key = name[len(ENV_PREFIX) :].lower()
            value = self._parse_env_value(raw)

            if key in cfg and not isinstance(cfg[key], dict):
                cfg[key] = value
                continue

            section, _, field = key.partition("_")
            if field and isinstance(cfg.get(section), dict):
                cfg[section][field] = value

    @staticmethod
    def _parse_env_value(raw: str) -> Any:
        """Coerce an env string to bool/None/int/float where it looks like one."""
        lowered = raw.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        if lowered in ("", "null", "none"):
            return None
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return float(raw)
        except ValueError:
            return raw
