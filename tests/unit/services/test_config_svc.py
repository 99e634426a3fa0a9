"""Unit tests for ConfigService.

YAML files are written to tmp_path; the working directory and the
environment are isolated with monkeypatch.
"""

import pytest
import yaml

from smartlinker.components.smartlink.odesli_client_comp import ODESLI_API_URL
from smartlinker.services import config_svc
from smartlinker.services.config_svc import ConfigService


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run every test from an empty directory with no SMARTLINKER_* variables."""
    import os

    for key in list(os.environ):
        if key.startswith("SMARTLINKER_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    real_load_yaml = ConfigService._load_yaml

    def load_yaml_without_system_file(self, path):
        if path == "/etc/smartlinker/config.yaml":
            return {}
        return real_load_yaml(self, path)

    monkeypatch.setattr(config_svc.ConfigService, "_load_yaml", load_yaml_without_system_file)
    return tmp_path


def _write_yaml(path, data) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestDefaults:
    @pytest.mark.unit
    def test_defaults(self) -> None:
        service = ConfigService()
        assert service.get("db_path") == "./data/smartlinks.sqlite"
        assert service.get("log_level") == "INFO"
        assert service.get("resolver.base_url") == ODESLI_API_URL

    @pytest.mark.unit
    def test_missing_and_null_values_use_default(self) -> None:
        service = ConfigService()
        assert service.get("nope.nested", "fallback") == "fallback"
        assert service.get("resolver.timeout_s", 10) == 10

    @pytest.mark.unit
    def test_resolver_config_defaults(self) -> None:
        cfg = ConfigService().make_resolver_config()
        assert cfg.base_url == ODESLI_API_URL
        assert cfg.proxy_url is None
        assert cfg.user_country is None
        assert cfg.timeout_s is None


class TestSources:
    @pytest.mark.unit
    def test_local_yaml_is_merged(self, isolated_env) -> None:
        _write_yaml(isolated_env / "config" / "config.yaml", {"resolver": {"user_country": "GB"}})

        service = ConfigService()

        assert service.get("resolver.user_country") == "GB"
        assert service.get("resolver.base_url") == ODESLI_API_URL

    @pytest.mark.unit
    def test_config_path_env_overrides_local_yaml(self, isolated_env, monkeypatch) -> None:
        _write_yaml(isolated_env / "config" / "config.yaml", {"db_path": "/local.sqlite"})
        custom = _write_yaml(isolated_env / "custom.yaml", {"db_path": "/custom.sqlite"})
        monkeypatch.setenv("SMARTLINKER_CONFIG_PATH", custom)

        assert ConfigService().get("db_path") == "/custom.sqlite"

    @pytest.mark.unit
    def test_overrides_then_env(self, monkeypatch) -> None:
        service = ConfigService(overrides={"db_path": "/override.sqlite", "log_level": "WARNING"})
        monkeypatch.setenv("SMARTLINKER_LOG_LEVEL", "DEBUG")

        assert service.get("db_path") == "/override.sqlite"
        assert service.get("log_level") == "DEBUG"

    @pytest.mark.unit
    def test_nested_env_override_is_typed(self, monkeypatch) -> None:
        monkeypatch.setenv("SMARTLINKER_RESOLVER_TIMEOUT_S", "15")
        monkeypatch.setenv("SMARTLINKER_RESOLVER_PROXY_URL", "https://api.allorigins.win/get")

        cfg = ConfigService().make_resolver_config()

        assert cfg.timeout_s == 15.0
        assert cfg.proxy_url == "https://api.allorigins.win/get"

    @pytest.mark.unit
    def test_invalid_yaml_is_ignored(self, isolated_env) -> None:
        bad = isolated_env / "config" / "config.yaml"
        bad.parent.mkdir()
        bad.write_text("resolver: [unclosed", encoding="utf-8")

        assert ConfigService().get("db_path") == "./data/smartlinks.sqlite"

    @pytest.mark.unit
    def test_non_mapping_yaml_is_ignored(self, isolated_env) -> None:
        _write_yaml(isolated_env / "config" / "config.yaml", ["a", "b"])
        assert ConfigService().get("log_level") == "INFO"


class TestCaching:
    @pytest.mark.unit
    def test_config_is_cached_until_reload(self, monkeypatch) -> None:
        service = ConfigService()
        assert service.get("log_level") == "INFO"

        monkeypatch.setenv("SMARTLINKER_LOG_LEVEL", "ERROR")
        assert service.get("log_level") == "INFO"

        service.reload()
        assert service.get("log_level") == "ERROR"


class TestParseEnvValue:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("true", True), ("FALSE", False), ("none", None), ("", None), ("42", 42), ("2.5", 2.5), ("GB", "GB")],
    )
    def test_parse(self, raw, expected) -> None:
        assert ConfigService._parse_env_value(raw) == expected
