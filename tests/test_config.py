"""Tests for justcms.config."""

import pytest
from pydantic import ValidationError

from justcms.config import JustCmsConfig, get_config


class TestJustCmsConfig:
    def test_explicit_values(self):
        config = JustCmsConfig(api_token="t", project_id="p")
        assert config.api_token == "t"
        assert config.project_id == "p"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("JUSTCMS_API_TOKEN", "env-token")
        monkeypatch.setenv("JUSTCMS_PROJECT_ID", "env-project")
        config = JustCmsConfig()
        assert config.api_token == "env-token"
        assert config.project_id == "env-project"

    def test_defaults_to_empty(self, monkeypatch, tmp_path):
        monkeypatch.delenv("JUSTCMS_API_TOKEN", raising=False)
        monkeypatch.delenv("JUSTCMS_PROJECT_ID", raising=False)
        monkeypatch.chdir(tmp_path)
        config = JustCmsConfig()
        assert config.api_token == ""
        assert config.project_id == ""

    def test_is_immutable(self):
        config = JustCmsConfig(api_token="t", project_id="p")
        with pytest.raises(ValidationError):
            config.api_token = "other"

    def test_get_config_is_cached(self, monkeypatch):
        monkeypatch.setenv("JUSTCMS_API_TOKEN", "cached")
        get_config.cache_clear()
        try:
            assert get_config() is get_config()
            assert get_config().api_token == "cached"
        finally:
            get_config.cache_clear()
