"""Tests for config models."""

import pytest
from pydantic import ValidationError

from webflow_cli.config.models import CLIConfig, ClientSettings, WebflowProfile


class TestClientSettings:
    def test_defaults(self):
        s = ClientSettings()
        assert s.base_url == "https://api.webflow.com"
        assert s.timeout == 10.0
        assert s.page_size == 20
        assert s.api_version == "1.0.0"

    def test_frozen(self):
        s = ClientSettings()
        with pytest.raises(ValidationError):
            s.page_size = 5  # type: ignore[misc]

    def test_page_size_zero_allowed(self):
        assert ClientSettings(page_size=0).page_size == 0

    def test_negative_page_size(self):
        with pytest.raises(ValidationError):
            ClientSettings(page_size=-1)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ClientSettings(timeout=0)

    def test_base_url_must_be_http(self):
        with pytest.raises(ValidationError, match="URL must start with http"):
            ClientSettings(base_url="ftp://api.webflow.com")

    def test_base_url_strips_trailing_slash(self):
        assert ClientSettings(base_url="https://api.webflow.com/").base_url == "https://api.webflow.com"


class TestWebflowProfile:
    def test_create_with_token(self):
        p = WebflowProfile(name="main", token="abc")
        assert p.name == "main"
        assert p.token == "abc"
        assert p.auth_configured is True

    def test_create_no_token(self):
        p = WebflowProfile(name="main")
        assert p.auth_configured is False

    def test_defaults(self):
        p = WebflowProfile(name="main")
        assert p.base_url == "https://api.webflow.com"
        assert p.timeout == 10.0
        assert p.page_size == 20

    def test_timeout_max_600(self):
        with pytest.raises(ValidationError):
            WebflowProfile(name="main", timeout=601)

    def test_url_must_start_with_http(self):
        with pytest.raises(ValidationError, match="URL must start with http"):
            WebflowProfile(name="main", base_url="api.webflow.com")

    def test_to_settings(self):
        p = WebflowProfile(
            name="main", token="abc", base_url="http://localhost:9000",
            timeout=5.0, page_size=50,
        )
        s = p.to_settings()
        assert s == ClientSettings(base_url="http://localhost:9000", timeout=5.0, page_size=50)


class TestCLIConfig:
    def test_empty_config(self):
        c = CLIConfig()
        assert c.default_profile is None
        assert c.default_format == "table"
        assert c.profiles == {}

    def test_config_with_profiles(self):
        p = WebflowProfile(name="dev", token="t")
        c = CLIConfig(default_profile="dev", profiles={"dev": p})
        assert c.default_profile == "dev"
        assert "dev" in c.profiles
