"""
Unit tests for BuilderConfig, the path info builder and the error types.
"""

import logging

import pytest

from requestbuilder import BuilderConfig, setup_logging
from requestbuilder.errors import (
    BuilderLockedError,
    IllegalStateError,
    RequestBuilderError,
    ResponseCommittedError,
    UnsupportedOperationError,
)
from requestbuilder.request.path_info import RequestPathInfo, UriBuilder
from requestbuilder.resource import SyntheticResource


class TestBuilderConfig:
    """Tests for BuilderConfig."""

    def test_defaults(self):
        """Test that defaults describe http://localhost/."""
        config = BuilderConfig()

        assert config.scheme == "http"
        assert config.server_name == "localhost"
        assert config.server_port == 80
        assert config.context_path == ""
        config.validate()

    def test_from_env(self, monkeypatch):
        """Test loading from environment variables."""
        monkeypatch.setenv("REQUESTBUILDER_SCHEME", "https")
        monkeypatch.setenv("REQUESTBUILDER_SERVER_PORT", "8443")
        monkeypatch.setenv("REQUESTBUILDER_CONTEXT_PATH", "/ctx")

        config = BuilderConfig.from_env()

        assert config.scheme == "https"
        assert config.server_port == 8443
        assert config.context_path == "/ctx"
        assert config.server_name == "localhost"

    @pytest.mark.parametrize("kwargs", [
        {"scheme": "ftp"},
        {"server_port": 0},
        {"server_port": 70000},
        {"context_path": "ctx"},
        {"servlet_path": "servlet"},
        {"buffer_size": 0},
        {"default_charset": "no-such-charset"},
    ])
    def test_validate_rejects(self, kwargs):
        """Test fail-fast validation."""
        with pytest.raises(ValueError):
            BuilderConfig(**kwargs).validate()

    def test_setup_logging(self):
        """Test that the package logger gets the configured level."""
        setup_logging(BuilderConfig(log_level="debug"))

        assert logging.getLogger("requestbuilder").level == logging.DEBUG


class TestUriBuilder:
    """Tests for UriBuilder and RequestPathInfo."""

    def test_build(self):
        """Test a fully specified path info."""
        info = (UriBuilder.create_from(SyntheticResource("/content/page"))
            .set_selectors(["a", "b"])
            .set_extension("json")
            .set_suffix("/x")
            .to_request_path_info())

        assert info == RequestPathInfo("/content/page", ("a", "b"), "json", "/x")
        assert str(info) == "/content/page.a.b.json/x"

    def test_no_selectors(self):
        """Test that missing selectors give no selector string."""
        info = UriBuilder("/content/page").set_selectors(None).to_request_path_info()

        assert info.selectors == ()
        assert info.selector_string is None

    def test_suffix_resource_without_resolver(self):
        """Test suffix lookup without a resolver."""
        info = UriBuilder("/content/page").set_suffix("/x").to_request_path_info()

        assert info.get_suffix_resource() is None

    def test_requires_resource(self):
        """Test that a None resource is rejected."""
        with pytest.raises(ValueError):
            UriBuilder.create_from(None)


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        """Test that errors are catchable by their built-in bases."""
        assert issubclass(BuilderLockedError, IllegalStateError)
        assert issubclass(ResponseCommittedError, RuntimeError)
        assert issubclass(UnsupportedOperationError, NotImplementedError)
        assert issubclass(IllegalStateError, RequestBuilderError)

    def test_unsupported_message(self):
        """Test that the operation is named."""
        error = UnsupportedOperationError("login")

        assert error.operation == "login"
        assert str(error) == "login is not supported"
