"""Tests for error_handler and custom exceptions."""

from __future__ import annotations

import pytest

from webflow_cli.client.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    WebflowCLIError,
    error_handler,
)


class TestExceptionHierarchy:
    def test_base_error(self):
        exc = WebflowCLIError("test")
        assert str(exc) == "test"
        assert exc.exit_code == 1

    def test_transport_error(self):
        exc = TransportError("cannot connect")
        assert isinstance(exc, WebflowCLIError)
        assert exc.exit_code == 2

    def test_api_error(self):
        exc = ApiError(400, "ValidationError", status_code=400)
        assert isinstance(exc, WebflowCLIError)
        assert exc.exit_code == 3
        assert exc.code == 400
        assert exc.name == "ValidationError"
        assert exc.status_code == 400
        assert str(exc) == "api returned an error (400): ValidationError"

    def test_api_error_without_status(self):
        exc = ApiError(2, "UnknownError")
        assert exc.status_code is None

    def test_decode_error(self):
        exc = DecodeError("bad json")
        assert isinstance(exc, WebflowCLIError)
        assert exc.exit_code == 4

    def test_serialization_error(self):
        exc = SerializationError("cannot encode")
        assert isinstance(exc, WebflowCLIError)
        assert exc.exit_code == 5

    def test_configuration_error(self):
        exc = ConfigurationError("missing webflow authentication token")
        assert isinstance(exc, WebflowCLIError)
        assert exc.exit_code == 6

    def test_request_construction_error(self):
        exc = RequestConstructionError("bad url")
        assert isinstance(exc, WebflowCLIError)
        assert exc.exit_code == 7


class TestErrorHandler:
    def test_catches_api_error(self):
        @error_handler
        def raises_api():
            raise ApiError(401, "Unauthorized")

        with pytest.raises(SystemExit) as exc_info:
            raises_api()
        assert exc_info.value.code == 3

    def test_catches_configuration_error(self):
        @error_handler
        def raises_config():
            raise ConfigurationError("no token")

        with pytest.raises(SystemExit) as exc_info:
            raises_config()
        assert exc_info.value.code == 6

    def test_catches_value_error(self):
        @error_handler
        def raises_value():
            raise ValueError("page must be non-negative")

        with pytest.raises(SystemExit) as exc_info:
            raises_value()
        assert exc_info.value.code == 1

    def test_passes_through_normal_return(self):
        @error_handler
        def returns_value():
            return 42

        assert returns_value() == 42

    def test_does_not_catch_other_exceptions(self):
        @error_handler
        def raises_type_error():
            raise TypeError("bad type")

        with pytest.raises(TypeError):
            raises_type_error()
