"""
Tests for the request validation middleware and its settings.
"""

import logging
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from param_schema import (
    HTTPResponse,
    SchemaValidatorMiddleware,
    ValidatorSettings,
    merge_request_data,
)
from param_schema.settings import parse_validator_settings


SCHEMA = [
    {"name": "id", "type": "int", "min": 1},
    {"name": "verbose", "type": "boolean", "optional": True},
]


class TestMergeRequestData:
    """Source precedence when building the data bag."""

    def test_later_sources_win(self):
        data = merge_request_data(
            path_params={"id": "1", "a": "path"},
            query_params={"a": "query", "b": "query"},
            body={"b": "body"},
        )
        assert data == {"id": "1", "a": "query", "b": "body"}

    def test_non_mapping_body_ignored(self):
        assert merge_request_data({"id": "1"}, None, "raw text") == {"id": "1"}

    def test_sources_not_mutated(self):
        path_params = {"id": "1"}
        merge_request_data(path_params, {"id": "2"})
        assert path_params == {"id": "1"}


class TestSchemaValidatorMiddleware:
    """Validation, error callback and rejection responses."""

    def test_valid_request_proceeds_with_coerced_data(self):
        middleware = SchemaValidatorMiddleware(SCHEMA)
        result = middleware.process(path_params={"id": "42"}, query_params={"verbose": "1"})
        assert result.proceed is True
        assert result.data == {"id": 42, "verbose": True}
        assert result.errors == []
        assert result.response is None

    def test_rejection_without_debug_hides_errors(self):
        middleware = SchemaValidatorMiddleware(SCHEMA)
        result = middleware.process(query_params={"id": "0"})
        assert result.proceed is False
        assert len(result.errors) == 1
        response = result.response
        assert isinstance(response, HTTPResponse)
        assert response.status == 400
        assert response.status_message == "bad request"
        assert response.body == {
            "code": 400,
            "error_code": "EBADPARAM",
            "message": "bad request",
            "data": None,
        }
        assert response.headers["Content-Type"] == "application/json"

    def test_rejection_with_debug_includes_errors(self):
        middleware = SchemaValidatorMiddleware(SCHEMA, settings=ValidatorSettings(debug=True))
        result = middleware.process(body={"id": "x", "verbose": "maybe"})
        assert result.response.body["data"] == [
            {"name": "id", "type": "int", "value": "x", "description": "not a number"},
            {"name": "verbose", "type": "boolean", "value": "maybe", "description": "not boolean"},
        ]

    def test_error_callback_can_accept(self):
        on_error = Mock(return_value=True)
        request, response = object(), object()
        middleware = SchemaValidatorMiddleware(SCHEMA, on_error=on_error)
        result = middleware.process(body={}, request=request, response=response)
        assert result.proceed is True
        assert result.response is None
        on_error.assert_called_once_with(result.errors, request, response)

    def test_error_callback_can_refuse(self):
        on_error = Mock(return_value=None)
        middleware = SchemaValidatorMiddleware(SCHEMA, on_error=on_error)
        result = middleware.process(body={})
        assert result.proceed is False
        assert result.response.status == 400

    def test_error_callback_not_called_on_success(self):
        on_error = Mock(return_value=False)
        middleware = SchemaValidatorMiddleware(SCHEMA, on_error=on_error)
        assert middleware(path_params={"id": "3"}).proceed
        on_error.assert_not_called()

    def test_enforce_returns_data(self):
        middleware = SchemaValidatorMiddleware(SCHEMA)
        assert middleware.enforce(path_params={"id": "7"}) == {"id": 7}

    def test_enforce_raises_rejection(self):
        middleware = SchemaValidatorMiddleware(SCHEMA)
        with pytest.raises(HTTPResponse) as exc_info:
            middleware.enforce(query_params={"id": "-1"})
        assert exc_info.value.status == 400
        assert exc_info.value.to_dict()["body"]["error_code"] == "EBADPARAM"

    def test_custom_rejection_settings(self):
        settings = ValidatorSettings(status_code=422, error_code="EINVALID", message="invalid")
        middleware = SchemaValidatorMiddleware(SCHEMA, settings=settings)
        response = middleware.process().response
        assert response.status == 422
        assert response.body["code"] == 422
        assert response.body["error_code"] == "EINVALID"
        assert response.status_message == "invalid"

    def test_schema_parsed_once(self):
        middleware = SchemaValidatorMiddleware(SCHEMA)
        assert [s.name for s in middleware.schema] == ["id", "verbose"]

    def test_invalid_schema_rejected_at_construction(self):
        with pytest.raises(ValueError):
            SchemaValidatorMiddleware([{"name": "id", "type": "uuid"}])

    def test_rejection_logged(self, caplog):
        middleware = SchemaValidatorMiddleware(SCHEMA)
        with caplog.at_level(logging.DEBUG, logger="param_schema.middleware"):
            middleware.process()
        assert "Rejecting request: 1 validation error(s)" in caplog.text


class TestValidatorSettings:
    """Settings model and environment handling."""

    def test_defaults(self):
        settings = ValidatorSettings()
        assert settings.debug is False
        assert settings.status_code == 400
        assert settings.error_code == "EBADPARAM"
        assert settings.message == "bad request"

    def test_status_code_must_be_error(self):
        with pytest.raises(ValidationError):
            ValidatorSettings(status_code=200)

    @pytest.mark.parametrize(
        "environ,expected",
        [
            ({}, False),
            ({"DEBUG": "true"}, True),
            ({"DEBUG": "TRUE"}, True),
            ({"DEBUG": "1"}, False),
            ({"PARAM_SCHEMA_DEBUG": "true", "DEBUG": "false"}, True),
            ({"PARAM_SCHEMA_DEBUG": "false", "DEBUG": "true"}, False),
        ],
    )
    def test_from_env(self, environ, expected):
        assert ValidatorSettings.from_env(environ).debug is expected

    def test_from_env_overrides(self):
        settings = ValidatorSettings.from_env({"DEBUG": "true"}, debug=False, status_code=422)
        assert settings.debug is False
        assert settings.status_code == 422

    def test_parse_settings_section(self):
        settings = parse_validator_settings({"validation": {"debug": True}})
        assert settings.debug is True

    def test_parse_settings_missing_section(self):
        assert parse_validator_settings({}) == ValidatorSettings()

    def test_parse_settings_invalid_section(self):
        with pytest.raises(ValueError):
            parse_validator_settings({"validation": "on"})
