"""
Request Validation Middleware.

Provides the SchemaValidatorMiddleware class that handles:
- Merging path parameters, query parameters and body into one data bag
- Validating and coercing the bag against field schemas
- An optional error callback that may let a failed request through
- Building the 400 EBADPARAM rejection response

The middleware is framework-agnostic: the web adapter passes in the request
sources and, when ``proceed`` is False, sends ``result.response``.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from .http import HTTPResponse
from .settings import ValidatorSettings
from .validation import Schema, SchemaError, parse_schemas, validate

logger = logging.getLogger(__name__)


SchemaErrorCallback = Callable[[List[SchemaError], Any, Any], Optional[bool]]


def merge_request_data(
    path_params: Optional[Mapping[str, Any]] = None,
    query_params: Optional[Mapping[str, Any]] = None,
    body: Any = None,
) -> Dict[str, Any]:
    """
    Shallow-merge request sources into a fresh data bag.

    Later sources win on key collision: path parameters, then query
    parameters, then body fields. Sources that are not mappings (e.g. a
    raw text body) contribute nothing.
    """
    data: Dict[str, Any] = {}
    for source in (path_params, query_params, body):
        if isinstance(source, Mapping):
            data.update(source)
    return data


class MiddlewareResult:
    """
    Result of validating one request.

    Attributes:
        proceed: Whether the request handler should run
        data: Coerced data bag
        errors: Validation errors (empty on success)
        response: Rejection response when ``proceed`` is False
    """

    def __init__(
        self,
        proceed: bool,
        data: Dict[str, Any],
        errors: List[SchemaError],
        response: Optional[HTTPResponse] = None,
    ):
        self.proceed = proceed
        self.data = data
        self.errors = errors
        self.response = response

    def __bool__(self) -> bool:
        return self.proceed


class SchemaValidatorMiddleware:
    """
    Validation middleware for HTTP request parameters.

    Usage:
        >>> middleware = SchemaValidatorMiddleware(
        ...     [{"name": "id", "type": "int", "min": 1}],
        ...     settings=ValidatorSettings(debug=True),
        ... )
        >>> result = middleware.process(path_params={"id": "42"})
        >>> result.proceed, result.data
        (True, {'id': 42})
    """

    def __init__(
        self,
        schema: Sequence[Union[Schema, Dict[str, Any]]],
        on_error: Optional[SchemaErrorCallback] = None,
        settings: Optional[ValidatorSettings] = None,
    ):
        """
        Initialize validator middleware.

        Args:
            schema: Top-level field schemas (instances or dict form)
            on_error: Called as ``on_error(errors, request, response)`` when
                validation fails; a truthy return lets the request proceed
            settings: Rejection response configuration
        """
        self._schema = parse_schemas(schema)
        self._on_error = on_error
        self._settings = settings or ValidatorSettings()

    @property
    def schema(self) -> List[Schema]:
        """Get the top-level field schemas."""
        return self._schema

    @property
    def settings(self) -> ValidatorSettings:
        """Get the middleware settings."""
        return self._settings

    def process(
        self,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        request: Any = None,
        response: Any = None,
    ) -> MiddlewareResult:
        """
        Validate one request.

        Args:
            path_params: Route parameters
            query_params: Query string parameters
            body: Parsed request body
            request: Framework request object, passed to ``on_error``
            response: Framework response object, passed to ``on_error``

        Returns:
            MiddlewareResult; ``data`` holds the coerced bag either way
        """
        data = merge_request_data(path_params, query_params, body)
        result = validate(self._schema, data)

        if result.valid:
            return MiddlewareResult(proceed=True, data=data, errors=[])

        if self._on_error is not None and self._on_error(result.errors, request, response):
            logger.debug(
                "Request accepted by error callback despite %d validation error(s)",
                len(result.errors),
            )
            return MiddlewareResult(proceed=True, data=data, errors=result.errors)

        logger.debug("Rejecting request: %d validation error(s)", len(result.errors))
        return MiddlewareResult(
            proceed=False,
            data=data,
            errors=result.errors,
            response=self.build_rejection(result.errors),
        )

    __call__ = process

    def enforce(self, **sources: Any) -> Dict[str, Any]:
        """
        Validate one request and return its coerced data.

        Takes the same keyword arguments as ``process``.

        Raises:
            HTTPResponse: The rejection response, if the request is refused
        """
        result = self.process(**sources)
        if not result.proceed:
            raise result.response
        return result.data

    def build_rejection(self, errors: List[SchemaError]) -> HTTPResponse:
        """Build the bad-parameter response, with error details only in debug."""
        settings = self._settings
        details = [e.to_dict() for e in errors] if settings.debug else None
        return HTTPResponse(
            status=settings.status_code,
            body={
                "code": settings.status_code,
                "error_code": settings.error_code,
                "message": settings.message,
                "data": details,
            },
            status_message=settings.message,
        )
