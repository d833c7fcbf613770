"""
HTTP response signalling for rejected requests.

``HTTPResponse`` is both a plain response description and an exception, so
an adapter can either return it or raise it to stop request handling early.
"""

from typing import Any, Dict, Optional


class HTTPResponse(Exception):
    """
    Response that should be sent instead of running the request handler.

    Attributes:
        status: HTTP status code (e.g., 400)
        body: Response body (JSON-serializable)
        headers: HTTP headers to include
        status_message: Reason phrase for the status line
        content_type: Content-Type header value

    Example:
        >>> raise HTTPResponse(
        ...     status=400,
        ...     body={"error_code": "EBADPARAM"},
        ...     status_message="bad request",
        ... )
    """

    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        headers: Optional[Dict[str, str]] = None,
        status_message: Optional[str] = None,
        content_type: str = "application/json",
    ):
        self.status = status
        self.body = body
        self.headers = dict(headers or {})
        self.status_message = status_message
        self.content_type = content_type
        if "Content-Type" not in self.headers:
            self.headers["Content-Type"] = content_type
        super().__init__(f"HTTP {status}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation for response."""
        return {
            "status": self.status,
            "status_message": self.status_message,
            "body": self.body,
            "headers": self.headers,
            "content_type": self.content_type,
        }
