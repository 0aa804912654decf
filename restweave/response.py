"""Wrapper around an HTTP response that tracks status, length and errors."""

from __future__ import annotations

import io
from typing import Any, BinaryIO, Dict, List, Optional, Tuple

from .message import Headers, HttpRequest
from .request import Request
from .route import Route

PRETTY_PRINT_RESPONSES = True


class Response:
    """Collects the status, headers and body written for a request."""

    def __init__(
        self,
        stream: Optional[BinaryIO] = None,
        *,
        request_accept: str = "",
        route_produces: Optional[List[str]] = None,
        pretty: Optional[bool] = None,
    ) -> None:
        self.stream: BinaryIO = io.BytesIO() if stream is None else stream
        self.headers = Headers()
        self.request_accept = request_accept
        self.route_produces: List[str] = [] if route_produces is None else list(route_produces)
        self._pretty = PRETTY_PRINT_RESPONSES if pretty is None else pretty
        self._status_code = 200
        self._content_length = 0
        self._error: Optional[BaseException] = None

    def __repr__(self) -> str:
        return f"Response(status={self._status_code}, length={self._content_length})"

    @property
    def pretty(self) -> bool:
        """Whether JSON or XML output is indented."""
        return self._pretty

    def add_header(self, header: str, value: str) -> "Response":
        """Append a header value."""
        self.headers.add(header, value)
        return self

    def pretty_print(self, be_pretty: bool) -> None:
        """Choose whether output is indented."""
        self._pretty = bool(be_pretty)

    def set_request_accepts(self, mime: str) -> None:
        """Tell the response which media types the request accepts."""
        self.request_accept = mime

    def internal_server_error(self) -> "Response":
        """Write status 500."""
        self.write_header(500)
        return self

    def write_header(self, http_status: int) -> None:
        """Set the status code of the response."""
        self._status_code = http_status

    def write(self, data: bytes) -> int:
        """Write body bytes and count them; errors of the stream propagate."""
        written = self.stream.write(data)
        if written is None:
            written = len(data)
        self._content_length += written
        return written

    def status_code(self) -> int:
        """The status code written so far; 200 when none was written."""
        return self._status_code or 200

    def content_length(self) -> int:
        """Number of body bytes written through this response."""
        return self._content_length

    def write_error(self, http_status: int, error: Optional[BaseException]) -> None:
        """Write the status and the error text; ``error`` may be None."""
        self._error = error
        self.write_error_string(http_status, "" if error is None else str(error))

    def write_error_string(self, http_status: int, reason: str) -> None:
        """Write an error status with the reason as body."""
        if self._error is None:
            self._error = Exception(reason)
        self.write_header(http_status)
        self.write(reason.encode("utf-8"))

    def error(self) -> Optional[BaseException]:
        """The error recorded by write_error or write_error_string."""
        return self._error


def wrap_request_response(
    route: Route, http_request: HttpRequest, path_params: Dict[str, str]
) -> Tuple[Request, Response]:
    """Create the Request and Response used to call the handler of ``route``."""
    request = Request(http_request, path_parameters=path_params, selected_route=route)
    response = Response(
        request_accept=http_request.headers.get("Accept"),
        route_produces=route.produces,
    )
    return request, response