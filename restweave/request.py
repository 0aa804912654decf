"""Wrapper around an HTTP request with access to parameters and attributes."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .message import HttpRequest
from .route import Route
from .route_reader import RouteReader


class Request:
    """An HTTP request together with its path parameters and request-scoped attributes."""

    def __init__(
        self,
        http_request: HttpRequest,
        path_parameters: Optional[Dict[str, str]] = None,
        selected_route: Optional[Route] = None,
    ) -> None:
        self.http_request = http_request
        self._path_parameters: Dict[str, str] = (
            {} if path_parameters is None else path_parameters
        )
        self._attributes: Dict[str, Any] = {}
        self._selected_route = selected_route

    def __repr__(self) -> str:
        return f"Request({self.http_request.method} {self.http_request.url})"

    def path_parameter(self, name: str) -> str:
        """The value of a path parameter, or an empty string."""
        return self._path_parameters.get(name, "")

    def path_parameters(self) -> Dict[str, str]:
        """All path parameter values by name."""
        return self._path_parameters

    def query_parameter(self, name: str) -> str:
        """The first value of a parameter; body form values come before the query string."""
        values = self.http_request.form().get(name) or self.http_request.query().get(name)
        return values[0] if values else ""

    def query_parameters(self, name: str) -> List[str]:
        """All values of a query string parameter."""
        return list(self.http_request.query().get(name, []))

    def body_parameter(self, name: str) -> str:
        """The first value of a URL-encoded body parameter, or an empty string."""
        values = self.http_request.form().get(name)
        return values[0] if values else ""

    def header_parameter(self, name: str) -> str:
        """The value of a header, or an empty string when missing."""
        return self.http_request.headers.get(name)

    def set_attribute(self, name: str, value: Any) -> None:
        """Add or replace a request-scoped attribute."""
        self._attributes[name] = value

    def attribute(self, name: str) -> Any:
        """The attribute with this name, or None."""
        return self._attributes.get(name)

    def selected_route_path(self) -> str:
        """Full path of the matched route, or an empty string when none matched."""
        return "" if self._selected_route is None else self._selected_route.path

    def selected_route(self) -> Optional[RouteReader]:
        """A read-only view of the matched route, or None."""
        if self._selected_route is None:
            return None
        return RouteReader(self._selected_route)