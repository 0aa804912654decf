"""Routes: an HTTP method and path bound to a handler function."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from .path_expression import PathExpression, tokenize_path

MIME_OCTET = "application/octet-stream"

_METHODS_WITHOUT_CONTENT_TYPE = frozenset({"GET", "HEAD", "OPTIONS", "DELETE", "TRACE"})
_CUSTOM_VERB = re.compile(r":([A-Za-z]+)$")


def _has_custom_verb(token: str) -> bool:
    return _CUSTOM_VERB.search(token) is not None


def _remove_custom_verb(token: str) -> str:
    return _CUSTOM_VERB.sub("", token)


def _media_types(text: str) -> Iterator[str]:
    """Yield the media types of a comma separated header value, without parameters."""
    parts = text.split(",")
    if len(parts) > 1 and parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part.split(";", 1)[0].strip(" ")


@dataclass
class Route:
    """Binds an HTTP method, a path and media types to a handler function."""

    method: str = ""
    path: str = ""
    produces: List[str] = field(default_factory=list)
    consumes: List[str] = field(default_factory=list)
    function: Optional[Callable[[Any, Any], Any]] = None
    filters: List[Callable[..., Any]] = field(default_factory=list)
    conditions: List[Callable[[Any], bool]] = field(default_factory=list)
    relative_path: str = ""
    path_expr: Optional[PathExpression] = None
    doc: str = ""
    notes: str = ""
    operation: str = ""
    parameter_docs: List[Any] = field(default_factory=list)
    response_errors: Optional[Dict[int, Any]] = None
    default_response: Optional[Any] = None
    read_sample: Any = None
    write_sample: Any = None
    metadata: Optional[Dict[str, Any]] = None
    extensions: Optional[Dict[str, Any]] = None
    deprecated: bool = False
    content_encoding_enabled: Optional[bool] = None
    allowed_methods_without_content_type: List[str] = field(default_factory=list)
    path_parts: List[str] = field(init=False, default_factory=list)
    has_custom_verb: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.path_parts = tokenize_path(self.path)
        self.has_custom_verb = _has_custom_verb(self.path)

    def matches_accept(self, mime_types_with_quality: str) -> bool:
        """Tell whether this route can produce one of the accepted media types."""
        for mime_type in _media_types(mime_types_with_quality):
            if mime_type == "*/*":
                return True
            if any(each == "*/*" or each == mime_type for each in self.produces):
                return True
        return False

    def matches_content_type(self, mime_types: str) -> bool:
        """Tell whether this route can consume content of the given type (may be empty)."""
        if not self.consumes:
            return True
        if not mime_types:
            if self.allowed_methods_without_content_type:
                if self.method in self.allowed_methods_without_content_type:
                    return True
            elif self.method in _METHODS_WITHOUT_CONTENT_TYPE:
                return True
            mime_types = MIME_OCTET
        for mime_type in _media_types(mime_types):
            if any(each == "*/*" or each == mime_type for each in self.consumes):
                return True
        return False

    def enable_content_encoding(self, enabled: bool) -> None:
        """Override the container's choice of compressing responses of this route."""
        self.content_encoding_enabled = enabled

    def __str__(self) -> str:
        return f"{self.method} {self.path}"