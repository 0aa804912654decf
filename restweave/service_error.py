"""Errors carrying an HTTP status code for the client."""

from __future__ import annotations

from typing import Any, Optional


class ServiceError(Exception):
    """An error with an HTTP status code, a message and optional headers."""

    def __init__(self, code: int, message: str = "", header: Optional[Any] = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.header = header

    def __str__(self) -> str:
        return f"[ServiceError:{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"ServiceError(code={self.code!r}, message={self.message!r}, header={self.header!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServiceError):
            return NotImplemented
        return (self.code, self.message, self.header) == (other.code, other.message, other.header)

    __hash__ = None  # type: ignore[assignment]


def new_error(code: int, message: str) -> ServiceError:
    """Create a ServiceError from a status code and a reason."""
    return ServiceError(code, message)


def new_error_with_header(code: int, message: str, header: Any) -> ServiceError:
    """Create a ServiceError carrying response headers."""
    return ServiceError(code, message, header)