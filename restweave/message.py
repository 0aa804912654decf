"""Plain HTTP request values: headers, URL, body."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
from urllib.parse import parse_qs, unquote, urlsplit

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})
_FORM_MEDIA = "application/x-www-form-urlencoded"


def _canonical(name: str) -> str:
    if not name or any(c in name for c in " \t\r\n:"):
        return name
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


class Headers:
    """Case-insensitive, multi-valued HTTP header map."""

    def __init__(
        self, initial: Optional[Mapping[str, Union[str, Iterable[str]]]] = None
    ) -> None:
        self._values: Dict[str, List[str]] = {}
        if initial is not None:
            for name, value in initial.items():
                if isinstance(value, str):
                    self.add(name, value)
                else:
                    for each in value:
                        self.add(name, each)

    def add(self, name: str, value: str) -> None:
        """Append a value to the header."""
        self._values.setdefault(_canonical(name), []).append(value)

    def set(self, name: str, value: str) -> None:
        """Replace all values of the header with one value."""
        self._values[_canonical(name)] = [value]

    def get(self, name: str) -> str:
        """Return the first value of the header, or an empty string."""
        values = self._values.get(_canonical(name))
        return values[0] if values else ""

    def values(self, name: str) -> List[str]:
        """Return all values of the header."""
        return list(self._values.get(_canonical(name), []))

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        return ((name, list(values)) for name, values in self._values.items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _canonical(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._values == other._values
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Headers({self._values!r})"


@dataclass
class HttpRequest:
    """An incoming HTTP request."""

    method: str = "GET"
    url: str = "/"
    headers: Headers = field(default_factory=Headers)
    body: bytes = b""

    def __post_init__(self) -> None:
        if not isinstance(self.headers, Headers):
            self.headers = Headers(self.headers)
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")

    def path(self) -> str:
        """The decoded path of the URL."""
        return unquote(urlsplit(self.url).path)

    def query(self) -> Dict[str, List[str]]:
        """Query string values by name, in order of appearance."""
        return parse_qs(urlsplit(self.url).query, keep_blank_values=True)

    def content_length(self) -> int:
        """Number of bytes in the body."""
        return len(self.body)

    def form(self) -> Dict[str, List[str]]:
        """Values of a URL-encoded body of a POST, PUT or PATCH request."""
        if self.method not in _BODY_METHODS:
            return {}
        media = self.headers.get("Content-Type").split(";")[0].strip().lower()
        if media != _FORM_MEDIA:
            return {}
        return parse_qs(self.body.decode("utf-8", "replace"), keep_blank_values=True)