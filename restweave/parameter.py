"""Documentation of the parameters a route accepts."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Mapping, Optional, Union


class ParameterKind(IntEnum):
    """Where a parameter is found in the request."""

    PATH = 0
    QUERY = 1
    BODY = 2
    HEADER = 3
    FORM = 4


class CollectionFormat(str, Enum):
    """How multiple values of an array parameter are written."""

    CSV = "csv"
    SSV = "ssv"
    TSV = "tsv"
    PIPES = "pipes"
    MULTI = "multi"

    def __str__(self) -> str:
        return self.value


@dataclass
class ParameterData:
    """State of a Parameter."""

    name: str = ""
    description: str = ""
    data_type: str = ""
    data_format: str = ""
    kind: ParameterKind = ParameterKind.PATH
    required: bool = False
    allowable_values: Optional[Dict[str, str]] = None
    possible_values: Optional[List[str]] = None
    allow_multiple: bool = False
    allow_empty_value: bool = False
    default_value: str = ""
    collection_format: str = ""
    pattern: str = ""
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    unique_items: bool = False
    extensions: Optional[Dict[str, Any]] = None


class Parameter:
    """Fluent description of one request parameter."""

    def __init__(self, data: Optional[ParameterData] = None) -> None:
        self._data = ParameterData() if data is None else data

    def __repr__(self) -> str:
        return f"Parameter({self._data!r})"

    def data(self) -> ParameterData:
        """Return a copy of the parameter's state."""
        return dataclasses.replace(self._data)

    def kind(self) -> ParameterKind:
        return self._data.kind

    def required(self, required: bool) -> "Parameter":
        self._data.required = required
        return self

    def allow_multiple(self, multiple: bool) -> "Parameter":
        self._data.allow_multiple = multiple
        return self

    def add_extension(self, key: str, value: Any) -> "Parameter":
        if self._data.extensions is None:
            self._data.extensions = {}
        self._data.extensions[key] = value
        return self

    def allow_empty_value(self, allow: bool) -> "Parameter":
        self._data.allow_empty_value = allow
        return self

    def allowable_values(self, values: Mapping[str, str]) -> "Parameter":
        """Set allowable values; possible values become them ordered by key."""
        self._data.allowable_values = dict(values)
        self._data.possible_values = [values[key] for key in sorted(values)]
        return self

    def possible_values(self, values: List[str]) -> "Parameter":
        self._data.possible_values = values
        return self

    def data_type(self, type_name: str) -> "Parameter":
        self._data.data_type = type_name
        return self

    def data_format(self, format_name: str) -> "Parameter":
        self._data.data_format = format_name
        return self

    def default_value(self, value: str) -> "Parameter":
        self._data.default_value = value
        return self

    def description(self, doc: str) -> "Parameter":
        self._data.description = doc
        return self

    def collection_format(self, collection_format: Union[CollectionFormat, str]) -> "Parameter":
        self._data.collection_format = str(collection_format)
        return self

    def pattern(self, pattern: str) -> "Parameter":
        self._data.pattern = pattern
        return self

    def minimum(self, minimum: float) -> "Parameter":
        self._data.minimum = float(minimum)
        return self

    def maximum(self, maximum: float) -> "Parameter":
        self._data.maximum = float(maximum)
        return self

    def min_length(self, min_length: int) -> "Parameter":
        self._data.min_length = int(min_length)
        return self

    def max_length(self, max_length: int) -> "Parameter":
        self._data.max_length = int(max_length)
        return self

    def min_items(self, min_items: int) -> "Parameter":
        self._data.min_items = int(min_items)
        return self

    def max_items(self, max_items: int) -> "Parameter":
        self._data.max_items = int(max_items)
        return self

    def unique_items(self, unique_items: bool) -> "Parameter":
        self._data.unique_items = unique_items
        return self


def path_parameter(name: str, description: str) -> Parameter:
    """A required path parameter of type string."""
    return Parameter(
        ParameterData(
            name=name,
            description=description,
            required=True,
            data_type="string",
            kind=ParameterKind.PATH,
        )
    )


def query_parameter(name: str, description: str) -> Parameter:
    """An optional query parameter of type string, comma separated."""
    return Parameter(
        ParameterData(
            name=name,
            description=description,
            required=False,
            data_type="string",
            collection_format=str(CollectionFormat.CSV),
            kind=ParameterKind.QUERY,
        )
    )


def body_parameter(name: str, description: str) -> Parameter:
    """A required body parameter without a data type."""
    return Parameter(
        ParameterData(name=name, description=description, required=True, kind=ParameterKind.BODY)
    )


def header_parameter(name: str, description: str) -> Parameter:
    """An optional header parameter of type string."""
    return Parameter(
        ParameterData(
            name=name,
            description=description,
            required=False,
            data_type="string",
            kind=ParameterKind.HEADER,
        )
    )


def form_parameter(name: str, description: str) -> Parameter:
    """An optional form parameter of type string."""
    return Parameter(
        ParameterData(
            name=name,
            description=description,
            required=False,
            data_type="string",
            kind=ParameterKind.FORM,
        )
    )