"""Read-only view of a selected route."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .route import Route


def copy_map(mapping: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy a mapping, copying nested string-keyed dicts as well."""
    if not mapping:
        return {}
    return {
        key: copy_map(value) if isinstance(value, dict) else value
        for key, value in mapping.items()
    }


class RouteReader:
    """Gives read access to the documented properties of a route."""

    def __init__(self, route: Route) -> None:
        self._route = route

    def method(self) -> str:
        return self._route.method

    def consumes(self) -> List[str]:
        return list(self._route.consumes)

    def path(self) -> str:
        return self._route.path

    def doc(self) -> str:
        return self._route.doc

    def notes(self) -> str:
        return self._route.notes

    def operation(self) -> str:
        return self._route.operation

    def parameter_docs(self) -> List[Any]:
        return list(self._route.parameter_docs)

    def metadata(self) -> Dict[str, Any]:
        """Return a copy of the route's metadata."""
        return copy_map(self._route.metadata)

    def deprecated(self) -> bool:
        return self._route.deprecated