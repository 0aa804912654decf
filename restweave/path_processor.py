"""Extraction of path parameter values from a request path."""

from __future__ import annotations

from typing import Any, Dict, Sequence

from .path_expression import tokenize_path
from .route import Route, _has_custom_verb, _remove_custom_verb


def untokenize_path(offset: int, parts: Sequence[str]) -> str:
    """Join the parts from ``offset`` on back into a path with slashes."""
    return "/".join(parts[offset:])


class DefaultPathProcessor:
    """Extracts path parameters by lining up path segments with the route's."""

    def extract_parameters(self, route: Route, web_service: Any, url_path: str) -> Dict[str, str]:
        """Return the path parameters of ``route`` found in ``url_path``."""
        url_parts = tokenize_path(url_path)
        parameters: Dict[str, str] = {}
        for index, key in enumerate(route.path_parts):
            value = url_parts[index] if index < len(url_parts) else ""
            if route.has_custom_verb and _has_custom_verb(key):
                key = _remove_custom_verb(key)
                value = _remove_custom_verb(value)
            if "{" not in key:
                continue
            colon = key.find(":")
            if colon != -1:
                expression = key[colon + 1 : len(key) - 1]
                name = key[1:colon]
                if expression == "*":
                    parameters[name] = untokenize_path(index, url_parts)
                    break
                parameters[name] = value
            else:
                start = key.find("{")
                end_key = key.find("}")
                suffix_length = len(key) - end_key - 1
                end_value = max(0, len(value) - suffix_length)
                parameters[key[start + 1 : end_key]] = value[start:end_value]
        return parameters