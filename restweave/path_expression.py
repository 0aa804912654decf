"""Compilation of URL path templates into regular expressions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

_META = frozenset("\\.+*?()|[]{}^$")


def _quote_meta(text: str) -> str:
    return "".join("\\" + c if c in _META else c for c in text)


def tokenize_path(path: str) -> List[str]:
    """Split a URL path on slashes; "/" gives no tokens."""
    if path == "/":
        return []
    return path.strip("/").split("/")


def template_to_regular_expression(
    template: str,
) -> Tuple[str, int, List[str], int, List[str]]:
    """Turn a path template into (expression, literal count, names, var count, tokens)."""
    parts = ["^"]
    literal_count = 0
    var_names: List[str] = []
    tokens = tokenize_path(template)
    for each in tokens:
        if not each:
            continue
        parts.append("/")
        if each.startswith("{"):
            colon = each.find(":")
            if colon != -1:
                var_name = each[1:colon].strip()
                param_expr = each[colon + 1 : len(each) - 1].strip()
                parts.append("(.*)" if param_expr == "*" else f"({param_expr})")
            else:
                var_name = each[1 : len(each) - 1].strip()
                parts.append("([^/]+?)")
            var_names.append(var_name)
        else:
            literal_count += len(each.encode("utf-8"))
            parts.append(_quote_meta(each))
    expression = "".join(parts).rstrip("/") + "(/.*)?$"
    return expression, literal_count, var_names, len(var_names), tokens


@dataclass(frozen=True)
class PathExpression:
    """A compiled path template used to match request paths."""

    literal_count: int
    var_names: List[str]
    var_count: int
    matcher: "re.Pattern[str]"
    source: str
    tokens: List[str]

    @classmethod
    def from_template(cls, path: str) -> "PathExpression":
        """Compile a path template; raises re.error if it is invalid."""
        expression, literal_count, var_names, var_count, tokens = (
            template_to_regular_expression(path)
        )
        return cls(literal_count, var_names, var_count, re.compile(expression), expression, tokens)