"""Custom value lookup over a cascading override table.

The table is a nested mapping. At any level a location bucket
(``body``, ``query``, ``formData``, ``path``, ``header``) maps parameter
names to values; nested scope keys narrow the scope in a fixed order::

    {
        "query": {"limit": 10},                  # global
        "/pet/{petId}": {                         # path
            "path": {"petId": 7},
            "get": {                              # method
                "header": {"X-Trace": "on"},
                "404": {                          # status code
                    "path": {"petId": 0},
                    "response": {"message": "not found"},
                },
            },
        },
    }

The innermost scope defining a slot wins; a scope without the slot does
not clear an outer match.
"""

from collections.abc import Mapping
from typing import Any, NamedTuple

RESPONSE_KEY = "response"


class _NoValue:
    def __repr__(self) -> str:
        return "NO_VALUE"


# Distinct from None/0/""/False, which are all legitimate override values
NO_VALUE: Any = _NoValue()


class Scope(NamedTuple):
    """Coordinates of a lookup, outermost scope first."""

    path: str
    method: str
    status_code: str

    def keys(self) -> tuple[str, str, str]:
        return (self.path, self.method, str(self.status_code))


def _scope_chain(table: Mapping, scope: Scope) -> list[Mapping]:
    """The table levels from global to most specific, stopping at the first missing scope."""
    levels = [table]
    level: Any = table
    for key in scope.keys():
        level = _scope_level(level, key)
        if not isinstance(level, Mapping):
            break
        levels.append(level)
    return levels


def _scope_level(level: Mapping, key: str) -> Any:
    """Look up a scope key; YAML tables may carry status codes as integers."""
    if key in level:
        return level[key]
    for candidate, value in level.items():
        if str(candidate) == key:
            return value
    return None


def find_custom_value(table: Mapping | None, location: str, name: str, scope: Scope) -> Any:
    """Return the override for ``name`` at ``location``, or NO_VALUE."""
    found = NO_VALUE
    if not isinstance(table, Mapping):
        return found
    for level in _scope_chain(table, scope):
        bucket = level.get(location)
        if isinstance(bucket, Mapping) and name in bucket:
            found = bucket[name]
    return found


def find_custom_headers(table: Mapping | None, scope: Scope) -> dict:
    """Merge every ``header`` bucket along the scope chain, inner over outer."""
    headers: dict = {}
    if not isinstance(table, Mapping):
        return headers
    for level in _scope_chain(table, scope):
        bucket = level.get("header")
        if isinstance(bucket, Mapping):
            headers.update(bucket)
    return headers


def find_custom_response(table: Mapping | None, scope: Scope) -> Any:
    """Return the response override of the exact (path, method, status code) scope, or NO_VALUE."""
    if not isinstance(table, Mapping):
        return NO_VALUE
    levels = _scope_chain(table, scope)
    if len(levels) <= len(scope.keys()):
        return NO_VALUE
    return levels[-1].get(RESPONSE_KEY, NO_VALUE)
