"""Fluent Census query builder."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from .core.decoding import ItemModel

# Census places comparison modifiers directly after "=".
_EQUALS = ""
_NOT_EQUALS = "!"
_LESS_THAN = "<"
_LESS_THAN_OR_EQUAL = "["
_GREATER_THAN = ">"
_GREATER_THAN_OR_EQUAL = "]"
_STARTS_WITH = "^"
_CONTAINS = "*"


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return quote(str(value), safe="")


def _as_values(value: object) -> tuple[object, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return (value,)
    values = tuple(value)
    if not values:
        raise ValueError("filter value sequence must not be empty")
    return values


def _validate_names(names: Sequence[str]) -> tuple[str, ...]:
    for name in names:
        if not isinstance(name, str) or not name:
            raise TypeError("field names must be non-empty str")
    return tuple(names)


class SearchTerm:
    """Single filter on a field, completed by one of the operator methods.

    Operator methods return the owner (query or join) so calls chain::

        query.where("name.first_lower").starts_with("hig").set_limit(10)
    """

    __slots__ = ("_owner", "field", "_modifier", "_values")

    def __init__(self, owner: Any, field: str) -> None:
        if not isinstance(field, str) or not field:
            raise TypeError("field must be a non-empty str")
        self._owner = owner
        self.field = field
        self._modifier: str | None = None
        self._values: tuple[object, ...] = ()

    def _apply(self, modifier: str, value: object) -> Any:
        self._modifier = modifier
        self._values = _as_values(value)
        return self._owner

    def equals(self, value: object) -> Any:
        return self._apply(_EQUALS, value)

    def not_equals(self, value: object) -> Any:
        return self._apply(_NOT_EQUALS, value)

    def is_less_than(self, value: object) -> Any:
        return self._apply(_LESS_THAN, value)

    def is_less_than_or_equal(self, value: object) -> Any:
        return self._apply(_LESS_THAN_OR_EQUAL, value)

    def is_greater_than(self, value: object) -> Any:
        return self._apply(_GREATER_THAN, value)

    def is_greater_than_or_equal(self, value: object) -> Any:
        return self._apply(_GREATER_THAN_OR_EQUAL, value)

    def starts_with(self, value: object) -> Any:
        return self._apply(_STARTS_WITH, value)

    def contains(self, value: object) -> Any:
        return self._apply(_CONTAINS, value)

    def encode(self) -> str:
        if self._modifier is None:
            raise ValueError(f"filter on '{self.field}' has no operator")
        joined = ",".join(_format_value(value) for value in self._values)
        return f"{self.field}={self._modifier}{joined}"


class CensusJoin:
    """``c:join`` clause, optionally nested."""

    def __init__(self, service_name: str) -> None:
        if not isinstance(service_name, str) or not service_name:
            raise TypeError("service_name must be a non-empty str")
        self.service_name = service_name
        self.on: str | None = None
        self.to: str | None = None
        self.is_list = False
        self.is_outer = True
        self.inject_at: str | None = None
        self._show: list[str] = []
        self._hide: list[str] = []
        self._terms: list[SearchTerm] = []
        self._joins: list[CensusJoin] = []

    def on_field(self, name: str) -> "CensusJoin":
        self.on = name
        return self

    def to_field(self, name: str) -> "CensusJoin":
        self.to = name
        return self

    def as_list(self, is_list: bool = True) -> "CensusJoin":
        self.is_list = is_list
        return self

    def outer(self, is_outer: bool = True) -> "CensusJoin":
        self.is_outer = is_outer
        return self

    def with_inject_at(self, name: str) -> "CensusJoin":
        self.inject_at = name
        return self

    def show_fields(self, *names: str) -> "CensusJoin":
        self._show.extend(_validate_names(names))
        return self

    def hide_fields(self, *names: str) -> "CensusJoin":
        self._hide.extend(_validate_names(names))
        return self

    def where(self, field: str) -> SearchTerm:
        term = SearchTerm(self, field)
        self._terms.append(term)
        return term

    def join_service(self, service_name: str) -> "CensusJoin":
        join = CensusJoin(service_name)
        self._joins.append(join)
        return join

    def encode(self) -> str:
        parts = [f"type:{self.service_name}"]
        if self.on is not None:
            parts.append(f"on:{self.on}")
        if self.to is not None:
            parts.append(f"to:{self.to}")
        if self.is_list:
            parts.append("list:1")
        if not self.is_outer:
            parts.append("outer:0")
        if self._show:
            parts.append("show:" + "'".join(self._show))
        if self._hide:
            parts.append("hide:" + "'".join(self._hide))
        if self.inject_at is not None:
            parts.append(f"inject_at:{self.inject_at}")
        if self._terms:
            parts.append("terms:" + "'".join(term.encode() for term in self._terms))

        encoded = "^".join(parts)
        if self._joins:
            nested = ",".join(join.encode() for join in self._joins)
            encoded = f"{encoded}({nested})"
        return encoded


class CensusTree:
    """``c:tree`` clause."""

    def __init__(self, field: str) -> None:
        if not isinstance(field, str) or not field:
            raise TypeError("field must be a non-empty str")
        self.field = field
        self.is_list = False
        self.prefix: str | None = None
        self.start: str | None = None

    def as_list(self, is_list: bool = True) -> "CensusTree":
        self.is_list = is_list
        return self

    def with_prefix(self, prefix: str) -> "CensusTree":
        self.prefix = prefix
        return self

    def start_at(self, field: str) -> "CensusTree":
        self.start = field
        return self

    def encode(self) -> str:
        parts = [f"field:{self.field}"]
        if self.is_list:
            parts.append("list:1")
        if self.prefix is not None:
            parts.append(f"prefix:{self.prefix}")
        if self.start is not None:
            parts.append(f"start:{self.start}")
        return "^".join(parts)


class CensusQuery:
    """Mutable description of one Census query.

    ``limit`` and ``start`` stay ``None`` until set explicitly; batch
    execution fills in only the ones still missing.
    """

    def __init__(
        self,
        service_name: str,
        *,
        service_id: str | None = None,
        service_namespace: str | None = None,
        client: Any | None = None,
    ) -> None:
        if not isinstance(service_name, str) or not service_name:
            raise TypeError("service_name must be a non-empty str")
        self.service_name = service_name
        self.service_id = service_id
        self.service_namespace = service_namespace
        self.limit: int | None = None
        self.start: int | None = None
        self.language: str | None = None
        self.distinct: str | None = None
        self.exact_match_first = False
        self.is_case_sensitive = True
        self.is_include_null = False
        self._client = client
        self._terms: list[SearchTerm] = []
        self._show: list[str] = []
        self._hide: list[str] = []
        self._sort: list[str] = []
        self._resolves: list[str] = []
        self._joins: list[CensusJoin] = []
        self._trees: list[CensusTree] = []

    def where(self, field: str) -> SearchTerm:
        term = SearchTerm(self, field)
        self._terms.append(term)
        return term

    def show_fields(self, *names: str) -> "CensusQuery":
        self._show.extend(_validate_names(names))
        return self

    def hide_fields(self, *names: str) -> "CensusQuery":
        self._hide.extend(_validate_names(names))
        return self

    def sort(self, field: str, *, descending: bool = False) -> "CensusQuery":
        _validate_names((field,))
        self._sort.append(f"{field}:-1" if descending else field)
        return self

    def set_limit(self, limit: int) -> "CensusQuery":
        self.limit = _non_negative("limit", limit)
        return self

    def set_start(self, start: int) -> "CensusQuery":
        self.start = _non_negative("start", start)
        return self

    def set_language(self, language: str) -> "CensusQuery":
        self.language = language
        return self

    def set_distinct(self, field: str) -> "CensusQuery":
        self.distinct = field
        return self

    def set_exact_match_first(self, enabled: bool = True) -> "CensusQuery":
        self.exact_match_first = enabled
        return self

    def case_sensitive(self, enabled: bool) -> "CensusQuery":
        self.is_case_sensitive = enabled
        return self

    def include_null(self, enabled: bool = True) -> "CensusQuery":
        self.is_include_null = enabled
        return self

    def add_resolve(self, *names: str) -> "CensusQuery":
        self._resolves.extend(_validate_names(names))
        return self

    def join_service(self, service_name: str) -> CensusJoin:
        join = CensusJoin(service_name)
        self._joins.append(join)
        return join

    def tree_field(self, field: str) -> CensusTree:
        tree = CensusTree(field)
        self._trees.append(tree)
        return tree

    def encode(self) -> str:
        args = [term.encode() for term in self._terms]
        if self._show:
            args.append("c:show=" + ",".join(self._show))
        if self._hide:
            args.append("c:hide=" + ",".join(self._hide))
        if self._sort:
            args.append("c:sort=" + ",".join(self._sort))
        if self.limit is not None:
            args.append(f"c:limit={self.limit}")
        if self.start is not None:
            args.append(f"c:start={self.start}")
        if self.language is not None:
            args.append(f"c:lang={self.language}")
        if self.exact_match_first:
            args.append("c:exactMatchFirst=true")
        if not self.is_case_sensitive:
            args.append("c:case=false")
        if self.is_include_null:
            args.append("c:includeNull=true")
        if self._resolves:
            args.append("c:resolve=" + ",".join(self._resolves))
        if self.distinct is not None:
            args.append(f"c:distinct={self.distinct}")
        if self._joins:
            args.append("c:join=" + ",".join(join.encode() for join in self._joins))
        if self._trees:
            args.append("c:tree=" + ",".join(tree.encode() for tree in self._trees))

        if not args:
            return f"{self.service_name}/"
        return f"{self.service_name}/?" + "&".join(args)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"CensusQuery({self.encode()!r})"

    # Convenience delegates for queries created via ``client.create_query``.
    # On an async client these return awaitables.

    def get_list(self, model: "ItemModel | None" = None) -> Any:
        return self._require_client().execute_single(self, model)

    def get_batch(self, model: "ItemModel | None" = None) -> Any:
        return self._require_client().execute_batch(self, model)

    def get(self, model: "ItemModel | None" = None) -> Any:
        return self._require_client().execute_first(self, model)

    def _require_client(self) -> Any:
        if self._client is None:
            raise RuntimeError("query is not bound to a client; use client.create_query()")
        return self._client


def _non_negative(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int")
    if value < 0:
        raise ValueError(f"{name} must be >= 0")
    return value


__all__ = [
    "SearchTerm",
    "CensusJoin",
    "CensusTree",
    "CensusQuery",
]
