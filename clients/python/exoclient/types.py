"""Type definitions for the Exo client.

Request shapes serialize with ``to_dict()`` into the protocol's wire form and
decode back with ``from_dict()``. Response shapes are built from the decoded
body with ``from_response()``.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class Configuration:
    """Where and how to reach an Exo endpoint.

    ``params`` is an ordered sequence of ``(name, value)`` pairs appended to
    every request URL. Values are not escaped.
    """

    url: str
    params: tuple[tuple[str, Any], ...] = ()
    token: str | None = None

    @classmethod
    def create(
        cls,
        url: str,
        token: str | None = None,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> "Configuration":
        """Create a Configuration from a mapping or a list of pairs."""
        if params is None:
            pairs: tuple[tuple[str, Any], ...] = ()
        elif isinstance(params, Mapping):
            pairs = tuple(params.items())
        else:
            pairs = tuple((name, value) for name, value in params)
        return cls(url=url, params=pairs, token=token)


class Operation(str, Enum):
    """Command semantics."""

    INSERT = "insert"
    UPDATE = "update"
    UPSERT = "upsert"
    DELETE = "delete"


@dataclass
class Filter:
    """Opaque server-side predicate with positional parameters."""

    criteria: str
    params: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"criteria": self.criteria, "params": list(self.params)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Filter":
        return cls(criteria=data.get("criteria", ""), params=list(data.get("params", [])))


@dataclass
class Group:
    """Grouping columns and the filter applied after grouping."""

    columns: list[str]
    filter: Filter  # noqa: A003

    def to_dict(self) -> dict[str, Any]:
        return {"columns": list(self.columns), "filter": self.filter.to_dict()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Group":
        return cls(
            columns=list(data.get("columns", [])),
            filter=Filter.from_dict(data.get("filter", {})),
        )


@dataclass(frozen=True)
class Pagination:
    """Request one page of ``page_size`` rows; pages start at 1."""

    page: int
    page_size: int

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")

    def to_dict(self) -> dict[str, Any]:
        return {"page": self.page, "pageSize": self.page_size}


@dataclass(frozen=True)
class Portion:
    """Request ``limit`` rows starting at ``offset``."""

    limit: int
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    def to_dict(self) -> dict[str, Any]:
        return {"limit": self.limit, "offset": self.offset}


Range = Union[Pagination, Portion]


def range_from_dict(data: dict[str, Any]) -> Range:
    """Decode a request range, discriminating on ``page``."""
    if "page" in data:
        return Pagination(page=data["page"], page_size=data["pageSize"])
    return Portion(limit=data["limit"], offset=data.get("offset", 0))


@dataclass
class QueryOptions:
    """Optional filtering, ordering, grouping and windowing of a query."""

    filter: Filter | None = None  # noqa: A003
    sort: list[str] | None = None
    group: Group | None = None
    keys: list[str] | None = None
    nested: bool | None = None
    range: Range | None = None  # noqa: A003

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.filter is not None:
            data["filter"] = self.filter.to_dict()
        if self.sort is not None:
            data["sort"] = list(self.sort)
        if self.group is not None:
            data["group"] = self.group.to_dict()
        if self.keys is not None:
            data["keys"] = list(self.keys)
        if self.nested is not None:
            data["nested"] = self.nested
        if self.range is not None:
            data["range"] = self.range.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QueryOptions | None":
        """Pick the option fields out of a query item, or None if there are none."""
        if not any(name in data for name in _OPTION_FIELDS):
            return None
        return cls(
            filter=Filter.from_dict(data["filter"]) if "filter" in data else None,
            sort=data.get("sort"),
            group=Group.from_dict(data["group"]) if "group" in data else None,
            keys=data.get("keys"),
            nested=data.get("nested"),
            range=range_from_dict(data["range"]) if "range" in data else None,
        )


_OPTION_FIELDS = ("filter", "sort", "group", "keys", "nested", "range")


@dataclass
class Query:
    """A read against one resource.

    Options travel flattened into the item alongside ``resource`` and
    ``columns``.
    """

    resource: str
    columns: list[str] | None = None
    options: QueryOptions | None = None

    def __post_init__(self) -> None:
        if self.options is not None and not self.options.to_dict():
            self.options = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"resource": self.resource}
        if self.columns is not None:
            data["columns"] = list(self.columns)
        if self.options is not None:
            data.update(self.options.to_dict())
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Query":
        return cls(
            resource=data["resource"],
            columns=data.get("columns"),
            options=QueryOptions.from_dict(data),
        )


@dataclass
class QueryRequest:
    """Envelope for ``/_queries``."""

    root: str
    queries: list[Query]
    tag: str | None = None

    path = "/_queries"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "root": self.root,
            "queries": [query.to_dict() for query in self.queries],
        }
        if self.tag is not None:
            data["tag"] = self.tag
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QueryRequest":
        return cls(
            root=data["root"],
            queries=[Query.from_dict(q) for q in data.get("queries", [])],
            tag=data.get("tag"),
        )


@dataclass
class Command:
    """A write against one resource.

    ``keys`` and ``returns`` are left off the wire when empty; the server
    treats an empty list differently from an absent one.
    """

    resource: str
    operation: Operation
    data: list[Any]
    keys: list[str] | None = None
    returns: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "resource": self.resource,
            "operation": Operation(self.operation).value,
            "data": list(self.data),
        }
        if self.keys:
            data["keys"] = list(self.keys)
        if self.returns:
            data["returns"] = list(self.returns)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Command":
        return cls(
            resource=data["resource"],
            operation=Operation(data["operation"]),
            data=list(data.get("data", [])),
            keys=data.get("keys"),
            returns=data.get("returns"),
        )


@dataclass
class CommandRequest:
    """Envelope for ``/_commands``."""

    root: str
    commands: list[Command]
    tag: str | None = None

    path = "/_commands"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "root": self.root,
            "commands": [command.to_dict() for command in self.commands],
        }
        if self.tag is not None:
            data["tag"] = self.tag
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommandRequest":
        return cls(
            root=data["root"],
            commands=[Command.from_dict(c) for c in data.get("commands", [])],
            tag=data.get("tag"),
        )


RequestData = Union[QueryRequest, CommandRequest]


@dataclass(frozen=True)
class PaginationResult:
    """The page actually served, with the total page count."""

    page: int
    page_size: int
    page_count: int


@dataclass(frozen=True)
class PortionResult:
    """The portion actually served."""

    limit: int
    offset: int


RangeResult = Union[PaginationResult, PortionResult]


def range_result_from_dict(data: dict[str, Any]) -> RangeResult:
    """Decode a served range, discriminating on ``page``."""
    if "page" in data:
        return PaginationResult(
            page=data["page"],
            page_size=data.get("pageSize", 0),
            page_count=data.get("pageCount", 0),
        )
    return PortionResult(limit=data.get("limit", 0), offset=data.get("offset", 0))


@dataclass
class Row:
    """Rows returned for one submitted query or command, in submission order."""

    resource: str
    data: list[Any] = field(default_factory=list)
    range: RangeResult | None = None  # noqa: A003

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Row":
        served = data.get("range")
        return cls(
            resource=data.get("resource", ""),
            data=list(data.get("data", [])),
            range=range_result_from_dict(served) if served else None,
        )


@dataclass
class Response:
    """Successful response envelope."""

    version: str
    root: str
    rows: list[Row] = field(default_factory=list)
    tag: str | None = None

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "Response":
        """Create Response from a decoded response body."""
        return cls(
            version=response.get("version", ""),
            root=response.get("root", ""),
            rows=[Row.from_dict(row) for row in response.get("rows", [])],
            tag=response.get("tag"),
        )


@dataclass
class ResponseError:
    """Error body as the server sends it."""

    origin: str
    message: str
    note: str | None = None

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> "ResponseError":
        return cls(
            origin=response.get("origin", ""),
            message=response.get("message", ""),
            note=response.get("note"),
        )
