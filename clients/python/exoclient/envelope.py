"""Request envelope construction.

No semantic validation happens here: criteria, columns and resource names
are passed through for the server to judge.
"""

from collections.abc import Iterable
from typing import Any

from .types import Command, CommandRequest, Operation, Query, QueryOptions, QueryRequest


def build_queries(root: str, queries: Iterable[Query], tag: str | None = None) -> QueryRequest:
    return QueryRequest(root=root, queries=list(queries), tag=tag)


def build_query(
    root: str,
    resource: str,
    columns: list[str] | None = None,
    options: QueryOptions | None = None,
    tag: str | None = None,
) -> QueryRequest:
    """Wrap a single query in an envelope."""
    return build_queries(root, [Query(resource=resource, columns=columns, options=options)], tag=tag)


def build_commands(root: str, commands: Iterable[Command], tag: str | None = None) -> CommandRequest:
    return CommandRequest(root=root, commands=list(commands), tag=tag)


def build_command(
    root: str,
    resource: str,
    operation: Operation | str,
    data: list[Any],
    keys: list[str] | None = None,
    returns: list[str] | None = None,
    tag: str | None = None,
) -> CommandRequest:
    """Wrap a single command in an envelope.

    Empty ``keys``/``returns`` are normalized to absent.
    """
    command = Command(
        resource=resource,
        operation=Operation(operation),
        data=list(data),
        keys=list(keys) if keys else None,
        returns=list(returns) if returns else None,
    )
    return build_commands(root, [command], tag=tag)
