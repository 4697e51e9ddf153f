"""Exo entry points.

Module-level coroutines use the default configuration store unless a
``configuration`` is passed. ``AsyncExoClient`` and ``ExoClient`` hold their
own configuration (or store) and a reusable httpx client.
"""

from typing import Any

import httpx

from .config import ConfigurationStore, default_store
from .envelope import build_command, build_commands, build_queries, build_query
from .response import data_only, reduce
from .transport import compose, send, send_sync
from .types import (
    Command,
    Configuration,
    Operation,
    Query,
    QueryOptions,
    RequestData,
    Response,
)


async def request(
    path: str,
    envelope: RequestData,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> Response:
    """POST an envelope to ``path`` and reduce the result.

    The configuration is resolved before the first await, so a missing one
    raises as soon as the coroutine starts and no request is ever sent.

    Raises:
        ConfigurationError: No configuration was passed or stored.
        TransportError: The HTTP call failed.
        ProtocolError: The server returned an error or an unreadable body.
    """
    url, headers = compose(default_store.resolve(configuration), path)
    ok, body = await send(url, headers, envelope, client=client)
    return reduce(ok, body)


async def request_queries(
    root: str,
    queries: list[Query],
    tag: str | None = None,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> Response:
    envelope = build_queries(root, queries, tag=tag)
    return await request(envelope.path, envelope, configuration=configuration, client=client)


async def request_query(
    root: str,
    resource: str,
    columns: list[str] | None = None,
    options: QueryOptions | None = None,
    tag: str | None = None,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> Response:
    envelope = build_query(root, resource, columns, options, tag=tag)
    return await request(envelope.path, envelope, configuration=configuration, client=client)


async def request_query_data(
    root: str,
    resource: str,
    columns: list[str] | None = None,
    options: QueryOptions | None = None,
    tag: str | None = None,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Any]:
    """Run one query and return only its rows.

    Example:
        >>> set_configuration("https://api.example.com", "tok123")
        >>> orders = await request_query_data("shop", "orders", ["id", "total"])
    """
    response = await request_query(
        root, resource, columns, options, tag, configuration=configuration, client=client
    )
    return data_only(response)


async def request_commands(
    root: str,
    commands: list[Command],
    tag: str | None = None,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> Response:
    envelope = build_commands(root, commands, tag=tag)
    return await request(envelope.path, envelope, configuration=configuration, client=client)


async def request_command(
    root: str,
    resource: str,
    operation: Operation | str,
    data: list[Any],
    keys: list[str] | None = None,
    returns: list[str] | None = None,
    tag: str | None = None,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> Response:
    envelope = build_command(root, resource, operation, data, keys, returns, tag=tag)
    return await request(envelope.path, envelope, configuration=configuration, client=client)


async def request_command_data(
    root: str,
    resource: str,
    operation: Operation | str,
    data: list[Any],
    keys: list[str] | None = None,
    returns: list[str] | None = None,
    tag: str | None = None,
    *,
    configuration: Configuration | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Any]:
    """Run one command and return only the rows the server echoed."""
    response = await request_command(
        root, resource, operation, data, keys, returns, tag,
        configuration=configuration, client=client,
    )
    return data_only(response)


class AsyncExoClient:
    """Async HTTP client for an Exo endpoint.

    Args:
        configuration: Endpoint to use. Falls back to ``store`` when omitted.
        store: Configuration store consulted on every call (defaults to the
            process-wide one).
        timeout: Request timeout in seconds.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``.

    Example:
        >>> async with AsyncExoClient(Configuration.create("http://localhost:8000")) as exo:
        ...     orders = await exo.query_data("shop", "orders", ["id", "total"])
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        store: ConfigurationStore | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.configuration = configuration
        self.store = store if store is not None else default_store
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncExoClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(self, envelope: RequestData) -> Response:
        url, headers = compose(self.store.resolve(self.configuration), envelope.path)
        ok, body = await send(url, headers, envelope, client=self._client)
        return reduce(ok, body)

    async def queries(self, root: str, queries: list[Query], tag: str | None = None) -> Response:
        return await self.request(build_queries(root, queries, tag=tag))

    async def query(
        self,
        root: str,
        resource: str,
        columns: list[str] | None = None,
        options: QueryOptions | None = None,
        tag: str | None = None,
    ) -> Response:
        return await self.request(build_query(root, resource, columns, options, tag=tag))

    async def query_data(
        self,
        root: str,
        resource: str,
        columns: list[str] | None = None,
        options: QueryOptions | None = None,
        tag: str | None = None,
    ) -> list[Any]:
        return data_only(await self.query(root, resource, columns, options, tag))

    async def commands(self, root: str, commands: list[Command], tag: str | None = None) -> Response:
        return await self.request(build_commands(root, commands, tag=tag))

    async def command(
        self,
        root: str,
        resource: str,
        operation: Operation | str,
        data: list[Any],
        keys: list[str] | None = None,
        returns: list[str] | None = None,
        tag: str | None = None,
    ) -> Response:
        return await self.request(build_command(root, resource, operation, data, keys, returns, tag=tag))

    async def command_data(
        self,
        root: str,
        resource: str,
        operation: Operation | str,
        data: list[Any],
        keys: list[str] | None = None,
        returns: list[str] | None = None,
        tag: str | None = None,
    ) -> list[Any]:
        return data_only(await self.command(root, resource, operation, data, keys, returns, tag))

    async def insert(self, root: str, resource: str, data: list[Any], returns: list[str] | None = None) -> list[Any]:
        """Insert rows, returning whatever the server echoes back."""
        return await self.command_data(root, resource, Operation.INSERT, data, returns=returns)

    async def update(
        self, root: str, resource: str, data: list[Any], keys: list[str], returns: list[str] | None = None
    ) -> list[Any]:
        return await self.command_data(root, resource, Operation.UPDATE, data, keys, returns)

    async def upsert(
        self, root: str, resource: str, data: list[Any], keys: list[str], returns: list[str] | None = None
    ) -> list[Any]:
        return await self.command_data(root, resource, Operation.UPSERT, data, keys, returns)

    async def delete(
        self, root: str, resource: str, data: list[Any], keys: list[str], returns: list[str] | None = None
    ) -> list[Any]:
        return await self.command_data(root, resource, Operation.DELETE, data, keys, returns)


class ExoClient:
    """Blocking HTTP client for an Exo endpoint.

    Same interface as AsyncExoClient without async/await.
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        store: ConfigurationStore | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        self.configuration = configuration
        self.store = store if store is not None else default_store
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "ExoClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(self, envelope: RequestData) -> Response:
        url, headers = compose(self.store.resolve(self.configuration), envelope.path)
        ok, body = send_sync(url, headers, envelope, client=self._client)
        return reduce(ok, body)

    def queries(self, root: str, queries: list[Query], tag: str | None = None) -> Response:
        return self.request(build_queries(root, queries, tag=tag))

    def query(
        self,
        root: str,
        resource: str,
        columns: list[str] | None = None,
        options: QueryOptions | None = None,
        tag: str | None = None,
    ) -> Response:
        return self.request(build_query(root, resource, columns, options, tag=tag))

    def query_data(
        self,
        root: str,
        resource: str,
        columns: list[str] | None = None,
        options: QueryOptions | None = None,
        tag: str | None = None,
    ) -> list[Any]:
        return data_only(self.query(root, resource, columns, options, tag))

    def commands(self, root: str, commands: list[Command], tag: str | None = None) -> Response:
        return self.request(build_commands(root, commands, tag=tag))

    def command(
        self,
        root: str,
        resource: str,
        operation: Operation | str,
        data: list[Any],
        keys: list[str] | None = None,
        returns: list[str] | None = None,
        tag: str | None = None,
    ) -> Response:
        return self.request(build_command(root, resource, operation, data, keys, returns, tag=tag))

    def command_data(
        self,
        root: str,
        resource: str,
        operation: Operation | str,
        data: list[Any],
        keys: list[str] | None = None,
        returns: list[str] | None = None,
        tag: str | None = None,
    ) -> list[Any]:
        return data_only(self.command(root, resource, operation, data, keys, returns, tag))

    def insert(self, root: str, resource: str, data: list[Any], returns: list[str] | None = None) -> list[Any]:
        return self.command_data(root, resource, Operation.INSERT, data, returns=returns)

    def update(
        self, root: str, resource: str, data: list[Any], keys: list[str], returns: list[str] | None = None
    ) -> list[Any]:
        return self.command_data(root, resource, Operation.UPDATE, data, keys, returns)

    def upsert(
        self, root: str, resource: str, data: list[Any], keys: list[str], returns: list[str] | None = None
    ) -> list[Any]:
        return self.command_data(root, resource, Operation.UPSERT, data, keys, returns)

    def delete(
        self, root: str, resource: str, data: list[Any], keys: list[str], returns: list[str] | None = None
    ) -> list[Any]:
        return self.command_data(root, resource, Operation.DELETE, data, keys, returns)
