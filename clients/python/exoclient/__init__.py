"""Exo Python Client.

A Python client for Exo query and command endpoints over HTTP/JSON.

Usage:
    from exoclient import Operation, set_configuration, request_query_data

    set_configuration("https://api.example.com", "tok123")

    # Query rows
    orders = await request_query_data("shop", "orders", ["id", "total"])

    # Delete rows by key
    await request_command("shop", "orders", Operation.DELETE, [{"id": 5}], keys=["id"])

    # Or hold an explicit configuration
    async with AsyncExoClient(Configuration.create("https://api.example.com")) as exo:
        orders = await exo.query_data("shop", "orders")
"""

import logging

from .client import (
    AsyncExoClient,
    ExoClient,
    request,
    request_command,
    request_command_data,
    request_commands,
    request_queries,
    request_query,
    request_query_data,
)
from .config import (
    ConfigurationStore,
    clear_configuration,
    configure_from_env,
    default_store,
    get_configuration,
    set_configuration,
)
from .envelope import build_command, build_commands, build_queries, build_query
from .exceptions import ConfigurationError, ExoError, ProtocolError, TransportError
from .response import data_only, reduce
from .settings import ExoSettings, load_configuration
from .transport import compose
from .types import (
    Command,
    CommandRequest,
    Configuration,
    Filter,
    Group,
    Operation,
    Pagination,
    PaginationResult,
    Portion,
    PortionResult,
    Query,
    QueryOptions,
    QueryRequest,
    Response,
    ResponseError,
    Row,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "AsyncExoClient",
    "ExoClient",
    "request",
    "request_command",
    "request_command_data",
    "request_commands",
    "request_queries",
    "request_query",
    "request_query_data",
    "ConfigurationStore",
    "clear_configuration",
    "configure_from_env",
    "default_store",
    "get_configuration",
    "set_configuration",
    "build_command",
    "build_commands",
    "build_queries",
    "build_query",
    "ConfigurationError",
    "ExoError",
    "ProtocolError",
    "TransportError",
    "data_only",
    "reduce",
    "ExoSettings",
    "load_configuration",
    "compose",
    "Command",
    "CommandRequest",
    "Configuration",
    "Filter",
    "Group",
    "Operation",
    "Pagination",
    "PaginationResult",
    "Portion",
    "PortionResult",
    "Query",
    "QueryOptions",
    "QueryRequest",
    "Response",
    "ResponseError",
    "Row",
]
