"""
Shared click options for statestore commands.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..constants import (
    DEFAULT_EXPIRATION_FIELD,
    DEFAULT_KEY_FIELD,
    DEFAULT_REGION,
    DEFAULT_TABLE_NAME,
    ENV_ENDPOINT_URL,
    ENV_EXPIRATION_FIELD,
    ENV_KEY_FIELD,
    ENV_TABLE,
)
from ..core.store import StateStore
from ..models import StoreConfig

F = TypeVar("F", bound=Callable[..., Any])

_STORE_OPTIONS = [
    click.option(
        "--table",
        envvar=ENV_TABLE,
        default=DEFAULT_TABLE_NAME,
        show_default=True,
        help="DynamoDB table name",
    ),
    click.option("--region", envvar="AWS_REGION", help="AWS region"),
    click.option("--profile", envvar="AWS_PROFILE", help="AWS profile"),
    click.option(
        "--endpoint-url",
        envvar=ENV_ENDPOINT_URL,
        help="DynamoDB endpoint (e.g., http://localhost:8000 for DynamoDB Local)",
    ),
    click.option(
        "--key-field",
        envvar=ENV_KEY_FIELD,
        default=DEFAULT_KEY_FIELD,
        show_default=True,
        help="Attribute holding the state key",
    ),
    click.option(
        "--expiration-field",
        envvar=ENV_EXPIRATION_FIELD,
        default=DEFAULT_EXPIRATION_FIELD,
        show_default=True,
        help="Attribute holding the expiration epoch",
    ),
    click.option("--text", is_flag=True, help="Output as human-readable text"),
    click.option(
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v INFO, -vv DEBUG, -vvv TRACE)",
    ),
]


def store_options(func: F) -> F:
    """Attach the table/connection/output options every command accepts."""
    for option in reversed(_STORE_OPTIONS):
        func = option(func)
    return func


def namespace_option(func: F) -> F:
    """Attach a repeatable --namespace option."""
    return click.option(  # type: ignore[return-value]
        "--namespace",
        "-n",
        multiple=True,
        help="Namespace component (repeat for nested namespaces)",
    )(func)


def build_store(
    table: str,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    key_field: str,
    expiration_field: str,
) -> StateStore:
    """
    Build a store from command line options.

    The warm-up get is skipped since each command makes a single call anyway.

    Raises:
        ValueError: If the table or field names are invalid
    """
    config = StoreConfig(
        region=region or DEFAULT_REGION,
        table=table,
        key_field=key_field,
        expiration_field=expiration_field,
        connect_on_create=False,
    )
    session: dict[str, Any] = {"profile_name": profile, "region_name": region}
    client = {"endpoint_url": endpoint_url} if endpoint_url else None
    return StateStore(config, client=client, session=session)
