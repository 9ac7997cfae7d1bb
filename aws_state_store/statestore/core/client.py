"""
DynamoDB client provider for the state store.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from functools import cached_property
from typing import Any, Protocol, runtime_checkable

import boto3

from ..logging_config import get_logger

logger = get_logger(__name__)


@runtime_checkable
class RecordClient(Protocol):
    """Item operations the store needs from a DynamoDB low-level client."""

    def put_item(self, **kwargs: Any) -> dict[str, Any]: ...

    def get_item(self, **kwargs: Any) -> dict[str, Any]: ...

    def delete_item(self, **kwargs: Any) -> dict[str, Any]: ...


@runtime_checkable
class TableClient(Protocol):
    """Table operations needed to provision the store's table."""

    def create_table(self, **kwargs: Any) -> dict[str, Any]: ...

    def describe_table(self, **kwargs: Any) -> dict[str, Any]: ...


class ClientProvider:
    """Lazily build (or hand out) the DynamoDB client used by a store.

    Both the client and the boto3 session it is built from may be given as a
    ready object or as a dict of keyword arguments. Nothing is constructed
    until the client is first requested, and then only once.
    """

    def __init__(
        self,
        region: str,
        client: RecordClient | dict[str, Any] | None = None,
        session: Any | None = None,
    ):
        """
        Initialize the provider.

        Args:
            region: AWS region used when no session is supplied
            client: Pre-built client, or kwargs for session.client('dynamodb')
            session: Pre-built boto3 session, or kwargs for boto3.Session
        """
        if client is not None and not isinstance(client, (dict, RecordClient)):
            raise TypeError(
                "client must provide put_item, get_item and delete_item, or be a dict of "
                "client arguments"
            )
        self.region = region
        self._client_arg = client
        self._session_arg = session

    @cached_property
    def session(self) -> boto3.Session:
        """boto3 session used to build the default client."""
        if self._session_arg is not None and not isinstance(self._session_arg, dict):
            return self._session_arg

        kwargs = dict(self._session_arg) if self._session_arg is not None else {}
        if not kwargs.get("region_name"):
            kwargs["region_name"] = self.region
        logger.debug(f"Creating boto3 session in region {kwargs['region_name']}")
        return boto3.Session(**kwargs)

    @cached_property
    def client(self) -> RecordClient:
        """The DynamoDB client, built on first access."""
        if self._client_arg is not None and not isinstance(self._client_arg, dict):
            return self._client_arg

        kwargs = self._client_arg or {}
        logger.debug(f"Creating DynamoDB client with {sorted(kwargs)}")
        return self.session.client("dynamodb", **kwargs)  # type: ignore[no-any-return]

    def table_client(self) -> TableClient:
        """
        Return the client as a table administration client.

        Raises:
            TypeError: If the supplied client cannot create or describe tables
        """
        client = self.client
        if not isinstance(client, TableClient):
            raise TypeError("client must provide create_table and describe_table")
        return client
