"""
DynamoDB-backed state store.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from collections.abc import Mapping, Sequence
from typing import Any

from ..constants import ATTR_TYPE_STRING, INITIALIZATION_ID
from ..logging_config import get_logger
from ..models import StoreConfig
from ..utils import build_key
from .client import ClientProvider, RecordClient
from .codec import CODEC, JsonCodec
from .table_operations import create_table, create_table_args

logger = get_logger(__name__)


def encode_item(data: Mapping[str, Any], codec: JsonCodec = CODEC) -> dict[str, dict[str, str]]:
    """
    Convert a state mapping into a DynamoDB item.

    Fields whose value is None are left out entirely.

    Args:
        data: Field name to JSON-compatible value
        codec: Codec used for each value

    Returns:
        Item with one string attribute per field
    """
    return {
        name: {ATTR_TYPE_STRING: codec.encode(value)}
        for name, value in data.items()
        if value is not None
    }


def decode_item(item: Mapping[str, Any], codec: JsonCodec = CODEC) -> dict[str, Any]:
    """
    Convert a DynamoDB item back into a state mapping.

    Attributes without a string value are skipped.

    Args:
        item: Item as returned by GetItem
        codec: Codec used for each value

    Returns:
        Field name to decoded value

    Raises:
        MalformedRecordError: If any attribute fails to decode
    """
    data: dict[str, Any] = {}
    for name, attribute in item.items():
        text = attribute.get(ATTR_TYPE_STRING) if isinstance(attribute, Mapping) else None
        if text is None:
            continue
        data[name] = codec.decode(text)
    return data


class StateStore:
    """Store, fetch and remove expiring state records in a DynamoDB table.

    Every field is written as a string attribute holding its JSON encoding.
    Two reserved attributes are added on write: the derived key (the table's
    hash key) and, when the state expires, the absolute expiration epoch.
    Records are replaced whole on set; concurrent writers to one key race and
    the last PutItem wins.

    Expired records are not filtered on get. Enforcing the expiration is left
    to the caller or a higher layer.
    """

    def __init__(
        self,
        config: StoreConfig | None = None,
        client: RecordClient | dict[str, Any] | None = None,
        session: Any | None = None,
        codec: JsonCodec = CODEC,
    ):
        """
        Initialize the store.

        The DynamoDB client is realized immediately. With connect_on_create,
        a throwaway get is then issued so connection setup happens here
        (e.g. in a pre-fork parent) rather than on the first real request.

        Args:
            config: Store configuration (defaults to StoreConfig())
            client: Pre-built DynamoDB client, or kwargs for building one
            session: Pre-built boto3 session, or kwargs for boto3.Session
            codec: Value codec
        """
        self.config = config or StoreConfig()
        self.codec = codec
        self.provider = ClientProvider(self.config.region, client=client, session=session)

        self.provider.client  # noqa: B018

        if self.config.connect_on_create:
            logger.debug("Warming up DynamoDB connection")
            self.get(INITIALIZATION_ID, [])

    @property
    def client(self) -> RecordClient:
        """The DynamoDB client."""
        return self.provider.client

    def _key_attribute(self, key: str) -> dict[str, dict[str, str]]:
        return {self.config.key_field: {ATTR_TYPE_STRING: self.codec.encode(key)}}

    def set(
        self,
        state_id: str,
        namespace: Sequence[str],
        data: Mapping[str, Any],
        expires: int | None = None,
    ) -> None:
        """
        Store state data, replacing any existing record.

        Args:
            state_id: State identifier
            namespace: Namespace components
            data: Field name to JSON-compatible value (None values are dropped)
            expires: Seconds until the state expires (None or 0 for never)

        Raises:
            botocore.exceptions.ClientError: If PutItem fails
        """
        key = build_key(state_id, namespace)
        expiration = int(time.time()) + expires if expires else None

        record = {
            **data,
            self.config.key_field: key,
            self.config.expiration_field: expiration,
        }

        logger.debug(f"Setting state '{key}' (expiration: {expiration})")
        self.client.put_item(TableName=self.config.table, Item=encode_item(record, self.codec))

    def get(self, state_id: str, namespace: Sequence[str]) -> dict[str, Any] | None:
        """
        Fetch state data.

        Args:
            state_id: State identifier
            namespace: Namespace components

        Returns:
            Stored fields including the reserved key/expiration fields,
            or None if nothing is stored under the key

        Raises:
            MalformedRecordError: If a stored attribute cannot be decoded
            botocore.exceptions.ClientError: If GetItem fails
        """
        key = build_key(state_id, namespace)

        kwargs: dict[str, Any] = {
            "TableName": self.config.table,
            "Key": self._key_attribute(key),
        }
        if self.config.consistent_read:
            kwargs["ConsistentRead"] = True

        logger.debug(f"Getting state '{key}'")
        item = self.client.get_item(**kwargs).get("Item")
        if not item:
            return None

        return decode_item(item, self.codec)

    def remove(self, state_id: str, namespace: Sequence[str]) -> None:
        """
        Delete state data. Deleting a missing key succeeds.

        Args:
            state_id: State identifier
            namespace: Namespace components

        Raises:
            botocore.exceptions.ClientError: If DeleteItem fails
        """
        key = build_key(state_id, namespace)

        logger.debug(f"Removing state '{key}'")
        self.client.delete_item(TableName=self.config.table, Key=self._key_attribute(key))

    def create_table_args(self, **overrides: Any) -> dict[str, Any]:
        """CreateTable arguments for this store's table, with overrides applied."""
        return create_table_args(self.config, **overrides)

    def create_table(self, max_attempts: int | None = None, **overrides: Any) -> dict[str, Any]:
        """
        Create this store's table and wait until it is ACTIVE.

        See table_operations.create_table; without max_attempts this blocks
        until DynamoDB reports the table ACTIVE.
        """
        return create_table(
            self.provider.table_client(), self.config, max_attempts=max_attempts, **overrides
        )
