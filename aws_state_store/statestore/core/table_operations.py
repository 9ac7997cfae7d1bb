"""
Table management operations for statestore.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import time
from typing import Any

from ..constants import (
    ATTR_TYPE_STRING,
    DEFAULT_READ_CAPACITY,
    DEFAULT_WRITE_CAPACITY,
    KEY_TYPE_HASH,
    TABLE_POLL_FACTOR,
    TABLE_POLL_INITIAL_WAIT,
    TABLE_STATUS_ACTIVE,
)
from ..exceptions import TableNotReadyError
from ..logging_config import TRACE, get_logger
from ..models import StoreConfig
from .client import TableClient

logger = get_logger(__name__)


def create_table_args(config: StoreConfig, **overrides: Any) -> dict[str, Any]:
    """
    Build the CreateTable arguments for the state table.

    Defaults to a single string hash key named after the configured key field
    and 1 read / 1 write capacity unit. Overrides replace top-level entries
    wholesale, for example:

        create_table_args(
            config,
            ProvisionedThroughput={"ReadCapacityUnits": 100, "WriteCapacityUnits": 20},
        )

    Args:
        config: Store configuration (table name and key field)
        **overrides: CreateTable arguments that win over the defaults

    Returns:
        Keyword arguments for DynamoDB CreateTable
    """
    key_field = config.key_field

    args: dict[str, Any] = {
        "TableName": config.table,
        "ProvisionedThroughput": {
            "ReadCapacityUnits": DEFAULT_READ_CAPACITY,
            "WriteCapacityUnits": DEFAULT_WRITE_CAPACITY,
        },
        "AttributeDefinitions": [
            {"AttributeName": key_field, "AttributeType": ATTR_TYPE_STRING},
        ],
        "KeySchema": [
            {"AttributeName": key_field, "KeyType": KEY_TYPE_HASH},
        ],
    }
    args.update(overrides)
    return args


def create_table(
    client: TableClient,
    config: StoreConfig,
    max_attempts: int | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """
    Create the state table and block until it is ACTIVE.

    Sleeps 1s before the first DescribeTable and doubles the sleep after each
    non-ACTIVE status. Without max_attempts this waits for as long as the
    table takes; wrap the call if you need a deadline.

    Args:
        client: DynamoDB client with create_table and describe_table
        config: Store configuration
        max_attempts: Maximum DescribeTable calls (None for no limit)
        **overrides: Passed to create_table_args

    Returns:
        The Table description from the final DescribeTable

    Raises:
        TableNotReadyError: If max_attempts is reached before ACTIVE
        botocore.exceptions.ClientError: If CreateTable or DescribeTable fails
    """
    if max_attempts is not None and max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    args = create_table_args(config, **overrides)
    logger.debug(f"CreateTable arguments: {args}")

    output = client.create_table(**args)
    table_name = output["TableDescription"]["TableName"]

    wait = TABLE_POLL_INITIAL_WAIT
    attempt = 0
    while True:
        time.sleep(wait)
        attempt += 1
        table = client.describe_table(TableName=table_name)["Table"]
        status = table.get("TableStatus")
        logger.log(TRACE, f"Table '{table_name}' status after attempt {attempt}: {status}")

        if status == TABLE_STATUS_ACTIVE:
            logger.debug(f"Table '{table_name}' active after {attempt} checks")
            return table  # type: ignore[no-any-return]

        if max_attempts is not None and attempt >= max_attempts:
            raise TableNotReadyError(
                f"Table '{table_name}' still {status} after {attempt} status checks"
            )

        wait *= TABLE_POLL_FACTOR
