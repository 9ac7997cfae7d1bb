"""
Table management commands for statestore.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from typing import Any

import click
from botocore.exceptions import ClientError

from ..constants import (
    DEFAULT_KEY_FIELD,
    DEFAULT_READ_CAPACITY,
    DEFAULT_TABLE_NAME,
    DEFAULT_WRITE_CAPACITY,
    ENV_KEY_FIELD,
    ENV_TABLE,
)
from ..core.table_operations import create_table_args
from ..exceptions import BACKING_STORE_ERRORS, TableNotReadyError
from ..logging_config import get_logger, setup_logging
from ..models import StoreConfig
from ..utils import output_error, output_json, output_text
from .options import build_store, store_options

logger = get_logger(__name__)


def _throughput(read_capacity: int, write_capacity: int) -> dict[str, Any]:
    return {
        "ProvisionedThroughput": {
            "ReadCapacityUnits": read_capacity,
            "WriteCapacityUnits": write_capacity,
        }
    }


def _capacity_options(func: Any) -> Any:
    func = click.option(
        "--write-capacity",
        type=click.IntRange(min=1),
        default=DEFAULT_WRITE_CAPACITY,
        show_default=True,
        help="Provisioned write capacity units",
    )(func)
    func = click.option(
        "--read-capacity",
        type=click.IntRange(min=1),
        default=DEFAULT_READ_CAPACITY,
        show_default=True,
        help="Provisioned read capacity units",
    )(func)
    return func


@click.command("create-table")
@_capacity_options
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    help="Give up after this many status checks (default: wait until ACTIVE)",
)
@store_options
@click.pass_context
def create_table_command(
    ctx: click.Context,
    read_capacity: int,
    write_capacity: int,
    max_attempts: int | None,
    table: str,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    key_field: str,
    expiration_field: str,
    text: bool,
    verbose: int,
) -> None:
    """Create the DynamoDB table for state storage.

    Creates a table keyed on the key field and waits until it is ACTIVE,
    checking after 1s, 2s, 4s, ... Without --max-attempts this waits
    indefinitely.

    Examples:

    \b
        # Create table with default name
        aws-state-store statestore create-table

    \b
        # Create with more capacity, giving up after 6 checks (~63s)
        aws-state-store statestore create-table --read-capacity 100 \\
            --write-capacity 20 --max-attempts 6

    \b
    Output Format:
        Returns JSON with table details:
        {"table": "...", "status": "ACTIVE", "arn": "..."}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Creating table '{table}'")
        logger.debug(f"Region: {region}, Read: {read_capacity}, Write: {write_capacity}")

        store = build_store(table, region, profile, endpoint_url, key_field, expiration_field)
        table_desc = store.create_table(
            max_attempts=max_attempts, **_throughput(read_capacity, write_capacity)
        )

        if text:
            output_text(f"✅ Table '{table}' created successfully")
            output_text(f"Status: {table_desc['TableStatus']}")
            output_text(f"ARN: {table_desc.get('TableArn', '-')}")
        else:
            output_json(
                {
                    "table": table,
                    "status": table_desc["TableStatus"],
                    "arn": table_desc.get("TableArn"),
                }
            )

    except TableNotReadyError as e:
        output_error(str(e), "Check the table in the AWS console or retry later", 4, text)
        ctx.exit(4)

    except ValueError as e:
        output_error(str(e), "Check table and field names", 2, text)
        ctx.exit(2)

    except ClientError as e:
        if e.response["Error"]["Code"] == "ResourceInUseException":
            output_error(
                f"Table '{table}' already exists",
                "Use a different table name or the existing table",
                1,
                text,
            )
            ctx.exit(1)
        output_error(str(e), "Check AWS credentials and permissions", 3, text)
        ctx.exit(3)

    except BACKING_STORE_ERRORS as e:
        output_error(str(e), "Check AWS credentials and permissions", 3, text)
        ctx.exit(3)


@click.command("table-args")
@_capacity_options
@click.option(
    "--table",
    envvar=ENV_TABLE,
    default=DEFAULT_TABLE_NAME,
    show_default=True,
    help="DynamoDB table name",
)
@click.option(
    "--key-field",
    envvar=ENV_KEY_FIELD,
    default=DEFAULT_KEY_FIELD,
    show_default=True,
    help="Attribute holding the state key",
)
@click.pass_context
def table_args_command(
    ctx: click.Context,
    read_capacity: int,
    write_capacity: int,
    table: str,
    key_field: str,
) -> None:
    """Print the CreateTable arguments without calling AWS.

    Useful for provisioning the table with other tooling.

    Examples:

    \b
        aws-state-store statestore table-args --read-capacity 5 > create-table.json
        aws dynamodb create-table --cli-input-json file://create-table.json
    """
    try:
        config = StoreConfig(table=table, key_field=key_field, connect_on_create=False)
    except ValueError as e:
        output_error(str(e), "Check table and field names", 2)
        ctx.exit(2)

    output_json(create_table_args(config, **_throughput(read_capacity, write_capacity)))
