"""
State record commands for statestore.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import json

import click

from ..exceptions import BACKING_STORE_ERRORS, MalformedRecordError, RecordNotFoundError
from ..logging_config import get_logger, setup_logging
from ..utils import build_key, output_error, output_json, output_text
from .options import build_store, namespace_option, store_options

logger = get_logger(__name__)


def _backing_store_failure(ctx: click.Context, error: Exception, text: bool) -> None:
    output_error(
        str(error),
        "Check AWS credentials and that the table exists "
        "('aws-state-store statestore create-table')",
        3,
        text,
    )
    ctx.exit(3)


@click.command("set")
@click.argument("state_id")
@click.argument("data")
@namespace_option
@click.option("--ttl", type=click.IntRange(min=0), help="Seconds until the state expires")
@store_options
@click.pass_context
def set_command(
    ctx: click.Context,
    state_id: str,
    data: str,
    namespace: tuple[str, ...],
    ttl: int | None,
    table: str,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    key_field: str,
    expiration_field: str,
    text: bool,
    verbose: int,
) -> None:
    """Store state data under an id, replacing any existing record.

    DATA must be a JSON object. Fields set to null are not stored.

    Examples:

    \b
        # Store a session
        aws-state-store statestore set abc123 '{"user": 42, "admin": false}'

    \b
        # Store in a namespace, expiring in 1 hour
        aws-state-store statestore set abc123 '{"cart": [1, 2]}' -n shop --ttl 3600

    \b
    Output Format:
        Returns JSON:
        {"key": "shop:abc123", "fields": ["cart"], "ttl": 3600}
    """
    setup_logging(verbose)

    try:
        payload = json.loads(data)
    except ValueError as e:
        output_error(f"DATA is not valid JSON: {e}", "Pass a JSON object as DATA", 2, text)
        ctx.exit(2)
    if not isinstance(payload, dict):
        output_error("DATA must be a JSON object", "Wrap values in an object", 2, text)
        ctx.exit(2)

    try:
        logger.info(f"Setting state '{state_id}' in namespace {list(namespace)}")
        logger.debug(f"Table: {table}, Region: {region}, TTL: {ttl}")

        store = build_store(table, region, profile, endpoint_url, key_field, expiration_field)
        store.set(state_id, namespace, payload, ttl)

        key = build_key(state_id, namespace)
        fields = sorted(name for name, value in payload.items() if value is not None)
        if text:
            output_text(f"✅ Stored {key} ({len(fields)} fields)")
            if ttl:
                output_text(f"TTL: {ttl} seconds")
        else:
            output_json({"key": key, "fields": fields, "ttl": ttl})

    except ValueError as e:
        output_error(str(e), "Check table and field names", 2, text)
        ctx.exit(2)

    except BACKING_STORE_ERRORS as e:
        _backing_store_failure(ctx, e, text)


@click.command("get")
@click.argument("state_id")
@namespace_option
@store_options
@click.pass_context
def get_command(
    ctx: click.Context,
    state_id: str,
    namespace: tuple[str, ...],
    table: str,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    key_field: str,
    expiration_field: str,
    text: bool,
    verbose: int,
) -> None:
    """Fetch the state stored under an id.

    Prints every stored field, including the reserved key and expiration
    fields. Expired states are returned until the table removes them.

    Examples:

    \b
        # Get a session
        aws-state-store statestore get abc123

    \b
        # Get from a namespace and extract a field with jq
        aws-state-store statestore get abc123 -n shop | jq '.cart'
    """
    setup_logging(verbose)

    try:
        logger.info(f"Getting state '{state_id}' in namespace {list(namespace)}")
        logger.debug(f"Table: {table}, Region: {region}")

        store = build_store(table, region, profile, endpoint_url, key_field, expiration_field)
        state = store.get(state_id, namespace)
        if state is None:
            raise RecordNotFoundError(f"No state stored for '{build_key(state_id, namespace)}'")

        if text:
            for name, value in sorted(state.items()):
                output_text(f"{name} = {json.dumps(value)}")
        else:
            output_json(state)

    except RecordNotFoundError as e:
        output_error(str(e), "Check the id and namespace, or store it with 'set'", 1, text)
        ctx.exit(1)

    except MalformedRecordError as e:
        output_error(str(e), "Remove the record and store it again", 4, text)
        ctx.exit(4)

    except ValueError as e:
        output_error(str(e), "Check table and field names", 2, text)
        ctx.exit(2)

    except BACKING_STORE_ERRORS as e:
        _backing_store_failure(ctx, e, text)


@click.command("remove")
@click.argument("state_id")
@namespace_option
@store_options
@click.pass_context
def remove_command(
    ctx: click.Context,
    state_id: str,
    namespace: tuple[str, ...],
    table: str,
    region: str | None,
    profile: str | None,
    endpoint_url: str | None,
    key_field: str,
    expiration_field: str,
    text: bool,
    verbose: int,
) -> None:
    """Remove the state stored under an id.

    Removing a state that does not exist succeeds.

    Examples:

    \b
        aws-state-store statestore remove abc123 -n shop

    \b
    Output Format:
        Returns JSON:
        {"key": "shop:abc123", "removed": true}
    """
    setup_logging(verbose)

    try:
        logger.info(f"Removing state '{state_id}' in namespace {list(namespace)}")

        store = build_store(table, region, profile, endpoint_url, key_field, expiration_field)
        store.remove(state_id, namespace)

        key = build_key(state_id, namespace)
        if text:
            output_text(f"✅ Removed {key}")
        else:
            output_json({"key": key, "removed": True})

    except ValueError as e:
        output_error(str(e), "Check table and field names", 2, text)
        ctx.exit(2)

    except BACKING_STORE_ERRORS as e:
        _backing_store_failure(ctx, e, text)
