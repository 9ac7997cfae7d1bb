"""CLI entry point for aws-state-store.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import click

from aws_state_store import __version__
from aws_state_store.statestore.commands.state_commands import (
    get_command,
    remove_command,
    set_command,
)
from aws_state_store.statestore.commands.table_commands import (
    create_table_command,
    table_args_command,
)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """A CLI for DynamoDB-backed expiring state storage"""
    pass


@main.group("statestore")
def statestore() -> None:
    """Keyed, expiring state records in a DynamoDB table"""
    pass


# Register table commands
statestore.add_command(create_table_command)
statestore.add_command(table_args_command)

# Register state commands
statestore.add_command(set_command)
statestore.add_command(get_command)
statestore.add_command(remove_command)

if __name__ == "__main__":
    main()
