"""
Custom exceptions for statestore operations.

Failures from DynamoDB itself are not wrapped: botocore's ClientError and
BotoCoreError reach the caller unchanged. BACKING_STORE_ERRORS groups them
for callers (like the CLI) that want to catch both.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from botocore.exceptions import BotoCoreError, ClientError

BACKING_STORE_ERRORS = (ClientError, BotoCoreError)


class StateStoreError(Exception):
    """Base exception for statestore operations."""

    pass


class MalformedRecordError(StateStoreError):
    """A stored attribute could not be decoded."""

    pass


class TableNotReadyError(StateStoreError):
    """Table did not become ACTIVE within the allowed polling attempts."""

    pass


class RecordNotFoundError(StateStoreError):
    """No record stored under the requested key."""

    pass
