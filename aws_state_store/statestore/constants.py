"""
Constants for statestore operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

# Default store configuration
DEFAULT_REGION = "us-east-1"
DEFAULT_TABLE_NAME = "state_store_states"

# Reserved attribute names, chosen to stay clear of user data
DEFAULT_KEY_FIELD = "__STATE_KEY__"
DEFAULT_EXPIRATION_FIELD = "__STATE_EXPIRATION__"

# Id fetched on construction to warm up the client
INITIALIZATION_ID = "state-store-initialization"

# Key composition
KEY_SEPARATOR = ":"
KEY_ESCAPE = "\\"

# DynamoDB wire format
ATTR_TYPE_STRING = "S"
KEY_TYPE_HASH = "HASH"
DEFAULT_READ_CAPACITY = 1
DEFAULT_WRITE_CAPACITY = 1

# Table readiness polling
TABLE_STATUS_ACTIVE = "ACTIVE"
TABLE_POLL_INITIAL_WAIT = 1.0  # Start with 1 second
TABLE_POLL_FACTOR = 2.0  # Double the wait each time through

# Environment variables read by the CLI
ENV_TABLE = "STATESTORE_TABLE"
ENV_KEY_FIELD = "STATESTORE_KEY_FIELD"
ENV_EXPIRATION_FIELD = "STATESTORE_EXPIRATION_FIELD"
ENV_ENDPOINT_URL = "STATESTORE_ENDPOINT_URL"
