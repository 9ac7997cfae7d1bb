"""aws-state-store: expiring state storage backed by DynamoDB.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from aws_state_store.statestore.core.store import StateStore
from aws_state_store.statestore.exceptions import MalformedRecordError, StateStoreError
from aws_state_store.statestore.models import StoreConfig

__version__ = "0.1.0"

__all__ = ["MalformedRecordError", "StateStore", "StateStoreError", "StoreConfig", "__version__"]
