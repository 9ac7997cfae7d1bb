"""
Type models for statestore operations.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

from dataclasses import dataclass

from .constants import (
    DEFAULT_EXPIRATION_FIELD,
    DEFAULT_KEY_FIELD,
    DEFAULT_REGION,
    DEFAULT_TABLE_NAME,
)
from .utils import validate_field_name, validate_table_name


@dataclass(frozen=True)
class StoreConfig:
    """Configuration for a DynamoDB-backed state store.

    Attributes:
        region: Region used when the store builds its own boto3 session
        table: Table where states are stored
        key_field: Attribute holding the derived state key (the hash key)
        expiration_field: Attribute holding the absolute expiration epoch
        consistent_read: Request strongly consistent reads on get
        connect_on_create: Issue a throwaway get when the store is created
    """

    region: str = DEFAULT_REGION
    table: str = DEFAULT_TABLE_NAME
    key_field: str = DEFAULT_KEY_FIELD
    expiration_field: str = DEFAULT_EXPIRATION_FIELD
    consistent_read: bool = True
    connect_on_create: bool = True

    def __post_init__(self) -> None:
        if not self.region:
            raise ValueError("Region cannot be empty")
        validate_table_name(self.table)
        validate_field_name(self.key_field)
        validate_field_name(self.expiration_field)
        if self.key_field == self.expiration_field:
            raise ValueError("Key field and expiration field must differ")
