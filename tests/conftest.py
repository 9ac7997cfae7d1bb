"""Shared fixtures: an in-memory stand-in for the DynamoDB low-level client."""

from typing import Any

import pytest
from botocore.exceptions import ClientError

from aws_state_store.statestore.constants import DEFAULT_KEY_FIELD, DEFAULT_TABLE_NAME
from aws_state_store.statestore.models import StoreConfig


def client_error(code: str, operation: str, message: str = "") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message or code}}, operation)


class FakeDynamoDB:
    """Implements the item and table calls the store makes, keyed on one hash key.

    Tables report CREATING for `creating_polls` DescribeTable calls, then ACTIVE.
    """

    def __init__(self, creating_polls: int = 0):
        self.tables: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.creating_polls = creating_polls

    def add_table(self, name: str, key_field: str) -> None:
        self.tables[name] = {"key_field": key_field, "items": {}, "polls": 0, "args": {}}

    def _table(self, name: str, operation: str) -> dict[str, Any]:
        if name not in self.tables:
            raise client_error(
                "ResourceNotFoundException", operation, "Requested resource not found"
            )
        return self.tables[name]

    def _key_value(self, table: dict[str, Any], key: dict[str, Any], operation: str) -> str:
        attribute = key.get(table["key_field"])
        if attribute is None or "S" not in attribute:
            raise client_error(
                "ValidationException", operation, "Key element does not match the schema"
            )
        return attribute["S"]

    def put_item(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("put_item", kwargs))
        table = self._table(kwargs["TableName"], "PutItem")
        item = kwargs["Item"]
        table["items"][self._key_value(table, item, "PutItem")] = dict(item)
        return {}

    def get_item(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("get_item", kwargs))
        table = self._table(kwargs["TableName"], "GetItem")
        item = table["items"].get(self._key_value(table, kwargs["Key"], "GetItem"))
        return {"Item": dict(item)} if item is not None else {}

    def delete_item(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("delete_item", kwargs))
        table = self._table(kwargs["TableName"], "DeleteItem")
        table["items"].pop(self._key_value(table, kwargs["Key"], "DeleteItem"), None)
        return {}

    def create_table(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("create_table", kwargs))
        name = kwargs["TableName"]
        if name in self.tables:
            raise client_error(
                "ResourceInUseException", "CreateTable", f"Table already exists: {name}"
            )
        key_field = kwargs["KeySchema"][0]["AttributeName"]
        self.add_table(name, key_field)
        self.tables[name]["args"] = kwargs
        return {"TableDescription": {"TableName": name, "TableStatus": "CREATING"}}

    def describe_table(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("describe_table", kwargs))
        name = kwargs["TableName"]
        table = self._table(name, "DescribeTable")
        table["polls"] += 1
        status = "ACTIVE" if table["polls"] > self.creating_polls else "CREATING"
        return {
            "Table": {
                "TableName": name,
                "TableStatus": status,
                "TableArn": f"arn:aws:dynamodb:us-east-1:123456789012:table/{name}",
            }
        }

    def calls_to(self, operation: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == operation]


@pytest.fixture
def fake_dynamodb() -> FakeDynamoDB:
    """Fake client with the default state table already created."""
    fake = FakeDynamoDB()
    fake.add_table(DEFAULT_TABLE_NAME, DEFAULT_KEY_FIELD)
    return fake


@pytest.fixture
def config() -> StoreConfig:
    """Default configuration without the warm-up get."""
    return StoreConfig(connect_on_create=False)
