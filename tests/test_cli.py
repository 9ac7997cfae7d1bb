"""Tests for the statestore CLI commands."""

import json
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import NoCredentialsError
from click.testing import CliRunner

from aws_state_store.cli import main
from aws_state_store.statestore.core import table_operations
from conftest import FakeDynamoDB


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def session_cls(fake_dynamodb):
    with patch("aws_state_store.statestore.core.client.boto3.Session") as session_cls:
        session_cls.return_value.client.return_value = fake_dynamodb
        yield session_cls


def invoke(runner: CliRunner, *args: str):
    return runner.invoke(main, ["statestore", *args], catch_exceptions=False)


class TestStateCommands:
    """Tests for set, get and remove."""

    def test_set_then_get(self, runner, session_cls):
        result = invoke(runner, "set", "abc", '{"user": 42, "admin": false}', "-n", "sess")
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "key": "sess:abc",
            "fields": ["admin", "user"],
            "ttl": None,
        }

        result = invoke(runner, "get", "abc", "-n", "sess")
        assert result.exit_code == 0
        state = json.loads(result.stdout)
        assert state["user"] == 42
        assert state["admin"] is False
        assert state["__STATE_KEY__"] == "sess:abc"

    def test_set_with_ttl(self, runner, session_cls):
        result = invoke(runner, "set", "abc", '{"a": 1}', "--ttl", "60")
        assert result.exit_code == 0

        state = json.loads(invoke(runner, "get", "abc").stdout)
        assert "__STATE_EXPIRATION__" in state

    def test_cli_skips_warm_up(self, runner, session_cls, fake_dynamodb):
        invoke(runner, "remove", "abc")

        assert fake_dynamodb.calls_to("get_item") == []

    def test_get_missing(self, runner, session_cls):
        result = invoke(runner, "get", "nope")

        assert result.exit_code == 1
        assert "nope" in result.stderr

    def test_remove(self, runner, session_cls):
        invoke(runner, "set", "abc", '{"a": 1}')

        result = invoke(runner, "remove", "abc")

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"key": "abc", "removed": True}
        assert invoke(runner, "get", "abc").exit_code == 1

    def test_remove_missing_succeeds(self, runner, session_cls):
        assert invoke(runner, "remove", "nope").exit_code == 0

    def test_text_output(self, runner, session_cls):
        invoke(runner, "set", "abc", '{"a": [1]}')

        result = invoke(runner, "get", "abc", "--text")

        assert result.exit_code == 0
        assert "a = [1]" in result.stdout

    @pytest.mark.parametrize("data", ["{bad", "[1, 2]", '"text"'])
    def test_set_rejects_bad_data(self, runner, session_cls, data):
        result = invoke(runner, "set", "abc", data)

        assert result.exit_code == 2

    def test_malformed_record(self, runner, session_cls, fake_dynamodb):
        fake_dynamodb.tables["state_store_states"]["items"]['"abc"'] = {
            "__STATE_KEY__": {"S": '"abc"'},
            "bad": {"S": "{"},
        }

        result = invoke(runner, "get", "abc")

        assert result.exit_code == 4

    def test_missing_table(self, runner, session_cls):
        result = invoke(runner, "get", "abc", "--table", "missing_table")

        assert result.exit_code == 3
        assert "ResourceNotFoundException" in result.stderr

    def test_invalid_table_name(self, runner, session_cls):
        result = invoke(runner, "get", "abc", "--table", "x")

        assert result.exit_code == 2

    def test_no_credentials(self, runner, session_cls, fake_dynamodb):
        fake_dynamodb.get_item = MagicMock(side_effect=NoCredentialsError())

        result = invoke(runner, "get", "abc")

        assert result.exit_code == 3

    def test_connection_options(self, runner, session_cls):
        invoke(
            runner,
            "get",
            "abc",
            "--region",
            "eu-west-1",
            "--profile",
            "dev",
            "--endpoint-url",
            "http://localhost:8000",
        )

        session_cls.assert_called_once_with(profile_name="dev", region_name="eu-west-1")
        session_cls.return_value.client.assert_called_once_with(
            "dynamodb", endpoint_url="http://localhost:8000"
        )

    def test_environment_configuration(self, runner, session_cls, fake_dynamodb):
        fake_dynamodb.add_table("env_table", "sid")

        result = runner.invoke(
            main,
            ["statestore", "set", "abc", '{"a": 1}'],
            env={"STATESTORE_TABLE": "env_table", "STATESTORE_KEY_FIELD": "sid"},
        )

        assert result.exit_code == 0
        assert '"abc"' in fake_dynamodb.tables["env_table"]["items"]


class TestTableCommands:
    """Tests for create-table and table-args."""

    @pytest.fixture(autouse=True)
    def no_sleep(self, monkeypatch):
        monkeypatch.setattr(table_operations.time, "sleep", lambda seconds: None)

    @pytest.fixture
    def empty_session(self):
        fake = FakeDynamoDB(creating_polls=2)
        with patch("aws_state_store.statestore.core.client.boto3.Session") as session_cls:
            session_cls.return_value.client.return_value = fake
            yield fake

    def test_create_table(self, runner, empty_session):
        result = invoke(runner, "create-table", "--read-capacity", "5", "--write-capacity", "2")

        assert result.exit_code == 0
        output = json.loads(result.stdout)
        assert output["status"] == "ACTIVE"
        assert output["table"] == "state_store_states"
        assert empty_session.calls_to("create_table")[0]["ProvisionedThroughput"] == {
            "ReadCapacityUnits": 5,
            "WriteCapacityUnits": 2,
        }

    def test_create_table_gives_up(self, runner, empty_session):
        result = invoke(runner, "create-table", "--max-attempts", "1")

        assert result.exit_code == 4

    def test_create_existing_table(self, runner, session_cls):
        result = invoke(runner, "create-table")

        assert result.exit_code == 1
        assert "already exists" in result.stderr

    def test_table_args(self, runner):
        result = invoke(runner, "table-args", "--key-field", "sid", "--read-capacity", "3")

        assert result.exit_code == 0
        args = json.loads(result.stdout)
        assert args["KeySchema"] == [{"AttributeName": "sid", "KeyType": "HASH"}]
        assert args["ProvisionedThroughput"] == {"ReadCapacityUnits": 3, "WriteCapacityUnits": 1}

    def test_table_args_invalid_name(self, runner):
        result = invoke(runner, "table-args", "--table", "no spaces")

        assert result.exit_code == 2


def test_version(runner):
    result = runner.invoke(main, ["--version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output
