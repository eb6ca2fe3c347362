"""
Shared pytest fixtures and configuration for Dynapage tests.

This module provides common fixtures used across unit and integration tests,
including mocked boto3 clients and tables, canned Query responses, and
LocalStack clients.
"""

import os
from typing import TYPE_CHECKING, Any
from unittest.mock import MagicMock

import boto3
import pytest

if TYPE_CHECKING:
    from tests.helpers.localstack import LocalStackHelper


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line("markers", "integration: Integration tests against LocalStack")


@pytest.fixture
def mock_client():
    """
    Creates a fully mocked low-level boto3 DynamoDB client.

    Tests set ``query.return_value`` or ``query.side_effect`` to script pages.
    """
    return MagicMock()


@pytest.fixture
def mock_table():
    """Creates a mocked boto3 Table resource."""
    table = MagicMock()
    table.name = "Test"
    return table


@pytest.fixture
def query_params() -> dict[str, Any]:
    """Query keyword arguments shared by most tests."""
    return {
        "TableName": "Test",
        "IndexName": "testIndex",
        "KeyConditionExpression": "#test = :test",
        "ExpressionAttributeNames": {"#test": "test"},
        "ExpressionAttributeValues": {":test": "1"},
    }


@pytest.fixture
def single_page_response() -> dict[str, Any]:
    """A Query response with one item and no cursor."""
    return {"Count": 1, "Items": [{"test": "1", "data": "1"}]}


@pytest.fixture
def two_page_responses() -> list[dict[str, Any]]:
    """Two Query responses linked by a LastEvaluatedKey."""
    return [
        {
            "Count": 1,
            "Items": [{"test": "1", "data": "1"}],
            "LastEvaluatedKey": {"test": "1"},
        },
        {
            "Count": 1,
            "Items": [{"test": "2", "data": "2"}],
        },
    ]


# Integration Test Fixtures


@pytest.fixture(scope="session")
def localstack_endpoint() -> str:
    """Get LocalStack endpoint URL from environment or default."""
    return os.getenv("LOCALSTACK_ENDPOINT", "http://localhost:4566")


@pytest.fixture(scope="session")
def localstack_helper(localstack_endpoint: str) -> "LocalStackHelper":
    """
    Provides a LocalStackHelper instance for integration tests.

    Integration tests are skipped when LocalStack is not reachable.
    """
    from tests.helpers.localstack import LocalStackHelper

    helper = LocalStackHelper(endpoint_url=localstack_endpoint)
    if not helper.is_available():
        pytest.skip(f"LocalStack not reachable at {localstack_endpoint}")
    return helper


@pytest.fixture(scope="session")
def localstack_client(localstack_helper: "LocalStackHelper"):
    """The low-level client used by the LocalStack helper."""
    return localstack_helper.client


@pytest.fixture(scope="session")
def localstack_table(localstack_helper: "LocalStackHelper", localstack_endpoint: str):
    """Returns a factory building boto3 Table resources bound to LocalStack."""
    resource = boto3.resource(
        "dynamodb",
        endpoint_url=localstack_endpoint,
        region_name=localstack_helper.region,
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )
    return resource.Table


@pytest.fixture
def sample_messages_data() -> list[dict[str, Any]]:
    """Twelve messages in one room, in sort key order."""
    return [
        {
            "room_id": {"S": "general"},
            "timestamp": {"S": f"2023-01-01T{hour:02d}:00:00Z"},
            "content": {"S": f"Message {hour}"},
            "likes": {"N": str(hour)},
        }
        for hour in range(12)
    ]


@pytest.fixture
def clean_messages_table(localstack_helper, sample_messages_data):
    """
    Creates the messages table, seeds it, and empties it after the test.
    """
    table_name = "integration_test_messages"
    localstack_helper.create_table(
        table_name=table_name, pk_name="room_id", sk_name="timestamp"
    )
    localstack_helper.clear_table(table_name, pk_name="room_id", sk_name="timestamp")
    localstack_helper.put_items(table_name, sample_messages_data)

    yield table_name

    localstack_helper.clear_table(table_name, pk_name="room_id", sk_name="timestamp")
