from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import TypeDeserializer

from .exceptions import DynamoSerializationError


class DynamoSerializer:
    """
    Converts items returned by the low-level DynamoDB client into plain Python.

    The low-level client returns DynamoDB JSON ({"S": "...", "N": "..."}) and
    numbers as Decimal. Items handed to observers and collected into results
    should look like the ones a boto3 Table resource returns, minus the Decimals.
    """

    def __init__(self) -> None:
        self._deserializer = TypeDeserializer()

    def from_dynamo(self, item: dict[str, Any]) -> dict[str, Any]:
        """Converts DynamoDB JSON format back to standard Python dict."""
        try:
            python_data = {k: self._deserializer.deserialize(v) for k, v in item.items()}
        except (TypeError, KeyError, AttributeError) as e:
            raise DynamoSerializationError(
                f"Failed to deserialize item. error={e!s}", original_error=e
            ) from e
        result = self._restore_to_python(python_data)
        assert isinstance(result, dict)
        return result

    def _restore_to_python(self, value: Any) -> Any:
        """
        Recursively restores DynamoDB values to Python-friendly types.

        Converts:
        - Decimal -> int (if whole number) or float
        """
        if isinstance(value, Decimal):
            if value % 1 == 0:
                return int(value)
            return float(value)
        if isinstance(value, list):
            return [self._restore_to_python(v) for v in value]
        if isinstance(value, dict):
            return {k: self._restore_to_python(v) for k, v in value.items()}
        return value
