"""
Page fetchers: the one-page-at-a-time collaborators driven by the paginator.

Anything with a ``fetch(request) -> PageResult`` method can be paginated. The
adapters here cover boto3's two DynamoDB surfaces: the ``Table`` resource,
which already returns plain Python items, and the low-level client, which
returns DynamoDB JSON.
"""

from typing import Any, Protocol

from .exceptions import handle_dynamo_errors
from .pagination import PageResult
from .serializer import DynamoSerializer

_OPERATIONS = ("query", "scan")


class PageFetcher(Protocol):
    """Executes exactly one page of a query and returns it."""

    def fetch(self, request: dict[str, Any]) -> PageResult: ...


class AsyncPageFetcher(Protocol):
    """Awaitable variant of PageFetcher, accepted by aquery_all."""

    async def fetch(self, request: dict[str, Any]) -> PageResult: ...


def page_from_response(response: dict[str, Any]) -> PageResult:
    """Builds a PageResult from a raw boto3 Query/Scan response."""
    return PageResult.model_validate(response)


def _check_operation(operation: str) -> str:
    if operation not in _OPERATIONS:
        raise ValueError(f"Unsupported operation '{operation}', expected one of {_OPERATIONS}")
    return operation


class TableFetcher:
    """
    Fetches pages through a boto3 ``Table`` resource.

    Usage:
        table = boto3.resource("dynamodb").Table("orders")
        result = query_all(TableFetcher(table), {"KeyConditionExpression": ...})
    """

    def __init__(self, table: Any, operation: str = "query") -> None:
        self.table = table
        self.operation = _check_operation(operation)

    def fetch(self, request: dict[str, Any]) -> PageResult:
        response = getattr(self.table, self.operation)(**request)
        return page_from_response(response)


class ClientFetcher:
    """
    Fetches pages through a low-level boto3 DynamoDB client.

    Items are deserialized from DynamoDB JSON unless ``deserialize=False``.
    The LastEvaluatedKey is left in wire format so it can be sent back as the
    next ExclusiveStartKey unchanged.

    Errors raised by the client propagate as-is. With ``translate_errors=True``
    botocore ClientErrors are translated into DynapageError subclasses instead.
    """

    def __init__(
        self,
        client: Any,
        operation: str = "query",
        deserialize: bool = True,
        translate_errors: bool = False,
    ) -> None:
        self.client = client
        self.operation = _check_operation(operation)
        self.deserialize = deserialize
        self.translate_errors = translate_errors
        self._serializer = DynamoSerializer()

    def fetch(self, request: dict[str, Any]) -> PageResult:
        call = getattr(self.client, self.operation)
        if self.translate_errors:
            with handle_dynamo_errors(table_name=request.get("TableName")):
                response = call(**request)
        else:
            response = call(**request)

        page = page_from_response(response)
        if self.deserialize and page.items:
            page.items = [self._serializer.from_dynamo(item) for item in page.items]
        return page
