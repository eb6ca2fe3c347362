from .exceptions import (
    DynamoSerializationError,
    DynapageError,
    PageLimitExceededError,
    ProvisionedThroughputExceededError,
    RequestTimeoutError,
    TableNotFoundError,
    ValidationError,
    handle_dynamo_errors,
)
from .fetchers import AsyncPageFetcher, ClientFetcher, PageFetcher, TableFetcher, page_from_response
from .pagination import PageResult, QueryAllOptions, QueryAllResult, ResultMode
from .query_all import aquery_all, query_all
from .serializer import DynamoSerializer

__all__ = [
    "query_all",
    "aquery_all",
    "QueryAllOptions",
    "QueryAllResult",
    "ResultMode",
    "PageResult",
    # Fetchers
    "PageFetcher",
    "AsyncPageFetcher",
    "TableFetcher",
    "ClientFetcher",
    "page_from_response",
    "DynamoSerializer",
    # Exceptions
    "DynapageError",
    "PageLimitExceededError",
    "TableNotFoundError",
    "ProvisionedThroughputExceededError",
    "RequestTimeoutError",
    "ValidationError",
    "DynamoSerializationError",
    "handle_dynamo_errors",
]
