"""
Runs a DynamoDB Query (or Scan) to completion by following LastEvaluatedKey.

Each page request is a fresh shallow copy of the caller's request with only
ExclusiveStartKey overridden, so the caller's dict is never mutated. Pages are
fetched strictly one after another: page N+1 cannot be requested before page
N's cursor is known.
"""

import inspect
from typing import Any

from ._logging import logger, redact_key
from .exceptions import PageLimitExceededError
from .fetchers import AsyncPageFetcher, PageFetcher
from .pagination import PageResult, QueryAllOptions, QueryAllResult, ResultMode

START_KEY_FIELD = "ExclusiveStartKey"


def _reject_awaitable(value: Any) -> None:
    """Refuses coroutines and other awaitables on the blocking entry point."""
    if inspect.isawaitable(value):
        close = getattr(value, "close", None)
        if close is not None:
            close()
        raise TypeError("use aquery_all for awaitable fetchers/observers")


class _QueryRun:
    """Accumulator state private to one query_all / aquery_all call."""

    def __init__(self, request: dict[str, Any], options: QueryAllOptions) -> None:
        self.request = request
        self.options = options
        self.result = QueryAllResult()
        self.start_key: Any = None

        logger.info(
            "Starting paginated query",
            extra={
                "table": request.get("TableName"),
                "index": request.get("IndexName"),
                "result_mode": options.result_mode.value,
                "max_pages": options.max_pages,
            },
        )

    def next_request(self) -> dict[str, Any]:
        max_pages = self.options.max_pages
        if max_pages is not None and self.result.pages >= max_pages:
            raise PageLimitExceededError(max_pages, last_evaluated_key=self.start_key)

        page_request = dict(self.request)
        if self.start_key is not None:
            page_request[START_KEY_FIELD] = self.start_key
        return page_request

    def begin_page(self, page: PageResult) -> list[Any]:
        self.result.pages += 1
        logger.debug(
            "Fetched page",
            extra={
                "table": self.request.get("TableName"),
                "page": self.result.pages,
                "page_count": page.effective_count,
                "has_more": page.has_more,
                "cursor_hash": redact_key(page.last_evaluated_key),
            },
        )
        if self.options.on_each_item is None or not page.effective_count:
            return []
        return page.items or []

    def absorb(self, page: PageResult) -> None:
        count = page.effective_count
        if count:
            # A count without items (malformed page) still adds to the total
            if self.options.result_mode is ResultMode.COLLECT and page.items:
                if self.result.items is None:
                    self.result.items = []
                self.result.items.extend(page.items)
            self.result.count += count
        # Empty cursors ("" or {}) end the query like a missing one
        self.start_key = page.last_evaluated_key or None

    @property
    def done(self) -> bool:
        return self.start_key is None

    def finish(self) -> QueryAllResult:
        logger.info(
            "Paginated query complete",
            extra={
                "table": self.request.get("TableName"),
                "pages": self.result.pages,
                "count": self.result.count,
            },
        )
        return self.result


def query_all(
    fetcher: PageFetcher,
    request: dict[str, Any],
    options: QueryAllOptions | None = None,
) -> QueryAllResult:
    """
    Fetches every page of a query and aggregates the results.

    Args:
        fetcher: Executes one page (see TableFetcher / ClientFetcher)
        request: boto3 Query/Scan keyword arguments. An ExclusiveStartKey
                 already present is used for the first page.
        options: Observer, result mode and optional page limit

    Returns:
        QueryAllResult with the total count, and the items in COLLECT mode.

    Errors raised by the fetcher or by the observer propagate unchanged and
    no partial result is returned.
    Coroutine fetchers or observers raise TypeError; use aquery_all for them.

    Usage:
        result = query_all(
            TableFetcher(table),
            {"KeyConditionExpression": Key("room_id").eq("general")},
            QueryAllOptions(on_each_item=print, result_mode="discard"),
        )
    """
    run = _QueryRun(request, options or QueryAllOptions())
    observer = run.options.on_each_item

    while True:
        page = fetcher.fetch(run.next_request())
        _reject_awaitable(page)
        for item in run.begin_page(page):
            _reject_awaitable(observer(item))  # type: ignore[misc]
        run.absorb(page)
        if run.done:
            return run.finish()


async def aquery_all(
    fetcher: AsyncPageFetcher | PageFetcher,
    request: dict[str, Any],
    options: QueryAllOptions | None = None,
) -> QueryAllResult:
    """
    Awaitable variant of query_all.

    ``fetcher.fetch`` and the observer may be coroutine functions or plain
    callables; awaitable return values are awaited in order before the loop
    moves on. Observers are never run concurrently with the next fetch.
    """
    run = _QueryRun(request, options or QueryAllOptions())
    observer = run.options.on_each_item

    while True:
        page = fetcher.fetch(run.next_request())
        if inspect.isawaitable(page):
            page = await page
        for item in run.begin_page(page):
            outcome = observer(item)  # type: ignore[misc]
            if inspect.isawaitable(outcome):
                await outcome
        run.absorb(page)
        if run.done:
            return run.finish()
