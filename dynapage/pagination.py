"""
Pagination data structures for Dynapage.

This module holds the value types exchanged between the paginator, the page
fetchers and the caller: a single fetched page, the aggregated result of a
full run, and the per-call options.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResultMode(str, Enum):
    """Whether fetched items are kept in the final result or only counted."""

    COLLECT = "collect"
    DISCARD = "discard"


class PageResult(BaseModel):
    """
    Represents a single page of results with pagination cursor.

    Can be built directly from a boto3 Query/Scan response, which uses the
    capitalized names (Items, Count, LastEvaluatedKey) as aliases.

    Attributes:
        items: Items in this page (None if the response carried no Items)
        count: Number of items reported for this page (None if not reported)
        last_evaluated_key: Cursor for the next page (None if no more pages)
        scanned_count: Items evaluated before filtering, when reported
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    items: list[Any] | None = Field(default=None, alias="Items")
    count: int | None = Field(default=None, alias="Count")
    last_evaluated_key: Any = Field(default=None, alias="LastEvaluatedKey")
    scanned_count: int | None = Field(default=None, alias="ScannedCount")

    @property
    def has_more(self) -> bool:
        """Returns True if there are more pages available (an empty cursor means no)."""
        return bool(self.last_evaluated_key)

    @property
    def effective_count(self) -> int:
        """The reported count, or the number of items when no count was reported."""
        if self.count is not None:
            return self.count
        return len(self.items or [])


class QueryAllOptions(BaseModel):
    """
    Per-call configuration for query_all / aquery_all.

    Attributes:
        on_each_item: Called once per item, in page order. Return value is ignored.
        result_mode: COLLECT keeps items in the result, DISCARD only counts them.
        max_pages: Optional upper bound on fetches. None means follow every cursor.

    Invalid values raise pydantic.ValidationError, not dynapage.ValidationError
    (which is reserved for requests DynamoDB rejects).
    """

    model_config = ConfigDict(frozen=True)

    on_each_item: Callable[[Any], Any] | None = None
    result_mode: ResultMode = ResultMode.COLLECT
    max_pages: int | None = Field(default=None, ge=1)


@dataclass
class QueryAllResult:
    """
    Aggregated outcome of a paginated query.

    Attributes:
        count: Total items seen across all pages
        items: Collected items in page order. None in DISCARD mode, and in
               COLLECT mode when no page contributed any items.
        pages: Number of page fetches performed
    """

    count: int = 0
    items: list[Any] | None = None
    pages: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Renders the result in boto3 response shape ({"Items": [...], "Count": n})."""
        result: dict[str, Any] = {}
        if self.items is not None:
            result["Items"] = self.items
        result["Count"] = self.count
        return result
