"""Page fetcher port used by progressive loading.

Date: 2026-02-10
"""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import TYPE_CHECKING, Any, Protocol, Union

if TYPE_CHECKING:
    from gridcore.models.fetch_result import FetchResult

FetchResponse = Union[Sequence[Any], "FetchResult"]


class PageFetcher(Protocol):
    """Host function returning the rows of a 1-based page.

    May be a plain function or a coroutine function. Raising, or returning
    ``FetchResult.failed(...)``, ends progressive loading.
    """

    def __call__(self, page: int) -> FetchResponse | Awaitable[FetchResponse]: ...
