from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterator, Optional

from .common import ClassChartsResource, date_params
from .objects import ActivityPoint, ActivityResponse
from .pagination import paginate

if TYPE_CHECKING:  # pragma: no cover
    from .session import ClassCharts

__all__ = ["Activity"]


class Activity(ClassChartsResource):
    """
    Interfaces with the student's activity feed (behaviour points, detentions, ...).

    The feed is paged: `get` returns one page, iterating or `get_full` walks all of them.

    Example:
    -------
    >>> for point in Activity(client, from_date=date(2023, 9, 1), to_date=date(2023, 9, 30)):
    >>>     print(point.reason)
    Excellent effort

    """

    def __init__(
        self,
        client: ClassCharts,
        from_date: date | None = None,
        to_date: date | None = None,
        max_pages: int | None = None,
    ):
        super().__init__(client)
        self.from_date = from_date
        self.to_date = to_date
        self.max_pages = max_pages

    def get(self, last_id: Optional[str] = None) -> ActivityResponse:
        """Gets one page of activity, starting after the item with id `last_id`."""
        params = date_params(self.from_date, self.to_date)
        if last_id is not None:
            params["last_id"] = last_id
        return self.client.json(self.client.student_path("activity"), ActivityResponse, params=params)

    def get_full(self) -> list[ActivityPoint]:
        """Gets the whole activity feed between the two dates by paging through `get`."""
        return list(self)

    def __iter__(self) -> Iterator[ActivityPoint]:
        yield from paginate(
            lambda cursor: self.get(last_id=cursor).data,
            lambda point: str(point.id),
            max_pages=self.max_pages,
        )
