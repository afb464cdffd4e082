from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterator

from .common import ClassChartsResource, date_params
from .objects import DisplayDate, Homework, HomeworksResponse

if TYPE_CHECKING:  # pragma: no cover
    from .session import ClassCharts

__all__ = ["Homeworks"]


class Homeworks(ClassChartsResource):
    """
    Retrieves the student's homework.

    `display_date` picks whether `from_date`/`to_date` filter on the due date or on the issue date.

    Example:
    -------
    >>> homeworks = Homeworks(client, display_date=DisplayDate.DUE_DATE, from_date=date.today())
    >>> for homework in homeworks:
    >>>     print(homework.title, homework.status.ticked)
    Maths Homework True

    """

    def __init__(
        self,
        client: ClassCharts,
        from_date: date | None = None,
        to_date: date | None = None,
        display_date: DisplayDate | None = None,
    ):
        super().__init__(client)
        self.from_date = from_date
        self.to_date = to_date
        self.display_date = display_date

    def get(self) -> HomeworksResponse:
        params = date_params(self.from_date, self.to_date)
        if self.display_date is not None:
            params["display_date"] = DisplayDate(self.display_date).value
        return self.client.json(self.client.student_path("homeworks"), HomeworksResponse, params=params)

    def __iter__(self) -> Iterator[Homework]:
        yield from self.get().data
