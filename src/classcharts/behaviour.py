from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .common import ClassChartsResource, date_params
from .objects import BehaviourResponse

if TYPE_CHECKING:  # pragma: no cover
    from .session import ClassCharts

__all__ = ["Behaviour"]


class Behaviour(ClassChartsResource):
    """
    Retrieves the student's behaviour summary: a timeline of positive/negative points
    and the reasons they were given for.

    Example:
    -------
    >>> behaviour = Behaviour(client, from_date=date(2023, 9, 4)).get()
    >>> behaviour.data.positive_reasons
    {'Homework': 4, 'Effort': 3}

    """

    def __init__(self, client: ClassCharts, from_date: date | None = None, to_date: date | None = None):
        super().__init__(client)
        self.from_date = from_date
        self.to_date = to_date

    def get(self) -> BehaviourResponse:
        return self.client.json(
            self.client.student_path("behaviour"),
            BehaviourResponse,
            params=date_params(self.from_date, self.to_date),
        )
