from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Iterator

from .common import ClassChartsResource, format_date
from .objects import Lesson, LessonsResponse

if TYPE_CHECKING:  # pragma: no cover
    from .session import ClassCharts

__all__ = ["Lessons"]


class Lessons(ClassChartsResource):
    """
    Retrieves the student's timetable for a single day.

    Example:
    -------
    >>> for lesson in Lessons(client, date(2023, 9, 26)):
    >>>     print(lesson.period_number, lesson.subject_name)
    P1 Maths
    P2 English

    """

    def __init__(self, client: ClassCharts, day: date):
        super().__init__(client)
        self.day = day

    def get(self) -> LessonsResponse:
        return self.client.json(
            self.client.student_path("timetable"),
            LessonsResponse,
            params={"date": format_date(self.day)},
        )

    def __iter__(self) -> Iterator[Lesson]:
        yield from self.get().data
