from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .common import ClassChartsResource, date_params
from .objects import AttendanceResponse

if TYPE_CHECKING:  # pragma: no cover
    from .session import ClassCharts

__all__ = ["Attendance"]


class Attendance(ClassChartsResource):
    """
    Retrieves the student's attendance, as a grid of date -> session -> period.

    Example:
    -------
    >>> attendance = Attendance(client, from_date=date(2023, 9, 1), to_date=date(2023, 9, 30)).get()
    >>> attendance.data["2023-09-04"]["AM"].status
    <AttendancePeriodStatus.PRESENT: 'present'>
    >>> attendance.meta.percentage
    '100'

    """

    def __init__(self, client: ClassCharts, from_date: date | None = None, to_date: date | None = None):
        super().__init__(client)
        self.from_date = from_date
        self.to_date = to_date

    def get(self) -> AttendanceResponse:
        return self.client.json(
            self.client.student_path("attendance"),
            AttendanceResponse,
            params=date_params(self.from_date, self.to_date),
        )
