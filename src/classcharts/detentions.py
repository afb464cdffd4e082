from typing import Iterator

from .common import ClassChartsResource
from .objects import Detention, DetentionsResponse

__all__ = ["Detentions"]


class Detentions(ClassChartsResource):
    """
    Retrieves the student's detentions.

    Example:
    -------
    >>> for detention in Detentions(client):
    >>>     print(detention.date, detention.attended)
    2023-08-24 DetentionAttended.YES

    """

    def get(self) -> DetentionsResponse:
        return self.client.json(self.client.student_path("detentions"), DetentionsResponse)

    def __iter__(self) -> Iterator[Detention]:
        yield from self.get().data
