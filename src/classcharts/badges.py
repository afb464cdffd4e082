from typing import Iterator

from .common import ClassChartsResource
from .objects import Badge, BadgesResponse

__all__ = ["Badges"]


class Badges(ClassChartsResource):
    """Retrieves the event badges the student has earned."""

    def get(self) -> BadgesResponse:
        return self.client.json(self.client.student_path("eventbadges"), BadgesResponse)

    def __iter__(self) -> Iterator[Badge]:
        yield from self.get().data
