from typing import Iterator

from .common import ClassChartsResource
from .objects import Announcement, AnnouncementsResponse

__all__ = ["Announcements"]


class Announcements(ClassChartsResource):
    """
    Retrieves the announcements sent to the student.

    Example:
    -------
    >>> for announcement in Announcements(client):
    >>>     print(announcement.title)
    Sports day

    """

    def get(self) -> AnnouncementsResponse:
        return self.client.json(self.client.student_path("announcements"), AnnouncementsResponse)

    def __iter__(self) -> Iterator[Announcement]:
        yield from self.get().data
