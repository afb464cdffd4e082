from typing import Iterator

from .common import ClassChartsResource
from .objects import PupilField, PupilFieldsResponse

__all__ = ["PupilFields"]


class PupilFields(ClassChartsResource):
    """Retrieves the custom fields the school keeps on the student (e.g. reading age)."""

    def get(self) -> PupilFieldsResponse:
        return self.client.json(self.client.student_path("customfields"), PupilFieldsResponse)

    def __iter__(self) -> Iterator[PupilField]:
        yield from self.get().data.fields
