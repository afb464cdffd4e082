import logging
from typing import Iterator

from .common import ClassChartsResource
from .exceptions import ClassChartsEnvelopeError, ClassChartsError
from .objects import RewardItem, RewardPurchaseResponse, RewardsResponse

__all__ = ["Rewards"]

logger = logging.getLogger(__name__)


class Rewards(ClassChartsResource):
    """
    Interfaces with the reward shop, where points are spent on items.

    Example:
    -------
    >>> rewards = Rewards(client)
    >>> for item in rewards:
    >>>     print(item.name, item.price, item.can_purchase)
    Homework pass 10 True
    >>> rewards.purchase(84564).data.balance
    0

    """

    def get(self) -> RewardsResponse:
        return self.client.json(self.client.student_path("rewards"), RewardsResponse)

    def __iter__(self) -> Iterator[RewardItem]:
        yield from self.get().data

    def purchase(self, item_id: int | str) -> RewardPurchaseResponse:
        """
        Buys a reward item with the student's points.

        Raises:
            ClassChartsError: ClassCharts refused the purchase. An unknown item makes ClassCharts
                answer with an error page instead of JSON, reported with code 0.
        """
        student_id = self.client.require_student_id()
        logger.debug(f"Purchasing reward item {item_id} for student {student_id}")
        try:
            return self.client.json(
                f"/purchase/{item_id}",
                RewardPurchaseResponse,
                method="post",
                data={"pupil_id": student_id},
            )
        except ClassChartsEnvelopeError as e:
            raise ClassChartsError(0, "Internal Server Error, the item may not exist.") from e
