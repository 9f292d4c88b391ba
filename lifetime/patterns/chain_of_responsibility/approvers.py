"""Purchase approvers linked into a chain."""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class Purchase:
    """Request details."""
    number: int
    amount: float
    purpose: str


class Approver:
    """Handler. Approves purchases below its limit, otherwise defers to its successor."""

    limit: float = 0.0

    def __init__(self):
        self.successor: Optional["Approver"] = None

    def set_successor(self, successor: "Approver") -> "Approver":
        self.successor = successor
        return successor

    def process_request(self, purchase: Purchase) -> Optional["Approver"]:
        """
        Handle a purchase or pass it along the chain.

        Returns:
            The approver that approved the purchase, or None
        """
        if purchase.amount < self.limit:
            print(f"{type(self).__name__} approved request# {purchase.number}")
            return self

        if self.successor is not None:
            logger.debug(f"{type(self).__name__} forwards request# {purchase.number}")
            return self.successor.process_request(purchase)

        return self.escalate(purchase)

    def escalate(self, purchase: Purchase) -> None:
        """Called when nobody in the chain can approve."""
        return None


class Director(Approver):
    limit = 10000.0


class VicePresident(Approver):
    limit = 25000.0


class President(Approver):
    limit = 100000.0

    def escalate(self, purchase: Purchase) -> None:
        print(f"Request# {purchase.number} requires an executive meeting!")
        return None
