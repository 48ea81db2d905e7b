"""Business logic for issuing lotto tickets from a purchase amount."""

from __future__ import annotations

import logging
import random

from lotto_reward.domains.lotto import (
    LOTTO_MAX_NUMBER,
    LOTTO_MIN_NUMBER,
    LOTTO_NUMBER_COUNT,
    Lotto,
)
from lotto_reward.errors import ValidationError
from lotto_reward.services.reward_service import DEFAULT_TICKET_PRICE

logger = logging.getLogger(__name__)

MAX_TICKETS = 1000


class TicketService:
    """Issue random tickets, one per ticket price unit of the purchase amount."""

    def __init__(self, ticket_price: int = DEFAULT_TICKET_PRICE, rng: random.Random | None = None) -> None:
        if ticket_price <= 0:
            raise ValueError("ticket_price must be positive")
        self._ticket_price = int(ticket_price)
        self._rng = rng or random.SystemRandom()

    @property
    def ticket_price(self) -> int:
        return self._ticket_price

    def count_tickets(self, purchase_amount: int) -> int:
        amount = int(purchase_amount)
        if amount <= 0:
            raise ValidationError("purchase_amount must be positive", details={"purchase_amount": amount})
        if amount % self._ticket_price != 0:
            raise ValidationError(
                f"purchase_amount must be a multiple of {self._ticket_price}",
                details={"purchase_amount": amount},
            )
        count = amount // self._ticket_price
        if count > MAX_TICKETS:
            raise ValidationError(
                f"At most {MAX_TICKETS} tickets can be bought at once",
                details={"purchase_amount": amount},
            )
        return count

    def issue(self, count: int) -> list[Lotto]:
        population = range(LOTTO_MIN_NUMBER, LOTTO_MAX_NUMBER + 1)
        return [
            Lotto(sorted(self._rng.sample(population, LOTTO_NUMBER_COUNT)))
            for _ in range(int(count))
        ]

    def purchase(self, purchase_amount: int) -> list[Lotto]:
        count = self.count_tickets(purchase_amount)
        tickets = self.issue(count)
        logger.info("Issued %d tickets for %d", count, int(purchase_amount))
        return tickets
