"""Business logic for winning statistics and rate of return."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, Sequence

from lotto_reward import messages
from lotto_reward.formatting import DEFAULT_FORMATTER, CurrencyFormatter

logger = logging.getLogger(__name__)

DEFAULT_TICKET_PRICE = 1000


class MatchTier(str, Enum):
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    FIVE_BONUS = "5+1"
    SIX = "6"


BONUS_MATCH_COUNT = 5
MIN_WINNING_MATCH_COUNT = 3

PRIZE_MONEY: Mapping[MatchTier, int] = MappingProxyType(
    {
        MatchTier.THREE: 5_000,
        MatchTier.FOUR: 50_000,
        MatchTier.FIVE: 1_500_000,
        MatchTier.FIVE_BONUS: 30_000_000,
        MatchTier.SIX: 2_000_000_000,
    }
)

ORDER_KEYS: tuple[MatchTier, ...] = (
    MatchTier.THREE,
    MatchTier.FOUR,
    MatchTier.FIVE,
    MatchTier.FIVE_BONUS,
    MatchTier.SIX,
)

Statistics = Mapping[MatchTier, int]


class WinningDraw(Protocol):
    def get_winning_numbers(self) -> Sequence[int]: ...

    def get_bonus_number(self) -> int: ...


class Ticket(Protocol):
    def get_numbers(self) -> Sequence[int]: ...


@dataclass(frozen=True)
class RewardSummary:
    statistics: Statistics
    total_prize: int
    total_spent: int
    rate_of_return: Decimal
    rows: tuple[str, ...]


class RewardCalculator:
    """Match tickets against one winning draw and build the statistics report.

    The draw is captured at construction and never changes; every call to
    :meth:`calculate_reward` works on its own local statistics, so one
    instance can serve any number of ticket sets.
    """

    def __init__(
        self,
        winning_lotto: WinningDraw,
        *,
        ticket_price: int = DEFAULT_TICKET_PRICE,
        formatter: CurrencyFormatter | None = None,
    ) -> None:
        self._winning_numbers = frozenset(int(n) for n in winning_lotto.get_winning_numbers())
        self._bonus_number = int(winning_lotto.get_bonus_number())
        if ticket_price <= 0:
            raise ValueError("ticket_price must be positive")
        self._ticket_price = int(ticket_price)
        self._formatter = formatter or DEFAULT_FORMATTER

    @property
    def winning_numbers(self) -> frozenset[int]:
        return self._winning_numbers

    @property
    def bonus_number(self) -> int:
        return self._bonus_number

    def calculate_match_count(self, numbers: Iterable[int]) -> int:
        return sum(1 for n in numbers if int(n) in self._winning_numbers)

    @staticmethod
    def classify_tier(match_count: int, numbers: Sequence[int], bonus_number: int) -> MatchTier | None:
        """Map a match count to its tier; ``None`` means the ticket wins nothing.

        The bonus number only matters for exactly five matches.
        """

        if match_count < MIN_WINNING_MATCH_COUNT:
            return None
        if match_count == BONUS_MATCH_COUNT and bonus_number in numbers:
            return MatchTier.FIVE_BONUS
        return MatchTier(str(match_count))

    @staticmethod
    def calculate_prize_for_match(tier: MatchTier | None) -> int:
        if tier is None:
            return 0
        return PRIZE_MONEY.get(tier, 0)

    @staticmethod
    def initialize_statistics() -> dict[MatchTier, int]:
        return {tier: 0 for tier in ORDER_KEYS}

    @staticmethod
    def update_match_count(statistics: Statistics, tier: MatchTier) -> dict[MatchTier, int]:
        """Return a copy of ``statistics`` with ``tier`` incremented by one."""

        updated = dict(statistics)
        updated[tier] = updated.get(tier, 0) + 1
        return updated

    def calculate_total_prize_and_statistics(
        self, lottos: Iterable[Ticket], statistics: Statistics
    ) -> tuple[int, dict[MatchTier, int]]:
        total_prize = 0
        updated = dict(statistics)

        for lotto in lottos:
            numbers = lotto.get_numbers()
            match_count = self.calculate_match_count(numbers)
            tier = self.classify_tier(match_count, numbers, self._bonus_number)
            if tier is None:
                continue
            total_prize += self.calculate_prize_for_match(tier)
            updated = self.update_match_count(updated, tier)

        return total_prize, updated

    @staticmethod
    def calculate_rate_of_return(total_prize: int, total_spent: int) -> Decimal:
        """Prize over spend as a percentage, rounded half-up to one decimal.

        An empty purchase has nothing to return on; it reports 0.0.
        """

        if total_spent <= 0:
            return Decimal("0.0")
        rate = Decimal(total_prize) * 100 / Decimal(total_spent)
        return rate.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)

    def summarize(self, lottos: Sequence[Ticket]) -> RewardSummary:
        total_prize, statistics = self.calculate_total_prize_and_statistics(
            lottos, self.initialize_statistics()
        )
        total_spent = len(lottos) * self._ticket_price
        rate_of_return = self.calculate_rate_of_return(total_prize, total_spent)

        logger.debug(
            "Reward summary tickets=%d total_prize=%d total_spent=%d rate=%s",
            len(lottos),
            total_prize,
            total_spent,
            rate_of_return,
        )

        return RewardSummary(
            statistics=MappingProxyType(statistics),
            total_prize=total_prize,
            total_spent=total_spent,
            rate_of_return=rate_of_return,
            rows=tuple(self.format_output(statistics, rate_of_return)),
        )

    def calculate_reward(self, lottos: Sequence[Ticket]) -> list[str]:
        return list(self.summarize(lottos).rows)

    def get_statistics_row(self, tier: MatchTier, statistics: Statistics) -> str:
        label = (
            messages.MATCH_FIVE_WITH_BONUS
            if tier is MatchTier.FIVE_BONUS
            else messages.match_result(tier.value)
        )
        formatted_prize = self._formatter.format(PRIZE_MONEY[tier])
        return messages.statistics_row(label, formatted_prize, statistics.get(tier, 0))

    def format_output(self, statistics: Statistics, rate_of_return: Decimal) -> list[str]:
        output = [self.get_statistics_row(tier, statistics) for tier in ORDER_KEYS]
        output.append(messages.rate_result(f"{rate_of_return:.1f}"))
        return output
