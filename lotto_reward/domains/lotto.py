"""Lotto ticket and winning draw value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from lotto_reward.errors import ValidationError

LOTTO_NUMBER_COUNT = 6
LOTTO_MIN_NUMBER = 1
LOTTO_MAX_NUMBER = 45

NumberTuple6 = tuple[int, int, int, int, int, int]


def _validate_number(n: int, field: str) -> None:
    if not (LOTTO_MIN_NUMBER <= n <= LOTTO_MAX_NUMBER):
        raise ValidationError(
            f"{field} must be between {LOTTO_MIN_NUMBER} and {LOTTO_MAX_NUMBER}",
            details={field: n},
        )


@dataclass(frozen=True)
class Lotto:
    """One purchased ticket: 6 distinct numbers in 1..45, kept in input order."""

    numbers: Iterable[int]

    def __post_init__(self) -> None:
        nums = tuple(int(n) for n in self.numbers)
        if len(nums) != LOTTO_NUMBER_COUNT:
            raise ValidationError(
                f"A lotto ticket must have exactly {LOTTO_NUMBER_COUNT} numbers",
                details={"numbers": list(nums)},
            )
        for n in nums:
            _validate_number(n, "numbers")
        if len(set(nums)) != len(nums):
            raise ValidationError("Lotto numbers must be unique", details={"numbers": list(nums)})

        object.__setattr__(self, "numbers", nums)

    def get_numbers(self) -> NumberTuple6:
        return self.numbers  # type: ignore[return-value]

    def contains(self, number: int) -> bool:
        return number in self.numbers


@dataclass(frozen=True)
class WinningLotto:
    """Winning numbers of one round plus its bonus number."""

    winning_numbers: Lotto | Iterable[int]
    bonus_number: int

    def __post_init__(self) -> None:
        lotto = self.winning_numbers
        if not isinstance(lotto, Lotto):
            lotto = Lotto(lotto)
        bonus = int(self.bonus_number)
        _validate_number(bonus, "bonus_number")
        if lotto.contains(bonus):
            raise ValidationError(
                "Bonus number must not be one of the winning numbers",
                details={"bonus_number": bonus},
            )

        object.__setattr__(self, "winning_numbers", lotto)
        object.__setattr__(self, "bonus_number", bonus)

    def get_winning_numbers(self) -> NumberTuple6:
        return self.winning_numbers.get_numbers()  # type: ignore[union-attr]

    def get_bonus_number(self) -> int:
        return self.bonus_number
