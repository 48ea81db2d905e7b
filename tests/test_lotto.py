import pytest

from lotto_reward.domains.lotto import Lotto, WinningLotto
from lotto_reward.errors import ValidationError


def test_lotto_keeps_input_order():
    lotto = Lotto([6, 5, 4, 3, 2, 1])

    assert lotto.get_numbers() == (6, 5, 4, 3, 2, 1)
    assert lotto.contains(4)
    assert not lotto.contains(7)


@pytest.mark.parametrize(
    "numbers",
    [
        [1, 2, 3, 4, 5],
        [1, 2, 3, 4, 5, 6, 7],
        [0, 2, 3, 4, 5, 6],
        [1, 2, 3, 4, 5, 46],
        [1, 1, 2, 3, 4, 5],
    ],
)
def test_lotto_rejects_invalid_numbers(numbers):
    with pytest.raises(ValidationError) as exc_info:
        Lotto(numbers)

    assert exc_info.value.status_code == 400
    assert exc_info.value.code == "validation_error"


def test_winning_lotto_accessors():
    draw = WinningLotto([1, 2, 3, 4, 5, 6], 7)

    assert draw.get_winning_numbers() == (1, 2, 3, 4, 5, 6)
    assert draw.get_bonus_number() == 7


def test_winning_lotto_accepts_lotto_instance():
    draw = WinningLotto(Lotto([10, 20, 30, 40, 41, 42]), 1)

    assert draw.get_winning_numbers() == (10, 20, 30, 40, 41, 42)


def test_winning_lotto_rejects_bonus_among_winning_numbers():
    with pytest.raises(ValidationError, match="Bonus number"):
        WinningLotto([1, 2, 3, 4, 5, 6], 6)


@pytest.mark.parametrize("bonus", [0, 46])
def test_winning_lotto_rejects_out_of_range_bonus(bonus):
    with pytest.raises(ValidationError):
        WinningLotto([1, 2, 3, 4, 5, 6], bonus)


def test_value_objects_are_immutable():
    lotto = Lotto([1, 2, 3, 4, 5, 6])

    with pytest.raises(AttributeError):
        lotto.numbers = (7, 8, 9, 10, 11, 12)  # type: ignore[misc]
