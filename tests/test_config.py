import pytest

from lotto_reward.config import _positive_int_env


@pytest.mark.parametrize("raw", ["0", "-1000", "abc", ""])
def test_ticket_price_falls_back_to_default(monkeypatch, raw):
    monkeypatch.setenv("TICKET_PRICE", raw)

    assert _positive_int_env("TICKET_PRICE", 1000) == 1000


def test_ticket_price_reads_positive_value(monkeypatch):
    monkeypatch.setenv("TICKET_PRICE", "500")

    assert _positive_int_env("TICKET_PRICE", 1000) == 500


def test_ticket_price_unset(monkeypatch):
    monkeypatch.delenv("TICKET_PRICE", raising=False)

    assert _positive_int_env("TICKET_PRICE", 1000) == 1000
