import pytest

from lotto_reward import create_app
from lotto_reward.domains.lotto import Lotto, WinningLotto


@pytest.fixture
def app():
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def winning_lotto() -> WinningLotto:
    return WinningLotto([1, 2, 3, 4, 5, 6], 7)


@pytest.fixture
def example_tickets() -> list[Lotto]:
    return [
        Lotto([1, 2, 3, 4, 5, 6]),
        Lotto([1, 2, 3, 4, 5, 7]),
        Lotto([1, 2, 3, 4, 5, 8]),
        Lotto([1, 2, 3, 9, 10, 11]),
        Lotto([9, 10, 11, 12, 13, 14]),
    ]
