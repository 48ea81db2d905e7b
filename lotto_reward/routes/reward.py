"""Ticket and reward routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lotto_reward.domains.lotto import Lotto, WinningLotto
from lotto_reward.formatting import CurrencyFormatter
from lotto_reward.schemas.reward import (
    RewardRequestSchema,
    RewardResponseSchema,
    TicketPurchaseSchema,
    TicketsResponseSchema,
)
from lotto_reward.services.reward_service import RewardCalculator
from lotto_reward.services.ticket_service import TicketService
from lotto_reward.utils.responses import ok

reward_bp = Blueprint("reward", __name__)

_purchase_schema = TicketPurchaseSchema()
_tickets_schema = TicketsResponseSchema()
_reward_request_schema = RewardRequestSchema()
_reward_response_schema = RewardResponseSchema()


def _ticket_price() -> int:
    return int(current_app.config.get("TICKET_PRICE", 1000))


def _formatter() -> CurrencyFormatter:
    return CurrencyFormatter(
        separator=str(current_app.config.get("CURRENCY_SEPARATOR", ",")),
        suffix=str(current_app.config.get("CURRENCY_SUFFIX", "원")),
    )


@reward_bp.post("/tickets")
def purchase_tickets():
    payload = request.get_json(silent=True) or {}
    data = _purchase_schema.load(payload)

    service = TicketService(ticket_price=_ticket_price())
    tickets = service.purchase(int(data["purchase_amount"]))

    return ok(
        _tickets_schema.dump(
            {"count": len(tickets), "tickets": [list(t.get_numbers()) for t in tickets]}
        )
    )


@reward_bp.post("/reward")
def calculate_reward():
    payload = request.get_json(silent=True) or {}
    data = _reward_request_schema.load(payload)

    winning_lotto = WinningLotto(data["winning_numbers"], int(data["bonus_number"]))
    tickets = [Lotto(numbers) for numbers in data["tickets"]]

    calculator = RewardCalculator(
        winning_lotto,
        ticket_price=_ticket_price(),
        formatter=_formatter(),
    )
    summary = calculator.summarize(tickets)

    return ok(
        _reward_response_schema.dump(
            {
                "statistics": {tier.value: count for tier, count in summary.statistics.items()},
                "total_prize": summary.total_prize,
                "total_spent": summary.total_spent,
                "rate_of_return": f"{summary.rate_of_return:.1f}",
                "rows": summary.rows,
            }
        )
    )
