"""Schemas for the ticket issuing and reward calculation API."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema

from lotto_reward.services.ticket_service import MAX_TICKETS


def _lotto_numbers_field(**kwargs) -> fields.List:  # type: ignore[no-untyped-def]
    return fields.List(
        fields.Integer(validate=validate.Range(min=1, max=45)),
        validate=validate.Length(equal=6),
        **kwargs,
    )


class TicketPurchaseSchema(Schema):
    purchase_amount = fields.Integer(required=True, validate=validate.Range(min=1))


class RewardRequestSchema(Schema):
    winning_numbers = _lotto_numbers_field(required=True)

    bonus_number = fields.Integer(required=True, validate=validate.Range(min=1, max=45))

    tickets = fields.List(
        _lotto_numbers_field(),
        required=True,
        validate=validate.Length(max=MAX_TICKETS),
    )

    @validates_schema
    def _validate_numbers(self, data, **kwargs):  # type: ignore[no-untyped-def]
        winning = data.get("winning_numbers") or []
        bonus = data.get("bonus_number")
        tickets = data.get("tickets") or []

        if len(winning) != len(set(winning)):
            raise ValidationError({"winning_numbers": ["Numbers must be unique"]})
        if bonus is not None and bonus in winning:
            raise ValidationError({"bonus_number": ["Bonus number must not be one of the winning numbers"]})

        bad_idx = [i + 1 for i, t in enumerate(tickets) if len(set(t)) != len(t)]
        if bad_idx:
            raise ValidationError({"tickets": [f"Each ticket must be 6 unique numbers (bad items: {', '.join(str(i) for i in bad_idx)})"]})


class TicketsResponseSchema(Schema):
    count = fields.Integer(required=True)
    tickets = fields.List(fields.List(fields.Integer()), required=True)


class RewardResponseSchema(Schema):
    statistics = fields.Dict(keys=fields.String(), values=fields.Integer(), required=True)
    total_prize = fields.Integer(required=True)
    total_spent = fields.Integer(required=True)
    rate_of_return = fields.String(required=True)
    rows = fields.List(fields.String(), required=True)
