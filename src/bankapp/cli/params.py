"""Custom click parameter types."""

from decimal import Decimal

import click

from bankapp.utils.amount_parser import parse_amount


class AmountParamType(click.ParamType):
    """Decimal amount typed at a prompt or on the command line."""

    name = "amount"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            return parse_amount(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid amount", param, ctx)


AMOUNT = AmountParamType()
