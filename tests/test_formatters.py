"""Tests for console parsing and table rendering."""

from datetime import datetime
from decimal import Decimal

import pytest

from console_bank.utils.exceptions import ValidationException
from console_bank.utils.formatters import (
    format_currency, format_date, parse_account_number, parse_decimal,
    render_accounts, render_statement
)
from console_bank.utils.helpers import NumberUtils


class TestParsing:

    @pytest.mark.parametrize("text,expected", [
        ("100", Decimal("100")),
        (" 0.01 ", Decimal("0.01")),
        ("-25.50", Decimal("-25.50")),
    ])
    def test_parse_decimal(self, text, expected):
        assert parse_decimal(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "1.2.3", "NaN", "Infinity", None])
    def test_parse_decimal_rejects_garbage(self, text):
        with pytest.raises(ValidationException) as exc:
            parse_decimal(text, "Deposit Amount")
        assert exc.value.error_code == "PARSE_ERROR"

    def test_parse_account_number(self):
        assert parse_account_number(" 1000\n") == 1000

    @pytest.mark.parametrize("text", ["10.5", "ten", ""])
    def test_parse_account_number_rejects_garbage(self, text):
        with pytest.raises(ValidationException):
            parse_account_number(text)


class TestRendering:

    def test_format_currency(self):
        assert format_currency(Decimal("1234.5")) == "$1,234.50"
        assert format_currency(Decimal("-3"), "EUR ") == "-EUR 3.00"

    def test_format_date(self):
        assert format_date(datetime(2024, 5, 1, 9, 30, 0)) == "2024-05-01 09:30:00"
        assert format_date(None) == "N/A"

    def test_render_statement(self):
        statement = {
            'balance': Decimal("150.00"),
            'transactions': [
                {'date': datetime(2024, 5, 1, 9, 0, 0), 'type': 'Initial Deposit', 'amount': Decimal("100.00")},
                {'date': datetime(2024, 5, 2, 9, 0, 0), 'type': 'Deposit', 'amount': Decimal("50.00")},
            ]
        }
        text = render_statement(statement)

        assert "Initial Deposit" in text
        assert "2024-05-02 09:00:00" in text
        assert "$50.00" in text
        assert text.splitlines()[-1] == "Closing balance: $150.00"

    def test_render_accounts(self):
        text = render_accounts([
            {'account_number': 1000, 'holder_name': 'Alice', 'account_type': 'Savings',
             'balance': Decimal("100")},
        ])
        assert "Account Number" in text
        assert "1000" in text
        assert "$100.00" in text

    def test_balances_beyond_default_precision(self):
        balance = Decimal(10) ** 26
        assert NumberUtils.round_currency(balance) == Decimal("100000000000000000000000000.00")
        assert format_currency(balance) == "$100,000,000,000,000,000,000,000,000.00"

        text = render_accounts([
            {'account_number': 1000, 'holder_name': 'Alice', 'account_type': 'Savings',
             'balance': balance},
        ])
        assert "$100,000,000,000,000,000,000,000,000.00" in text

    def test_render_empty(self):
        assert render_accounts([]) == "No accounts found for this user."
        assert render_statement({'transactions': []}) == "No transactions recorded."
