"""
Formatting helpers shared by the console menu.
Input parsing, currency and date formatting, pandas table rendering.
"""

from decimal import Decimal, InvalidOperation
from datetime import datetime, date
from typing import Any, Dict, List, Union

import pandas as pd

from console_bank.utils.exceptions import ValidationException
from console_bank.utils.helpers import StringUtils


def parse_decimal(value: str, field_name: str = "Amount") -> Decimal:
    """Parse console text into an exact Decimal, rejecting non-numeric input."""
    text = (value or "").strip()
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationException(f"Invalid number for {field_name}: {value!r}", "PARSE_ERROR")

    if not amount.is_finite():
        raise ValidationException(f"Invalid number for {field_name}: {value!r}", "PARSE_ERROR")
    return amount


def parse_account_number(value: str) -> int:
    """Parse console text into an integer account number."""
    text = (value or "").strip()
    try:
        return int(text)
    except ValueError:
        raise ValidationException(f"Invalid account number: {value!r}", "PARSE_ERROR")


def format_currency(amount: Union[int, float, Decimal, str], symbol: str = "$") -> str:
    if isinstance(amount, str):
        amount = Decimal(amount)
    elif isinstance(amount, (int, float)):
        amount = Decimal(str(amount))
    return StringUtils.format_currency(amount, symbol)


def format_date(dt: Union[datetime, date, None]) -> str:
    """Format date for display."""
    if dt is None:
        return "N/A"
    if isinstance(dt, datetime):
        return dt.strftime("%Y-%m-%d %H:%M:%S")
    return dt.strftime("%Y-%m-%d")


def render_statement(statement: Dict[str, Any], symbol: str = "$") -> str:
    """Render a statement result as a text table."""
    transactions = statement.get('transactions') or []
    if not transactions:
        return "No transactions recorded."

    df = pd.DataFrame(transactions)
    df['date'] = df['date'].map(format_date)
    df['amount'] = df['amount'].map(lambda a: format_currency(a, symbol))
    df.columns = ['Date', 'Type', 'Amount']
    table = df.to_string(index=False)
    return f"{table}\nClosing balance: {format_currency(statement['balance'], symbol)}"


def render_accounts(accounts: List[Dict[str, Any]], symbol: str = "$") -> str:
    """Render the account summaries of one user as a text table."""
    if not accounts:
        return "No accounts found for this user."

    df = pd.DataFrame(accounts, columns=['account_number', 'holder_name', 'account_type', 'balance'])
    df['balance'] = df['balance'].map(lambda b: format_currency(b, symbol))
    df.columns = ['Account Number', 'Holder Name', 'Account Type', 'Balance']
    return df.to_string(index=False)
