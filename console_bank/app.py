"""
Console Banking System
Menu-driven console front end over the in-memory banking service
"""

import logging
import os
import sys
from typing import Callable, Optional

from console_bank.config import BankConfig
from console_bank.core.models.entities import AccountType
from console_bank.core.services.banking_service import BankingService
from console_bank.utils.exceptions import ValidationException
from console_bank.utils.formatters import (
    parse_account_number, parse_decimal, render_accounts, render_statement
)

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 59

MENU = """Welcome to Console Banking
1. Register
2. Login
3. Open Account
4. Deposit
5. Withdraw
6. Generate Statement
7. Check Balance
8. Calculate Interest
9. View All Accounts
10. Exit"""

ACCOUNT_TYPE_MENU = "Select Account Type:\n" + "\n".join(
    f"{i}. {account_type.value}" for i, account_type in enumerate(AccountType, 1)
)


def configure_logging(config: BankConfig):
    """Apply the configured log level and destination"""
    log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    level = getattr(logging, config.log_level, logging.WARNING)

    if config.log_file:
        # Ensure logs directory exists
        log_dir = os.path.dirname(config.log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        logging.basicConfig(level=level, format=log_format, filename=config.log_file)
    else:
        logging.basicConfig(level=level, format=log_format)


class ConsoleBankingApp:
    """Blocking request/response menu loop"""

    def __init__(self, banking: BankingService,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Optional[Callable[[str], None]] = None):
        self.banking = banking
        self._input = input_func or input
        self._output = output_func or print
        self.symbol = banking.config.currency_symbol
        self.actions = {
            "1": self.register,
            "2": self.login,
            "3": self.open_account,
            "4": self.deposit,
            "5": self.withdraw,
            "6": self.generate_statement,
            "7": self.check_balance,
            "8": self.calculate_interest,
            "9": self.view_all_accounts,
        }

    def run(self) -> int:
        while True:
            self._output(MENU)
            try:
                option = self._input("Select an option: ").strip()
            except EOFError:
                self._output("Exiting application.")
                return 0

            if option == "10":
                self._output("Exiting application.")
                return 0

            action = self.actions.get(option)
            if action is None:
                self._output("Invalid option.")
                continue

            try:
                action()
            except ValidationException as e:
                # unparseable numeric input or an invalid menu selection
                self._output(e.message)
            except EOFError:
                self._output("Exiting application.")
                return 0
            self._output(SEPARATOR)

    def register(self):
        username = self._input("Enter Username: ")
        password = self._input("Enter Password: ")
        result = self.banking.register(username, password)

        while not result['success'] and result.get('error_code') == 'WEAK_PASSWORD':
            for rule in result['unmet_rules']:
                self._output(rule.message)
            password = self._input("Enter a strong password: ")
            result = self.banking.register(username, password)

        self._output(result['message'])

    def login(self):
        username = self._input("Enter Username: ")
        password = self._input("Enter Password: ")
        self._report(self.banking.login(username, password))

    def open_account(self):
        name = self._input("Enter Account Holder Name: ")
        if self.banking.current_user is None:
            self._output("Please log in to open an account.")
            return

        self._output(ACCOUNT_TYPE_MENU)
        account_type = AccountType.from_choice(self._input("Enter choice (1-7): "))
        custom_type = None
        if account_type == AccountType.OTHER:
            custom_type = self._input("Enter custom account type: ")
            if not (custom_type or "").strip():
                self._output("Custom account type cannot be empty.")
                return

        initial_deposit = parse_decimal(self._input("Enter Initial Deposit: "), "Initial Deposit")
        self._report(self.banking.open_account(name, account_type, initial_deposit, custom_type))

    def deposit(self):
        account_number = parse_account_number(self._input("Enter Account Number: "))
        amount = parse_decimal(self._input("Enter Deposit Amount: "), "Deposit Amount")
        self._report(self.banking.process_transaction(account_number, "deposit", amount))

    def withdraw(self):
        account_number = parse_account_number(self._input("Enter Account Number: "))
        amount = parse_decimal(self._input("Enter Withdrawal Amount: "), "Withdrawal Amount")
        self._report(self.banking.process_transaction(account_number, "withdraw", amount))

    def generate_statement(self):
        account_number = parse_account_number(self._input("Enter Account Number: "))
        result = self.banking.generate_statement(account_number)
        self._report(result)
        if result['success']:
            self._output(render_statement(result, self.symbol))

    def check_balance(self):
        account_number = parse_account_number(self._input("Enter Account Number: "))
        self._report(self.banking.check_balance(account_number))

    def calculate_interest(self):
        rate = parse_decimal(self._input("Enter Interest Rate (as decimal): "), "Interest Rate")
        result = self.banking.calculate_interest(rate)
        if result['success']:
            for credit in result['credited']:
                self._output(f"Interest of {credit['interest']} added to Savings account "
                             f"{credit['account_number']}.")
        self._report(result)

    def view_all_accounts(self):
        result = self.banking.view_all_accounts()
        if result['success'] and result['accounts']:
            self._output(result['message'])
            self._output(render_accounts(result['accounts'], self.symbol))
        else:
            self._report(result)

    def _report(self, result: dict):
        self._output("")
        self._output(result['message'])


def main() -> int:
    config = BankConfig.from_env()
    configure_logging(config)
    logger.info("Starting console banking session")
    app = ConsoleBankingApp(BankingService(config))
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
