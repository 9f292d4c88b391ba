"""Mortgage application facade over the credit-check subsystems."""

import logging

from lifetime.formatting import format_currency

logger = logging.getLogger(__name__)


class Customer:
    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class Bank:
    def has_sufficient_savings(self, customer: Customer, amount: int) -> bool:
        print(f"Check bank savings for {customer.name}")
        return True


class Credit:
    def has_good_credit(self, customer: Customer) -> bool:
        print(f"Check credit for {customer.name}")
        return True


class Loan:
    def has_no_bad_loans(self, customer: Customer) -> bool:
        print(f"Check loans for {customer.name}")
        return True


class Mortgage:
    """Facade: one call runs every subsystem check."""

    def __init__(self, bank: Bank = None, loan: Loan = None, credit: Credit = None):
        self._bank = bank or Bank()
        self._loan = loan or Loan()
        self._credit = credit or Credit()

    def is_eligible(self, customer: Customer, amount: int) -> bool:
        print(f"{customer.name} applies for {format_currency(amount)} loan\n")

        # Checks stop at the first failure
        if not self._bank.has_sufficient_savings(customer, amount):
            eligible = False
        elif not self._loan.has_no_bad_loans(customer):
            eligible = False
        elif not self._credit.has_good_credit(customer):
            eligible = False
        else:
            eligible = True

        logger.debug(f"Mortgage eligibility for {customer.name}: {eligible}")
        return eligible
