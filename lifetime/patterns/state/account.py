"""A bank account whose behaviour depends on its balance state."""

import logging
from abc import ABC, abstractmethod

from lifetime.formatting import format_currency

logger = logging.getLogger(__name__)


class State(ABC):
    """Behaviour of an account within one balance band."""

    interest = 0.0
    lower_limit = 0.0
    upper_limit = 0.0

    def __init__(self, account: "Account", balance: float):
        self.account = account
        self.balance = balance

    @property
    def name(self) -> str:
        return type(self).__name__

    def deposit(self, amount: float):
        self.balance += amount
        self.state_change_check()

    def withdraw(self, amount: float):
        self.balance -= amount
        self.state_change_check()

    def pay_interest(self):
        self.balance += self.interest * self.balance
        self.state_change_check()

    def transition(self, state_class):
        logger.debug(f"{self.account.owner}: {self.name} -> {state_class.__name__}")
        self.account.state = state_class(self.account, self.balance)

    @abstractmethod
    def state_change_check(self):
        pass


class RedState(State):
    """Overdrawn: no interest and no withdrawals."""

    lower_limit = -100.0
    upper_limit = 0.0

    def withdraw(self, amount: float):
        print("No funds available for withdrawal!")

    def pay_interest(self):
        # No interest is paid
        pass

    def state_change_check(self):
        if self.balance > self.upper_limit:
            self.transition(SilverState)


class SilverState(State):
    """Non-interest bearing."""

    interest = 0.0
    lower_limit = 0.0
    upper_limit = 1000.0

    def state_change_check(self):
        if self.balance < self.lower_limit:
            self.transition(RedState)
        elif self.balance > self.upper_limit:
            self.transition(GoldState)


class GoldState(State):
    """Interest bearing."""

    interest = 0.05
    lower_limit = 1000.0
    upper_limit = 10000000.0

    def state_change_check(self):
        if self.balance < 0.0:
            self.transition(RedState)
        elif self.balance < self.lower_limit:
            self.transition(SilverState)


class Account:
    """Context. New accounts start in the silver state."""

    def __init__(self, owner: str):
        self.owner = owner
        self.state: State = SilverState(self, 0.0)

    @property
    def balance(self) -> float:
        return self.state.balance

    def deposit(self, amount: float):
        self.state.deposit(amount)
        print(f"Deposited {format_currency(amount)} --- ")
        self._report()

    def withdraw(self, amount: float):
        self.state.withdraw(amount)
        print(f"Withdrew {format_currency(amount)} --- ")
        self._report()

    def pay_interest(self):
        self.state.pay_interest()
        print("Interest Paid --- ")
        self._report()

    def _report(self):
        print(f" Balance = {format_currency(self.balance)}")
        print(f" Status  = {self.state.name}\n")
