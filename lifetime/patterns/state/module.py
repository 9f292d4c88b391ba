"""State demo - an account moving between red, silver and gold."""

from lifetime.core import Demo

from .account import Account


class StateDemo(Demo):

    @property
    def name(self) -> str:
        return "state"

    @property
    def display_name(self) -> str:
        return "State"

    @property
    def description(self) -> str:
        return "Allow an object to alter its behavior when its internal state changes"

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Context": ["Account"],
            "State": ["State"],
            "ConcreteState": ["RedState", "SilverState", "GoldState"],
        }

    def compute(self):
        account = Account("Jim Johnson")

        account.deposit(500.0)
        account.deposit(300.0)
        account.deposit(550.0)
        account.pay_interest()
        account.withdraw(2000.00)
        account.withdraw(1100.00)

        return account
