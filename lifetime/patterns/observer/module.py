"""Observer demo - investors watching IBM's share price."""

from lifetime.core import Demo

from .stock import IBM, Investor


class ObserverDemo(Demo):

    @property
    def name(self) -> str:
        return "observer"

    @property
    def display_name(self) -> str:
        return "Observer"

    @property
    def description(self) -> str:
        return (
            "Define a one-to-many dependency between objects so that when one object "
            "changes state, all its dependents are notified and updated automatically"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Subject": ["Stock"],
            "ConcreteSubject": ["IBM"],
            "Observer": ["InvestorBase"],
            "ConcreteObserver": ["Investor"],
        }

    def get_config_schema(self):
        return {
            "prices": {
                "type": "list",
                "default": [120.10, 121.00, 120.50, 120.75],
                "description": "Successive IBM share prices",
            },
        }

    def compute(self):
        ibm = IBM(120.00)
        ibm.attach(Investor("Sorros"))
        ibm.attach(Investor("Berkshire"))

        # Fluctuating prices will notify investors
        for price in self.setting("prices"):
            ibm.price = price
