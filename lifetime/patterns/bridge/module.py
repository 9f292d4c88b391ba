"""Bridge demo - messages over channels, customers over a register."""

from lifetime.core import Demo

from .customers import CustomerRegister, Customers
from .messaging import SmsSender, SystemMessage, UserMessage


class BridgeDemo(Demo):

    @property
    def name(self) -> str:
        return "bridge"

    @property
    def display_name(self) -> str:
        return "Bridge"

    @property
    def description(self) -> str:
        return "Decouple an abstraction from its implementation so that the two can vary independently"

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Abstraction": ["SystemMessage", "CustomerCollection"],
            "RefinedAbstraction": ["UserMessage", "Customers"],
            "Implementor": ["MessageSender", "DataRegister"],
            "ConcreteImplementor": ["EmailSender", "SmsSender", "WebServiceSender", "CustomerRegister"],
        }

    def compute(self):
        messages = [
            SystemMessage(
                title="This is system generated message, do not reply it",
                body="System Defined Message",
                importance=1,
            ),
            UserMessage(
                SmsSender(),
                title="Thanks for joining us. please let me know if any help needed",
                body="User Defined Message",
                importance=3,
                user_comments="Welcome to forum",
            ),
        ]
        for message in messages:
            message.send()

        customers = Customers("Chicago", CustomerRegister())

        customers.show()
        customers.next()
        customers.show()
        customers.next()
        customers.show()
        customers.insert("Henry Velasquez")

        customers.show_all()
