"""Chain of Responsibility demo - purchase approvals."""

from lifetime.core import Demo

from .approvers import Director, President, Purchase, VicePresident


class ChainOfResponsibilityDemo(Demo):
    """Managers and executives respond to a purchase or hand it to a superior."""

    @property
    def name(self) -> str:
        return "chain_of_responsibility"

    @property
    def display_name(self) -> str:
        return "Chain of Responsibility"

    @property
    def description(self) -> str:
        return (
            "Avoid coupling the sender of a request to its receiver by giving more "
            "than one object a chance to handle the request"
        )

    @property
    def category(self) -> str:
        return "behavioral"

    @property
    def participants(self):
        return {
            "Handler": ["Approver"],
            "ConcreteHandler": ["Director", "VicePresident", "President"],
        }

    def get_config_schema(self):
        return {
            "purchases": {
                "type": "list",
                "default": [
                    {"number": 2034, "amount": 350.00, "purpose": "Assets"},
                    {"number": 2035, "amount": 32590.10, "purpose": "Project X"},
                    {"number": 2036, "amount": 122100.00, "purpose": "Project Y"},
                ],
                "description": "Purchase requests sent to the chain",
            },
        }

    def compute(self):
        larry = Director()
        sammy = VicePresident()
        tammy = President()

        larry.set_successor(sammy)
        sammy.set_successor(tammy)

        for item in self.setting("purchases"):
            larry.process_request(Purchase(**item))
