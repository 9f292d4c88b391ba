"""Facade demo - a mortgage application hiding the credit checks."""

from lifetime.core import Demo

from .mortgage import Customer, Mortgage


class FacadeDemo(Demo):

    @property
    def name(self) -> str:
        return "facade"

    @property
    def display_name(self) -> str:
        return "Façade"

    @property
    def description(self) -> str:
        return (
            "Provide a unified interface to a set of interfaces in a subsystem, "
            "making the subsystem easier to use"
        )

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Facade": ["Mortgage"],
            "Subsystem": ["Bank", "Credit", "Loan"],
        }

    def get_config_schema(self):
        return {
            "customer": {
                "type": "str",
                "default": "Ann McKinsey",
                "description": "Name of the applicant",
            },
            "amount": {
                "type": "int",
                "default": 125000,
                "description": "Requested loan amount",
            },
        }

    def compute(self):
        mortgage = Mortgage()

        customer = Customer(self.setting("customer"))
        eligible = mortgage.is_eligible(customer, self.setting("amount"))

        print(f"\n{customer.name} has been {'Approved' if eligible else 'Rejected'}")
