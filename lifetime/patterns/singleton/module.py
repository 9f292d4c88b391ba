"""Singleton demo - a load balancer shared by every caller."""

from lifetime.core import Demo

from .load_balancer import LoadBalancer


class SingletonDemo(Demo):

    @property
    def name(self) -> str:
        return "singleton"

    @property
    def display_name(self) -> str:
        return "Singleton"

    @property
    def description(self) -> str:
        return "Ensure a class has only one instance and provide a global point of access to it"

    @property
    def category(self) -> str:
        return "creational"

    @property
    def participants(self):
        return {"Singleton": ["LoadBalancer"]}

    def get_config_schema(self):
        return {
            "requests": {
                "type": "int",
                "default": 15,
                "description": "Number of server requests to dispatch",
            },
        }

    def compute(self):
        b1 = LoadBalancer.get_load_balancer()
        b2 = LoadBalancer.get_load_balancer()
        b3 = LoadBalancer.get_load_balancer()
        b4 = LoadBalancer.get_load_balancer()

        if b1 is b2 is b3 is b4:
            print("Same instance\n")

        balancer = LoadBalancer.get_load_balancer()
        for _ in range(self.setting("requests")):
            print(f"Dispatch request to: {balancer.server}")
