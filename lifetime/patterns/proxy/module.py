"""Proxy demo - doing math through a MathProxy."""

from lifetime.core import Demo

from .math_proxy import MathProxy


class ProxyDemo(Demo):

    @property
    def name(self) -> str:
        return "proxy"

    @property
    def display_name(self) -> str:
        return "Proxy"

    @property
    def description(self) -> str:
        return "Provide a surrogate or placeholder for another object to control access to it"

    @property
    def category(self) -> str:
        return "structural"

    @property
    def participants(self):
        return {
            "Proxy": ["MathProxy"],
            "Subject": ["MathSubject"],
            "RealSubject": ["Math"],
        }

    def compute(self):
        proxy = MathProxy()

        print(f"\t4 + 2 = {proxy.add(4, 2):g}")
        print(f"\t4 - 2 = {proxy.sub(4, 2):g}")
        print(f"\t4 * 2 = {proxy.mul(4, 2):g}")
        print(f"\t4 / 2 = {proxy.div(4, 2):g}")
