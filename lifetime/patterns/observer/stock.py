"""Stocks notifying the investors watching them."""

from abc import ABC, abstractmethod
from typing import List

from lifetime.formatting import format_currency


class InvestorBase(ABC):
    """Observer interface."""

    @abstractmethod
    def update(self, stock: "Stock"):
        pass


class Stock:
    """Subject. Setting the price notifies every attached investor."""

    def __init__(self, symbol: str, price: float):
        self.symbol = symbol
        self._price = price
        self._investors: List[InvestorBase] = []

    def attach(self, investor: InvestorBase):
        self._investors.append(investor)

    def detach(self, investor: InvestorBase):
        self._investors.remove(investor)

    def notify(self):
        for investor in self._investors:
            investor.update(self)
        print()

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float):
        if value != self._price:
            self._price = value
            self.notify()


class IBM(Stock):
    def __init__(self, price: float):
        super().__init__("IBM", price)


class Investor(InvestorBase):
    def __init__(self, name: str):
        self.name = name
        self.stock = None

    def update(self, stock: Stock):
        self.stock = stock
        print(f"Notified {self.name} of {stock.symbol}'s change to {format_currency(stock.price)}")
