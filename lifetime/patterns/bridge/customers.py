"""Customer collections decoupled from the register storing them."""

from abc import ABC, abstractmethod
from typing import List, Optional

DEFAULT_CUSTOMERS = [
    "Jim Jones",
    "Samual Jackson",
    "Allen Good",
    "Ann Stills",
    "Lisa Giolani",
]


class DataRegister(ABC):
    """Implementor interface: primitive record operations."""

    @abstractmethod
    def next_record(self):
        pass

    @abstractmethod
    def prior_record(self):
        pass

    @abstractmethod
    def insert_record(self, name: str):
        pass

    @abstractmethod
    def delete_record(self, name: str):
        pass

    @abstractmethod
    def show_record(self):
        pass

    @abstractmethod
    def show_records(self):
        pass


class CustomerRegister(DataRegister):
    """In-memory customer records with a cursor."""

    def __init__(self, customers: Optional[List[str]] = None):
        self.customers = list(DEFAULT_CUSTOMERS if customers is None else customers)
        self.current = 0

    def next_record(self):
        # Cursor stays on the last record
        if self.current < len(self.customers) - 1:
            self.current += 1

    def prior_record(self):
        if self.current > 0:
            self.current -= 1

    def insert_record(self, name: str):
        self.customers.append(name)

    def delete_record(self, name: str):
        self.customers.remove(name)
        self.current = min(self.current, max(len(self.customers) - 1, 0))

    def show_record(self):
        if self.customers:
            print(self.customers[self.current])

    def show_records(self):
        for customer in self.customers:
            print(f" {customer}")


class CustomerCollection:
    """Abstraction holding a reference to a DataRegister."""

    def __init__(self, group: str, data: DataRegister = None):
        self.group = group
        self.data = data

    def next(self):
        self.data.next_record()

    def prev(self):
        self.data.prior_record()

    def insert(self, customer: str):
        self.data.insert_record(customer)

    def delete(self, customer: str):
        self.data.delete_record(customer)

    def show(self):
        self.data.show_record()

    def show_all(self):
        print(f"Customer Group: {self.group}")
        self.data.show_records()


class Customers(CustomerCollection):
    """Refined abstraction adding separator lines."""

    def show_all(self):
        print()
        print("------------------------")
        super().show_all()
        print("------------------------")
