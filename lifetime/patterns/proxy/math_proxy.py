"""A math object reached through a proxy."""

from abc import ABC, abstractmethod


class MathSubject(ABC):
    """Common interface of the real subject and its proxy."""

    @abstractmethod
    def add(self, x: float, y: float) -> float:
        pass

    @abstractmethod
    def sub(self, x: float, y: float) -> float:
        pass

    @abstractmethod
    def mul(self, x: float, y: float) -> float:
        pass

    @abstractmethod
    def div(self, x: float, y: float) -> float:
        pass


class Math(MathSubject):
    def add(self, x, y):
        return x + y

    def sub(self, x, y):
        return x - y

    def mul(self, x, y):
        return x * y

    def div(self, x, y):
        return x / y


class MathProxy(MathSubject):
    """Creates the real subject lazily and forwards every call."""

    def __init__(self):
        self._math = None

    @property
    def subject(self) -> Math:
        if self._math is None:
            self._math = Math()
        return self._math

    def add(self, x, y):
        return self.subject.add(x, y)

    def sub(self, x, y):
        return self.subject.sub(x, y)

    def mul(self, x, y):
        return self.subject.mul(x, y)

    def div(self, x, y):
        return self.subject.div(x, y)
