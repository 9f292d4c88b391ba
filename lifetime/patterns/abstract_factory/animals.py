"""Continent factories producing families of animals."""

from abc import ABC, abstractmethod


class Herbivore(ABC):
    """Abstract product A."""


class Carnivore(ABC):
    """Abstract product B."""

    @abstractmethod
    def eat(self, herbivore: Herbivore) -> str:
        pass


class Wildebeest(Herbivore):
    pass


class Bison(Herbivore):
    pass


class Lion(Carnivore):
    def eat(self, herbivore: Herbivore) -> str:
        return f"{type(self).__name__} eats {type(herbivore).__name__}"


class Wolf(Carnivore):
    def eat(self, herbivore: Herbivore) -> str:
        return f"{type(self).__name__} eats {type(herbivore).__name__}"


class ContinentFactory(ABC):
    """Creates the herbivore and carnivore of one continent."""

    @abstractmethod
    def create_herbivore(self) -> Herbivore:
        pass

    @abstractmethod
    def create_carnivore(self) -> Carnivore:
        pass


class AfricaFactory(ContinentFactory):
    def create_herbivore(self) -> Herbivore:
        return Wildebeest()

    def create_carnivore(self) -> Carnivore:
        return Lion()


class AmericaFactory(ContinentFactory):
    def create_herbivore(self) -> Herbivore:
        return Bison()

    def create_carnivore(self) -> Carnivore:
        return Wolf()


class AnimalWorld:
    """Client that only knows the abstract factory and products."""

    def __init__(self, factory: ContinentFactory):
        self._carnivore = factory.create_carnivore()
        self._herbivore = factory.create_herbivore()

    def run_food_chain(self):
        print(self._carnivore.eat(self._herbivore))
