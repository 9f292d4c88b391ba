"""Abstract Factory demo - animal worlds built by continent factories."""

from lifetime.core import Demo

from .animals import AfricaFactory, AmericaFactory, AnimalWorld


class AbstractFactoryDemo(Demo):
    """Creates African and American animal worlds from different factories.

    The animals differ per continent, but the interaction between them
    stays the same.
    """

    @property
    def name(self) -> str:
        return "abstract_factory"

    @property
    def display_name(self) -> str:
        return "Abstract Factory"

    @property
    def description(self) -> str:
        return (
            "Provide an interface for creating families of related or dependent "
            "objects without specifying their concrete classes"
        )

    @property
    def category(self) -> str:
        return "creational"

    @property
    def participants(self):
        return {
            "AbstractFactory": ["ContinentFactory"],
            "ConcreteFactory": ["AfricaFactory", "AmericaFactory"],
            "AbstractProduct": ["Herbivore", "Carnivore"],
            "Product": ["Wildebeest", "Lion", "Bison", "Wolf"],
            "Client": ["AnimalWorld"],
        }

    def compute(self):
        for factory in (AfricaFactory(), AmericaFactory()):
            AnimalWorld(factory).run_food_chain()
