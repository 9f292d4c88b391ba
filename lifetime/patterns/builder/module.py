"""Builder demo - a shop assembling vehicles."""

from lifetime.core import Demo

from .vehicles import CarBuilder, MotorCycleBuilder, ScooterBuilder, Shop


class BuilderDemo(Demo):
    """Different vehicles are assembled in the same sequence of steps."""

    @property
    def name(self) -> str:
        return "builder"

    @property
    def display_name(self) -> str:
        return "Builder"

    @property
    def description(self) -> str:
        return (
            "Separate the construction of a complex object from its representation "
            "so that the same construction process can create different representations"
        )

    @property
    def category(self) -> str:
        return "creational"

    @property
    def participants(self):
        return {
            "Builder": ["VehicleBuilder"],
            "ConcreteBuilder": ["MotorCycleBuilder", "CarBuilder", "ScooterBuilder"],
            "Director": ["Shop"],
            "Product": ["Vehicle"],
        }

    def compute(self):
        shop = Shop()

        for builder in (ScooterBuilder(), CarBuilder(), MotorCycleBuilder()):
            shop.construct(builder)
            builder.vehicle.show()
