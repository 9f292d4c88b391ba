"""Vehicles assembled step by step by a shop."""

from abc import ABC, abstractmethod
from typing import Dict


class Vehicle:
    """The product: a vehicle type plus string-keyed parts."""

    def __init__(self, vehicle_type: str):
        self.vehicle_type = vehicle_type
        self._parts: Dict[str, str] = {}

    def __getitem__(self, key: str) -> str:
        return self._parts[key]

    def __setitem__(self, key: str, value: str):
        self._parts[key] = value

    def show(self):
        print("\n")
        print(f"Vehicle Type: {self.vehicle_type}")
        print(f"\tFrame : {self._parts['frame']}")
        print(f"\tEngine : {self._parts['engine']}")
        print(f"\t#Wheels: {self._parts['wheels']}")
        print(f"\t#Doors : {self._parts['doors']}")


class VehicleBuilder(ABC):
    """Abstract interface for building the parts of a vehicle."""

    def __init__(self, vehicle_type: str):
        self.vehicle = Vehicle(vehicle_type)

    @abstractmethod
    def build_frame(self):
        pass

    @abstractmethod
    def build_engine(self):
        pass

    @abstractmethod
    def build_wheels(self):
        pass

    @abstractmethod
    def build_doors(self):
        pass


class MotorCycleBuilder(VehicleBuilder):
    def __init__(self):
        super().__init__("MotorCycle")

    def build_frame(self):
        self.vehicle["frame"] = "MotorCycle Frame"

    def build_engine(self):
        self.vehicle["engine"] = "500 cc"

    def build_wheels(self):
        self.vehicle["wheels"] = "2"

    def build_doors(self):
        self.vehicle["doors"] = "0"


class CarBuilder(VehicleBuilder):
    def __init__(self):
        super().__init__("Car")

    def build_frame(self):
        self.vehicle["frame"] = "Car Frame"

    def build_engine(self):
        self.vehicle["engine"] = "2500 cc"

    def build_wheels(self):
        self.vehicle["wheels"] = "4"

    def build_doors(self):
        self.vehicle["doors"] = "4"


class ScooterBuilder(VehicleBuilder):
    def __init__(self):
        super().__init__("Scooter")

    def build_frame(self):
        self.vehicle["frame"] = "Scooter Frame"

    def build_engine(self):
        self.vehicle["engine"] = "50 cc"

    def build_wheels(self):
        self.vehicle["wheels"] = "2"

    def build_doors(self):
        self.vehicle["doors"] = "0"


class Shop:
    """The director: runs the builder through a fixed series of steps."""

    def construct(self, builder: VehicleBuilder) -> Vehicle:
        builder.build_frame()
        builder.build_engine()
        builder.build_wheels()
        builder.build_doors()
        return builder.vehicle
