"""Characteristic scales used to non-dimensionalise variables and properties."""

from __future__ import annotations


class Scaling:
    """Primary characteristic values and the secondary scales derived from them."""

    def __init__(self, time: float, length: float, temperature: float, stress: float) -> None:
        self.time = float(time)
        self.length = float(length)
        self.temperature = float(temperature)
        self.stress = float(stress)

        area = self.length * self.length
        volume = area * self.length
        squared_time = self.time * self.time

        # Secondary variables
        self.force = self.stress * area
        self.energy = self.force * self.length
        self.power = self.energy / self.time
        self.velocity = self.length / self.time
        self.acceleration = self.length / squared_time
        self.mass = self.force / self.acceleration

        # Thermal material properties
        self.density = self.mass / volume
        self.specific_heat = self.energy / self.mass / self.temperature
        self.conductivity = self.power / self.length / self.temperature
        self.heat_production = self.power / volume
        self.heat_flow = self.power / area

        # Hydraulic material properties
        self.permeability = area
        self.viscosity = self.stress * self.time
        self.compressibility = 1.0 / self.stress

        # Mechanical material properties
        self.expansivity = 1.0 / self.temperature

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(time={self.time!r}, length={self.length!r}, "
            f"temperature={self.temperature!r}, stress={self.stress!r})"
        )