"""Fluid density and viscosity formulations."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from .scaling import Scaling


def _zero_derivative(*_values: float) -> float:
    """Derivative of a law with respect to a variable it does not depend on."""
    return 0.0


class FluidDensity(ABC):
    """Base class for fluid density laws, optionally working in scaled units."""

    def __init__(self, scaling: Scaling | None = None) -> None:
        self.scaling = scaling

    @property
    def has_scaled_properties(self) -> bool:
        return self.scaling is not None

    @abstractmethod
    def density(self, pressure: float, temperature: float, rho0: float) -> float:
        """Fluid density at the given pressure and temperature."""

    @abstractmethod
    def ddensity_dt(self, pressure: float, temperature: float, rho0: float) -> float:
        """Derivative of the density with respect to temperature."""

    @abstractmethod
    def ddensity_dp(self, pressure: float, temperature: float) -> float:
        """Derivative of the density with respect to pressure."""


class ConstantFluidDensity(FluidDensity):
    """Density that stays at its reference value."""

    def density(self, pressure: float, temperature: float, rho0: float) -> float:
        return rho0

    def ddensity_dt(self, pressure: float, temperature: float, rho0: float) -> float:
        return _zero_derivative(pressure, temperature, rho0)

    def ddensity_dp(self, pressure: float, temperature: float) -> float:
        return _zero_derivative(pressure, temperature)


class LinearFluidDensity(FluidDensity):
    """Density varying linearly with temperature through a thermal expansion coefficient."""

    def __init__(self, alpha: float, tc: float, scaling: Scaling | None = None) -> None:
        super().__init__(scaling)
        self.alpha = float(alpha)
        self.tc = float(tc)

    def _scaled_alpha(self) -> float:
        if self.scaling is not None:
            return self.alpha / self.scaling.expansivity
        return self.alpha

    def density(self, pressure: float, temperature: float, rho0: float) -> float:
        # The reference temperature is used as given, in unscaled units.
        return rho0 * (1.0 - self._scaled_alpha() * (temperature - self.tc))

    def ddensity_dt(self, pressure: float, temperature: float, rho0: float) -> float:
        return -1.0 * rho0 * self._scaled_alpha()

    def ddensity_dp(self, pressure: float, temperature: float) -> float:
        return _zero_derivative(pressure, temperature)


class FluidViscosity(ABC):
    """Base class for fluid viscosity laws, optionally working in scaled units."""

    def __init__(self, scaling: Scaling | None = None) -> None:
        self.scaling = scaling

    @property
    def has_scaled_properties(self) -> bool:
        return self.scaling is not None

    @abstractmethod
    def viscosity(self, temperature: float, rho: float, mu0: float) -> float:
        """Fluid viscosity at the given temperature and density."""

    @abstractmethod
    def dviscosity_dt(self, temperature: float, rho: float, drho_dt: float, mu0: float) -> float:
        """Derivative of the viscosity with respect to temperature."""

    @abstractmethod
    def dviscosity_dp(self, temperature: float, rho: float, drho_dp: float) -> float:
        """Derivative of the viscosity with respect to pressure."""


class ConstantFluidViscosity(FluidViscosity):
    """Viscosity that stays at its reference value."""

    def viscosity(self, temperature: float, rho: float, mu0: float) -> float:
        return mu0

    def dviscosity_dt(self, temperature: float, rho: float, drho_dt: float, mu0: float) -> float:
        return _zero_derivative(temperature, rho, drho_dt, mu0)

    def dviscosity_dp(self, temperature: float, rho: float, drho_dp: float) -> float:
        return _zero_derivative(temperature, rho, drho_dp)


class LinearFluidViscosity(FluidViscosity):
    """Viscosity decaying exponentially with temperature."""

    def __init__(self, tc: float, tv: float, scaling: Scaling | None = None) -> None:
        super().__init__(scaling)
        self.tc = float(tc)
        self.tv = float(tv)

    def _scaled_coefficients(self) -> tuple[float, float]:
        if self.scaling is not None:
            s_t = self.scaling.temperature
            return self.tc / s_t, self.tv / s_t
        return self.tc, self.tv

    def viscosity(self, temperature: float, rho: float, mu0: float) -> float:
        tc, tv = self._scaled_coefficients()
        return mu0 * math.exp(-(temperature - tc) / tv)

    def dviscosity_dt(self, temperature: float, rho: float, drho_dt: float, mu0: float) -> float:
        _, tv = self._scaled_coefficients()
        return (-1.0 / tv) * self.viscosity(temperature, 0.0, mu0)

    def dviscosity_dp(self, temperature: float, rho: float, drho_dp: float) -> float:
        return _zero_derivative(temperature, rho, drho_dp)