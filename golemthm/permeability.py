"""Permeability laws and their derivatives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Permeability(ABC):
    """Base class for permeability laws.

    Every method takes the reference permeability components ``k0`` and
    returns a new list with one entry per component.
    """

    @abstractmethod
    def permeability(
        self, k0: Sequence[float], phi0: float, porosity: float, aperture: float
    ) -> list[float]:
        """Permeability components for the current state."""

    @abstractmethod
    def dpermeability_dev(
        self, k0: Sequence[float], phi0: float, porosity: float, dphi_dev: float
    ) -> list[float]:
        """Derivative of the permeability with respect to volumetric strain."""

    @abstractmethod
    def dpermeability_dpf(
        self, k0: Sequence[float], phi0: float, porosity: float, dphi_dpf: float
    ) -> list[float]:
        """Derivative of the permeability with respect to pore pressure."""

    @abstractmethod
    def dpermeability_dt(
        self, k0: Sequence[float], phi0: float, porosity: float, dphi_dt: float
    ) -> list[float]:
        """Derivative of the permeability with respect to temperature."""


def _zeros_like(k0: Sequence[float]) -> list[float]:
    return [0.0] * len(k0)


class ConstantPermeability(Permeability):
    """Permeability that keeps its reference value."""

    def permeability(self, k0, phi0, porosity, aperture):
        return [float(k) for k in k0]

    def dpermeability_dev(self, k0, phi0, porosity, dphi_dev):
        return _zeros_like(k0)

    def dpermeability_dpf(self, k0, phi0, porosity, dphi_dpf):
        return _zeros_like(k0)

    def dpermeability_dt(self, k0, phi0, porosity, dphi_dt):
        return _zeros_like(k0)


class CubicLawPermeability(Permeability):
    """Fracture permeability from the cubic law, ``aperture**2 / 8`` in every component."""

    def permeability(self, k0, phi0, porosity, aperture):
        cl = aperture * aperture / 8.0
        return [cl] * len(k0)

    def dpermeability_dev(self, k0, phi0, porosity, dphi_dev):
        return _zeros_like(k0)

    def dpermeability_dpf(self, k0, phi0, porosity, dphi_dpf):
        return _zeros_like(k0)

    def dpermeability_dt(self, k0, phi0, porosity, dphi_dt):
        return _zeros_like(k0)


class KozenyCarmanPermeability(Permeability):
    """Kozeny-Carman relation between porosity and permeability."""

    @staticmethod
    def _prefactors(k0: Sequence[float], phi0: float) -> list[float]:
        factor = (1.0 - phi0) ** 2 / phi0**3
        return [k * factor for k in k0]

    def permeability(self, k0, phi0, porosity, aperture):
        if phi0 == 1.0:
            return [float(k) for k in k0]
        factor = porosity**3 / (1.0 - porosity) ** 2
        return [a * factor for a in self._prefactors(k0, phi0)]

    def _derivative(self, k0, phi0, porosity, dphi):
        factor = porosity**2 * (3.0 - porosity) / (1.0 - porosity) ** 3 * dphi
        return [a * factor for a in self._prefactors(k0, phi0)]

    def dpermeability_dev(self, k0, phi0, porosity, dphi_dev):
        return self._derivative(k0, phi0, porosity, dphi_dev)

    def dpermeability_dpf(self, k0, phi0, porosity, dphi_dpf):
        return self._derivative(k0, phi0, porosity, dphi_dpf)

    def dpermeability_dt(self, k0, phi0, porosity, dphi_dt):
        return self._derivative(k0, phi0, porosity, dphi_dt)