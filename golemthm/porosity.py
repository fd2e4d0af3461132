"""Porosity evolution laws."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Porosity(ABC):
    """Base class for porosity laws and their derivatives."""

    @abstractmethod
    def porosity(
        self,
        phi_old: float,
        dphi_dev: float,
        dphi_dpf: float,
        dphi_dt: float,
        dev: float,
        dpf: float,
        dt: float,
    ) -> float:
        """Updated porosity from the previous one and the variable increments."""

    @abstractmethod
    def dporosity_dev(self, phi_old: float, biot: float) -> float:
        """Derivative of porosity with respect to volumetric strain."""

    @abstractmethod
    def dporosity_dpf(self, phi_old: float, biot: float, ks: float) -> float:
        """Derivative of porosity with respect to pore pressure."""

    @abstractmethod
    def dporosity_dt(self, phi_old: float, biot: float, beta_f: float, beta_s: float) -> float:
        """Derivative of porosity with respect to temperature."""


class ConstantPorosity(Porosity):
    """Porosity that does not change."""

    def porosity(self, phi_old, dphi_dev, dphi_dpf, dphi_dt, dev, dpf, dt):
        return phi_old

    def dporosity_dev(self, phi_old, biot):
        return 0.0

    def dporosity_dpf(self, phi_old, biot, ks):
        return 0.0

    def dporosity_dt(self, phi_old, biot, beta_f, beta_s):
        return 0.0


class THMPorosity(Porosity):
    """Porosity driven by thermo-hydro-mechanical coupling."""

    def porosity(self, phi_old, dphi_dev, dphi_dpf, dphi_dt, dev, dpf, dt):
        return phi_old + dphi_dev * dev + dphi_dpf * dpf + dphi_dt * dt

    def dporosity_dev(self, phi_old, biot):
        return biot - phi_old

    def dporosity_dpf(self, phi_old, biot, ks):
        return (biot - phi_old) / ks

    def dporosity_dt(self, phi_old, biot, beta_f, beta_s):
        return phi_old * (1.0 - biot) * beta_f - biot * (1.0 - phi_old) * beta_s