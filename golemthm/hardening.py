"""Hardening laws giving a plastic parameter as a function of an internal variable."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod


class HardeningModel(ABC):
    """Base class for hardening laws.

    When ``convert_to_radians`` is set, the parameter values given to a model
    are taken as degrees and converted to radians.
    """

    def __init__(self, convert_to_radians: bool = False) -> None:
        self.convert_to_radians = bool(convert_to_radians)

    def _convert(self, value: float) -> float:
        value = float(value)
        return value * math.pi / 180.0 if self.convert_to_radians else value

    @abstractmethod
    def value(self, intnl: float) -> float:
        """Parameter value at the given internal variable."""

    @abstractmethod
    def dvalue(self, intnl: float) -> float:
        """Derivative of the parameter with respect to the internal variable."""


class ConstantHardening(HardeningModel):
    """No hardening: the parameter keeps one value."""

    def __init__(self, value: float = 1.0, convert_to_radians: bool = False) -> None:
        super().__init__(convert_to_radians)
        self._value = self._convert(value)

    def value(self, intnl: float) -> float:
        return self._value

    def dvalue(self, intnl: float) -> float:
        return 0.0


class CubicHardening(HardeningModel):
    """Cubic transition from an initial to a residual value between two internal limits."""

    def __init__(
        self,
        value_initial: float,
        value_residual: float,
        internal_0: float = 0.0,
        internal_limit: float = 1.0,
        convert_to_radians: bool = False,
    ) -> None:
        super().__init__(convert_to_radians)
        self.value_initial = self._convert(value_initial)
        self.value_residual = self._convert(value_residual)
        self.internal_0 = float(internal_0)
        self.internal_limit = float(internal_limit)
        if self.internal_limit <= self.internal_0:
            raise ValueError(
                "internal_limit must be greater than internal_0 in the cubic hardening model"
            )
        span = self.internal_limit - self.internal_0
        drop = self.value_initial - self.value_residual
        self._alpha = 2.0 * drop / span**3
        self._beta = -1.5 * drop / span

    def _shifted(self, intnl: float) -> float:
        return intnl - self.internal_0 - 0.5 * (self.internal_limit - self.internal_0)

    def value(self, intnl: float) -> float:
        if intnl <= self.internal_0:
            return self.value_initial
        if intnl >= self.internal_limit:
            return self.value_residual
        x = self._shifted(intnl)
        return (
            self._alpha * x**3
            + self._beta * x
            + 0.5 * (self.value_initial + self.value_residual)
        )

    def dvalue(self, intnl: float) -> float:
        if intnl <= self.internal_0 or intnl >= self.internal_limit:
            return 0.0
        x = self._shifted(intnl)
        return 3.0 * self._alpha * x**2 + self._beta


class ExponentialHardening(HardeningModel):
    """Exponential decay from an initial value towards a residual value."""

    def __init__(
        self,
        value_initial: float,
        value_residual: float,
        rate: float = 0.0,
        convert_to_radians: bool = False,
    ) -> None:
        super().__init__(convert_to_radians)
        self.value_initial = self._convert(value_initial)
        self.value_residual = self._convert(value_residual)
        self.rate = float(rate)

    def value(self, intnl: float) -> float:
        return self.value_residual + (self.value_initial - self.value_residual) * math.exp(
            -self.rate * intnl
        )

    def dvalue(self, intnl: float) -> float:
        return (
            -self.rate
            * (self.value_initial - self.value_residual)
            * math.exp(-self.rate * intnl)
        )


class PlasticSaturationHardening(HardeningModel):
    """Cubic saturation from an initial value reaching the residual value at a limit."""

    def __init__(
        self,
        value_initial: float,
        value_residual: float,
        internal_limit: float = 1.0,
        convert_to_radians: bool = False,
    ) -> None:
        super().__init__(convert_to_radians)
        self.value_initial = self._convert(value_initial)
        self.value_residual = self._convert(value_residual)
        self.internal_limit = float(internal_limit)
        if self.value_initial < 0.0:
            raise ValueError("plastic saturation hardening: value_initial must not be negative")
        if self.internal_limit <= 0.0:
            raise ValueError(
                "plastic saturation hardening: internal_limit must be greater than 0.0"
            )

    def value(self, intnl: float) -> float:
        if intnl > self.internal_limit:
            return self.value_residual
        r = intnl / self.internal_limit
        return self.value_initial + (self.value_residual - self.value_initial) * r * (
            r * r - 3.0 * r + 3.0
        )

    def dvalue(self, intnl: float) -> float:
        if intnl > self.internal_limit:
            return 0.0
        r = intnl / self.internal_limit
        return (
            3.0
            * (self.value_residual - self.value_initial)
            / self.internal_limit
            * (r * r - 2.0 * r + 1.0)
        )