"""Streamline upwind Petrov-Galerkin stabilisation parameter."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum


class EffectiveLength(IntEnum):
    """Choice of the characteristic element length."""

    MIN = 1
    MAX = 2
    AVERAGE = 3
    STREAMLINE = 4


class SUPGMethod(IntEnum):
    """Formula used for the stabilisation parameter."""

    FULL = 1
    TEMPORAL = 2
    DOUBLY_ASYMPTOTIC = 3
    CRITICAL = 4


@dataclass(frozen=True)
class Element:
    """The geometric measures of an element that the upwinding needs."""

    dim: int
    volume: float = 0.0
    hmin: float = 0.0
    hmax: float = 0.0


def _as_enum(enum_type, value):
    if isinstance(value, str):
        try:
            return enum_type[value.upper()]
        except KeyError:
            raise ValueError(f"unknown {enum_type.__name__} {value!r}") from None
    return enum_type(value)


def _divide(numerator: float, denominator: float) -> float:
    """IEEE division: a zero denominator gives an infinity or NaN instead of raising."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)


class SUPG:
    """Computes the SUPG parameter tau for a velocity, diffusivity and element."""

    def __init__(self, effective_length="min", method="full") -> None:
        self.effective_length = _as_enum(EffectiveLength, effective_length)
        self.method = _as_enum(SUPGMethod, method)

    @staticmethod
    def _peclet(norm_v: float, h_ele: float, diff: float) -> float:
        return _divide(0.5 * norm_v * h_ele, diff)

    def tau(self, velocity: Sequence[float], diffusivity: float, dt: float, element: Element) -> float:
        """Stabilisation parameter for the configured method."""
        norm_v = math.sqrt(sum(v * v for v in velocity))
        h_ele = self.element_length(velocity, element)
        if self.method is SUPGMethod.FULL:
            return self.full(norm_v, h_ele, diffusivity)
        if self.method is SUPGMethod.TEMPORAL:
            return self.temporal(norm_v, h_ele, diffusivity, dt)
        if self.method is SUPGMethod.DOUBLY_ASYMPTOTIC:
            return self.doubly_asymptotic(norm_v, h_ele, diffusivity)
        return self.critical(norm_v, h_ele, diffusivity)

    def full(self, norm_v: float, h_ele: float, diff: float) -> float:
        alpha = self._peclet(norm_v, h_ele, diff)
        return self.cosh_relation(alpha) / norm_v if norm_v > 0.0 else 0.0

    def temporal(self, norm_v: float, h_ele: float, diff: float, dt: float) -> float:
        a = 2.0 / dt
        b = 2.0 * norm_v / h_ele
        c = 4.0 * diff / (h_ele * h_ele)
        return 1.0 / math.sqrt(a * a + b * b + c * c)

    def doubly_asymptotic(self, norm_v: float, h_ele: float, diff: float) -> float:
        alpha = self._peclet(norm_v, h_ele, diff)
        if -3.0 <= alpha <= 3.0:
            return alpha / 3.0
        return alpha * math.sqrt(alpha * alpha)

    def critical(self, norm_v: float, h_ele: float, diff: float) -> float:
        alpha = self._peclet(norm_v, h_ele, diff)
        if alpha < 1.0:
            return -1.0 - _divide(1.0, alpha)
        if -1.0 <= alpha <= 1.0:
            return 0.0
        if alpha > 1.0:
            return 1.0 - 1.0 / alpha
        return 0.0

    def cosh_relation(self, alpha: float) -> float:
        """coth(alpha) - 1/alpha, with a series near zero and its limit for large alpha."""
        if alpha < 0.01:
            a2 = alpha * alpha
            return alpha * (1.0 / 3.0 + a2 * (-1.0 / 45.0 + 18.0 / 8505.0 * a2))
        if 0.01 <= alpha < 20:
            ep, em = math.exp(alpha), math.exp(-alpha)
            return (ep + em) / (ep - em) - 1.0 / alpha
        if alpha >= 20:
            return 1.0
        return 0.0

    def element_length(self, velocity: Sequence[float], element: Element) -> float:
        """Characteristic length of the element."""
        if element.dim == 1:
            return element.volume
        if self.effective_length is EffectiveLength.MIN:
            return element.hmin
        if self.effective_length is EffectiveLength.MAX:
            return element.hmax
        if self.effective_length is EffectiveLength.AVERAGE:
            return 0.5 * (element.hmin + element.hmax)
        raise ValueError("the stream line length needs some revision and cannot be used")