"""Assembly of the permeability tensor used by the fluid flow kernel."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

Tensor = tuple[tuple[float, float, float], tuple[float, float, float], tuple[float, float, float]]


class PermeabilityDistribution(IntEnum):
    """How the permeability components are distributed in space."""

    ISOTROPIC = 1
    ORTHOTROPIC = 2
    ANISOTROPIC = 3


def _as_distribution(distribution) -> PermeabilityDistribution:
    if isinstance(distribution, str):
        try:
            return PermeabilityDistribution[distribution.upper()]
        except KeyError:
            raise ValueError(f"unknown permeability distribution {distribution!r}") from None
    return PermeabilityDistribution(distribution)


def _require(k0: Sequence[float], count: int, words: str, kind: str) -> None:
    if len(k0) != count:
        raise ValueError(
            f"{words} needed for {kind} distribution of permeability! "
            f"You provided {len(k0)} values."
        )


def _diagonal(a: float, b: float, c: float) -> Tensor:
    return ((a, 0.0, 0.0), (0.0, b, 0.0), (0.0, 0.0, c))


def compute_kernel(
    k0: Sequence[float], distribution, factor: float, dim: int
) -> Tensor:
    """Build the 3x3 permeability tensor, rows first, scaled by ``factor``.

    ``distribution`` may be a :class:`PermeabilityDistribution`, its integer
    value or its name. A dimension other than 1, 2 or 3 gives a zero tensor.
    """
    dist = _as_distribution(distribution)
    k = [float(v) * factor for v in k0]

    if dim == 1:
        if dist is PermeabilityDistribution.ISOTROPIC:
            _require(k0, 1, "One input value is", "isotropic")
            return _diagonal(k[0], 0.0, 0.0)
        raise ValueError("One dimensional elements cannot have non-isotropic permeability values.")

    if dim == 2:
        if dist is PermeabilityDistribution.ISOTROPIC:
            _require(k0, 1, "One input value is", "isotropic")
            return _diagonal(k[0], k[0], 0.0)
        if dist is PermeabilityDistribution.ORTHOTROPIC:
            _require(k0, 2, "Two input values are", "orthotropic")
            return _diagonal(k[0], k[1], 0.0)
        raise ValueError("Two dimensional elements cannot have non-isotropic permeability values.")

    if dim == 3:
        if dist is PermeabilityDistribution.ISOTROPIC:
            _require(k0, 1, "One input value is", "isotropic")
            return _diagonal(k[0], k[0], k[0])
        if dist is PermeabilityDistribution.ORTHOTROPIC:
            _require(k0, 3, "Three input values are", "orthotropic")
            return _diagonal(k[0], k[1], k[2])
        _require(k0, 9, "Nine input values are", "anisotropic")
        return (tuple(k[0:3]), tuple(k[3:6]), tuple(k[6:9]))

    return _diagonal(0.0, 0.0, 0.0)