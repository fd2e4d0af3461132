"""Helpers for fourth-order elasticity tensors."""

from __future__ import annotations

from collections.abc import Sequence


def elastic_jacobian(
    tensor, i: int, k: int, grad_test: Sequence[float], grad_phi: Sequence[float]
) -> float:
    """Sum over j, l of ``tensor[i][j][k][l] * grad_phi[l] * grad_test[j]``."""
    return sum(
        sum(tensor[i][j][k][l] * grad_phi[l] for l in range(3)) * grad_test[j]
        for j in range(3)
    )


def isotropic_shear_modulus(tensor) -> float:
    """Shear modulus of an isotropic elasticity tensor."""
    return tensor[0][1][0][1]


def _lame(tensor) -> tuple[float, float]:
    shear = isotropic_shear_modulus(tensor)
    dilatational = tensor[0][0][0][0]
    return dilatational - 2.0 * shear, shear


def isotropic_bulk_modulus(tensor) -> float:
    """Bulk modulus of an isotropic elasticity tensor."""
    lam, shear = _lame(tensor)
    return lam + 2.0 * shear / 3.0


def isotropic_youngs_modulus(tensor) -> float:
    """Young's modulus of an isotropic elasticity tensor."""
    lam, shear = _lame(tensor)
    return shear * (3.0 * lam + 2.0 * shear) / (lam + shear)