"""Constitutive relations for thermo-hydro-mechanical modelling of geothermal reservoirs."""

__version__ = "0.1.0"

__all__ = [
    "scaling",
    "fluid",
    "hardening",
    "porosity",
    "permeability",
    "flow_kernel",
    "supg",
    "property_file",
    "elasticity",
]