# golemthm

Material and helper relations for modelling coupled thermo-hydro-mechanical
(THM) processes in faulted geothermal reservoirs. The package uses only the
standard library.

## What it provides

- `golemthm.scaling.Scaling`: takes a characteristic time, length,
  temperature and stress and derives the scales of force, energy, power,
  velocity, acceleration, mass, density, specific heat, conductivity, heat
  production, heat flow, permeability, viscosity, compressibility and
  expansivity, each as an attribute.
- `golemthm.fluid`: fluid density laws (`ConstantFluidDensity`,
  `LinearFluidDensity`) with `density`, `ddensity_dt` and `ddensity_dp`, and
  fluid viscosity laws (`ConstantFluidViscosity`, `LinearFluidViscosity`)
  with `viscosity`, `dviscosity_dt` and `dviscosity_dp`. The linear laws
  accept an optional `Scaling` to work in scaled units. `FluidDensity` and
  `FluidViscosity` are the abstract bases.
- `golemthm.hardening`: hardening laws with `value` and `dvalue` of an
  internal variable: `ConstantHardening`, `CubicHardening`,
  `ExponentialHardening` and `PlasticSaturationHardening`. With
  `convert_to_radians=True` the given values are read as degrees.
- `golemthm.porosity`: `ConstantPorosity` and `THMPorosity`, with the
  porosity update and its derivatives with respect to volumetric strain, pore
  pressure and temperature.
- `golemthm.permeability`: `ConstantPermeability`, `CubicLawPermeability`
  (`aperture**2 / 8` in every component) and `KozenyCarmanPermeability`,
  each returning a list of components and their derivatives.
- `golemthm.flow_kernel.compute_kernel`: assembles the 3x3 permeability
  tensor (a tuple of rows) for an isotropic, orthotropic or anisotropic
  distribution (`PermeabilityDistribution`, its integer value or its name)
  in one, two or three dimensions.
- `golemthm.supg.SUPG`: the streamline-upwind Petrov–Galerkin stabilisation
  parameter `tau`, with the `full`, `temporal`, `doubly_asymptotic` and
  `critical` formulas (`SUPGMethod`) and the element length taken as the
  minimum, maximum or average (`EffectiveLength`) of an `Element`.
- `golemthm.property_file.PropertyFile`: reads `nprop` values for each of
  `nelem` elements from a whitespace-separated text file; `data(elem_id,
  prop_num)` returns one value.
- `golemthm.elasticity`: `elastic_jacobian` for a fourth-order elasticity
  tensor given as nested sequences, and the isotropic shear, bulk and
  Young's moduli (`isotropic_shear_modulus`, `isotropic_bulk_modulus`,
  `isotropic_youngs_modulus`).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from golemthm.fluid import LinearFluidDensity, LinearFluidViscosity
from golemthm.hardening import CubicHardening
from golemthm.permeability import KozenyCarmanPermeability
from golemthm.flow_kernel import compute_kernel

density = LinearFluidDensity(alpha=2.0e-4, tc=20.0, scaling=None)
rho = density.density(pressure=1.0e7, temperature=80.0, rho0=1000.0)

viscosity = LinearFluidViscosity(tc=20.0, tv=50.0, scaling=None)
mu = viscosity.viscosity(temperature=80.0, rho=rho, mu0=1.0e-3)

cohesion = CubicHardening(
    value_initial=10.0e6,
    value_residual=2.0e6,
    internal_0=0.0,
    internal_limit=0.01,
    convert_to_radians=False,
)
c = cohesion.value(0.005)

kc = KozenyCarmanPermeability()
k = kc.permeability([1.0e-15], phi0=0.1, porosity=0.12, aperture=0.0)

tensor = compute_kernel(k, "isotropic", 1.0 / mu, 3)
```

## Errors

Invalid input raises `ValueError`: a cubic hardening law whose
`internal_limit` does not exceed `internal_0`, a plastic saturation law with
a negative initial value or a non-positive limit, a permeability list of the
wrong length for the chosen distribution and dimension, an unknown
distribution, method or length name, the streamline element length, and a
property file that ends too soon. `PropertyFile.data` raises `IndexError`
for an element or property number out of range.

## What it does not do

The package holds relations to be called point by point; it does not solve
the coupled equations, build meshes or assemble systems. It has no fluid
laws beyond the constant and linear ones, and it does not read boundary
values that vary in time from point data files. There is no command-line
program.