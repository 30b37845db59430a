# sciantix

Numerical and material building blocks for a zero-dimensional model of a
single grain of nuclear fuel, with a focus on inert fission gas behaviour.
The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `sciantix.constants`: `PI`, `BOLTZMANN_CONSTANT` (J/K) and
  `AVOGADRO_NUMBER` (at/mol).
- `sciantix.solver`: the solvers that advance a quantity by one time step.
  - `integrator`, `decay`, `limited_growth` and `binary_interaction` handle simple ODEs.
  - `spectral_diffusion` and `spectral_diffusion_non_equilibrium` give the
    grain-averaged diffusion with a spectral expansion in space. They update
    the mode amplitudes you pass in place.
  - `mode_initialization` projects a uniform initial condition onto the
    diffusion modes.
  - `quartic_equation`, `newton_blackburn` and `newton_langmuir_based_model`
    are Newton solvers. `newton_blackburn` raises `ValueError` if the oxygen
    partial pressure is not positive.
  - `laplace_2x2`, `dot_product_1d` and `dot_product_2d` are small
    linear-algebra helpers. `laplace_2x2` returns `b` unchanged when the
    system is singular.
- `sciantix.materials` holds these classes and functions:
  - `Entity`, `InputVariable`, `Gas`, `Matrix` and `ScalingFactors` are
    dataclasses.
  - `krypton_gases()` returns stable Kr and Kr85m.
  - `Matrix.set_grain_boundary_mobility` and
    `Matrix.set_grain_boundary_vacancy_diffusivity` compute a property from a
    model option and a temperature. They also add the literature reference to
    `Matrix.reference`.
  - An unknown option raises `InvalidOptionError`, which is a subclass of
    `ValueError`.

## Example

```python
from sciantix.solver import decay, spectral_diffusion

# y' = -L y + S, backward Euler
y = decay(1.0, decay_rate=0.1, source_term=2.0, increment=1.0)

# grain-averaged diffusion with 40 modes:
# (number of modes, diffusivity, grain radius, source, loss rate)
modes = [0.0] * 40
average = spectral_diffusion(modes, [40, 1e-19, 5e-6, 1e18, 0.0], 3600.0)
```

`spectral_diffusion` updates `modes` in place, so the next time step starts
from the state where this one stopped.

```python
from sciantix.materials import Matrix

uo2 = Matrix(name="UO2")
uo2.set_grain_boundary_mobility(1, temperature=1800.0)
print(uo2.grain_boundary_mobility, uo2.reference)
```

## What the package does not do

The package provides solvers and material data only. It has no simulation
driver and no command-line program. It does not read input histories, and it
does not write output or overview files. A caller is expected to combine
these building blocks into its own time-stepping loop.