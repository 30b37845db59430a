"""Material descriptions: fission gases, fuel matrices and model settings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .constants import BOLTZMANN_CONSTANT


class InvalidOptionError(ValueError):
    """Raised when an input setting selects an option that does not exist."""

    def __init__(self, routine: str, variable_name: str, value: int) -> None:
        self.routine = routine
        self.variable_name = variable_name
        self.value = value
        super().__init__(
            f"{routine}: invalid value {value!r} for input setting {variable_name!r}"
        )


@dataclass
class Entity:
    """Anything with a name and a reference describing where its data comes from."""

    name: str = ""
    reference: str = ""


@dataclass
class InputVariable(Entity):
    """An input setting, e.g. the option selecting a model."""

    value: float = 0.0


@dataclass
class Gas(Entity):
    """A fission gas (xenon, krypton, helium and their isotopes)."""

    atomic_number: int = 0
    mass_number: float | None = None
    van_der_waals_volume: float = 0.0  # m3
    decay_rate: float = 0.0  # 1/s
    precursor_factor: float = 1.0


@dataclass
class Matrix(Entity):
    """A fuel matrix material (e.g. UO2, UO2-HBS) and its properties."""

    theoretical_density: float = 0.0  # kg/m3
    grain_boundary_mobility: float = 0.0  # m2/s
    ff_range: float = 0.0  # m
    ff_influence_radius: float = 0.0  # m
    surface_tension: float = 0.0  # N/m
    schottky_volume: float = 0.0  # m3
    ois_volume: float = 0.0  # m3
    grain_boundary_thickness: float = 0.0  # m
    grain_boundary_vacancy_diffusivity: float = 0.0  # m2/s
    semidihedral_angle: float = 0.0
    lenticular_shape_factor: float = 0.0
    grain_radius: float = 0.0  # m
    healing_temperature_threshold: float = 0.0  # K
    nucleation_rate: float = 0.0  # 1/s

    def set_grain_boundary_mobility(self, option: int, temperature: float) -> float:
        """Set the grain-boundary mobility according to the iGrainGrowth option."""
        if option == 0:
            self.reference += "no grain-boundary mobility.\n\t"
            self.grain_boundary_mobility = 0.0
        elif option == 1:
            self.reference += "Ainscough et al., JNM, 49 (1973) 117-128.\n\t"
            self.grain_boundary_mobility = 1.455e-8 * math.exp(-32114.5 / temperature)
        elif option == 2:
            self.reference += "Van Uffelen et al. JNM, 434 (2013) 287–29.\n\t"
            self.grain_boundary_mobility = 1.360546875e-15 * math.exp(
                -46524.0 / temperature
            )
        else:
            raise InvalidOptionError("SetMatrix", "iGrainGrowth", option)
        return self.grain_boundary_mobility

    def set_grain_boundary_vacancy_diffusivity(
        self, option: int, temperature: float
    ) -> float:
        """Set the grain-boundary vacancy diffusivity per iGrainBoundaryVacancyDiffusivity."""
        if option == 0:
            self.grain_boundary_vacancy_diffusivity = 1e-30
            self.reference += (
                "iGrainBoundaryVacancyDiffusivity: constant value (1e-30 m^2/s).\n\t"
            )
        elif option == 1:
            self.grain_boundary_vacancy_diffusivity = 6.9e-04 * math.exp(
                -5.35e-19 / (BOLTZMANN_CONSTANT * temperature)
            )
            self.reference += (
                "iGrainBoundaryVacancyDiffusivity: from Reynolds and Burton, "
                "JNM, 82 (1979) 22-25.\n\t"
            )
        elif option == 2:
            self.grain_boundary_vacancy_diffusivity = 8.86e-6 * math.exp(
                -5.75e-19 / (BOLTZMANN_CONSTANT * temperature)
            )
            self.reference += (
                "iGrainBoundaryVacancyDiffusivity: from Pastore et al., "
                "JNM, 456 (2015) 156.\n\t"
            )
        else:
            raise InvalidOptionError(
                "SetMatrix", "iGrainBoundaryVacancyDiffusivity", option
            )
        return self.grain_boundary_vacancy_diffusivity


@dataclass
class ScalingFactors:
    """Multiplicative factors applied to model parameters, all 1 by default."""

    resolution_rate: float = 1.0
    trapping_rate: float = 1.0
    nucleation_rate: float = 1.0
    diffusivity: float = 1.0
    screw_parameter: float = 1.0
    span_parameter: float = 1.0
    cent_parameter: float = 1.0
    helium_production_rate: float = 1.0
    temperature: float = 1.0
    fission_rate: float = 1.0


def krypton_gases() -> list[Gas]:
    """Stable krypton and the radioactive isotope Kr85m."""
    return [
        Gas(
            name="Kr",
            atomic_number=36,
            van_der_waals_volume=6.61e-29,
            decay_rate=0.0,
            precursor_factor=1.00,
        ),
        Gas(
            name="Kr85m",
            atomic_number=36,
            mass_number=85,
            van_der_waals_volume=6.61e-29,
            decay_rate=4.3e-5,
            precursor_factor=1.31,
        ),
    ]


__all__ = [
    "InvalidOptionError",
    "Entity",
    "InputVariable",
    "Gas",
    "Matrix",
    "ScalingFactors",
    "krypton_gases",
]