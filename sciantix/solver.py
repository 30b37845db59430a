"""Numerical solvers for the rate equations of the grain-scale models.

Spectral solvers keep their state in a list of diffusion-mode amplitudes;
they update that list in place and return the spatial average.
"""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence

from .constants import PI

_PROJECTION_COEFF = -2.0 * math.sqrt(2.0 / PI)
_SPHERE_VOLUME_FACTOR = (4.0 / 3.0) * PI


def _mode_count(value: float) -> int:
    return max(0, math.ceil(value))


def _mode_coefficient(np1: int) -> float:
    return (-1.0) ** np1 / np1


def integrator(initial_value: float, parameter: float, increment: float) -> float:
    """Solve y' = S with forward integration; ``parameter`` is the source S."""
    return initial_value + parameter * increment


def limited_growth(
    initial_value: float, parameter: Sequence[float], increment: float
) -> float:
    """Solve y' = k / y + S; ``parameter`` is (growth rate k, source S)."""
    growth_rate, source = parameter[0], parameter[1]
    base = initial_value + source * increment
    return 0.5 * (base + math.sqrt(base**2 + 4.0 * growth_rate * increment))


def decay(
    initial_condition: float, decay_rate: float, source_term: float, increment: float
) -> float:
    """Solve y' = -L y + S with backward Euler."""
    return (initial_condition + source_term * increment) / (1.0 + decay_rate * increment)


def binary_interaction(
    initial_condition: float, interaction_coefficient: float, increment: float
) -> float:
    """Solve y' = -k y**2 with a semi-implicit step."""
    return initial_condition / (
        1.0 + interaction_coefficient * initial_condition * increment
    )


def spectral_diffusion(
    initial_condition: MutableSequence[float],
    parameter: Sequence[float],
    increment: float,
) -> float:
    """Spatially averaged solution of dy/dt = D div grad y + S - L y.

    ``parameter`` holds (number of modes, D, domain radius, source, loss rate).
    The mode amplitudes in ``initial_condition`` are advanced in place.
    """
    n_modes = _mode_count(parameter[0])
    diffusivity, radius, production, loss_rate = (
        parameter[1],
        parameter[2],
        parameter[3],
        parameter[4],
    )
    diffusion_rate_coeff = PI**2 * diffusivity / radius**2
    source_rate_coeff = _PROJECTION_COEFF * production

    solution = 0.0
    for n in range(n_modes):
        np1 = n + 1
        n_coeff = _mode_coefficient(np1)
        diffusion_rate = diffusion_rate_coeff * np1**2 + loss_rate
        source_rate = source_rate_coeff * n_coeff
        initial_condition[n] = decay(
            initial_condition[n], diffusion_rate, source_rate, increment
        )
        solution += _PROJECTION_COEFF * n_coeff * initial_condition[n] / _SPHERE_VOLUME_FACTOR
    return solution


def dot_product_1d(u: Sequence[float], v: Sequence[float]) -> float:
    """Dot product of two vectors."""
    return sum(a * b for a, b in zip(u, v))


def dot_product_2d(
    a: Sequence[float], v: Sequence[float], n_rows: int, n_cols: int
) -> list[float]:
    """Product of a row-major ``n_rows`` x ``n_cols`` matrix with a vector."""
    return [
        dot_product_1d(a[row * n_cols : (row + 1) * n_cols], v[:n_cols])
        for row in range(n_rows)
    ]


def laplace_2x2(a: Sequence[float], b: Sequence[float]) -> tuple[float, float]:
    """Solve the 2x2 system A x = b by Cramer's rule.

    ``a`` is row-major. A singular system leaves ``b`` unchanged.
    """
    det_a = a[0] * a[3] - a[1] * a[2]
    if det_a == 0.0:
        return b[0], b[1]
    det_x = b[0] * a[3] - b[1] * a[1]
    det_y = b[1] * a[0] - b[0] * a[2]
    return det_x / det_a, det_y / det_a


def spectral_diffusion_non_equilibrium(
    solution_modes: MutableSequence[float],
    bubble_modes: MutableSequence[float],
    parameter: Sequence[float],
    increment: float,
) -> tuple[float, float]:
    """Spatially averaged solution of the coupled gas-in-solution / gas-in-bubbles system.

    ``parameter`` holds (number of modes, D, resolution rate b, trapping rate g,
    decay rate L, domain radius, source in solution, source in bubbles,
    bubble diffusivity). Both mode lists are advanced in place; the averaged
    (solution, bubble) concentrations are returned.
    """
    n_modes = _mode_count(parameter[0])
    diffusivity = parameter[1]
    resolution_rate = parameter[2]
    trapping_rate = parameter[3]
    decay_rate = parameter[4]
    radius = parameter[5]
    source_solution = parameter[6]
    source_bubbles = parameter[7]
    bubble_diffusivity = parameter[8]

    diffusion_rate_coeff = PI**2 * diffusivity / radius**2
    bubble_diffusion_rate_coeff = PI**2 * bubble_diffusivity / radius**2
    source_rate_coeff_solution = _PROJECTION_COEFF * source_solution
    source_rate_coeff_bubbles = _PROJECTION_COEFF * source_bubbles

    gas_solution = 0.0
    gas_bubble = 0.0
    for n in range(n_modes):
        np1 = n + 1
        n_coeff = _mode_coefficient(np1)
        diffusion_rate = diffusion_rate_coeff * np1**2
        bubble_diffusion_rate = bubble_diffusion_rate_coeff * np1**2
        source_rate_solution = source_rate_coeff_solution * n_coeff
        source_rate_bubble = source_rate_coeff_bubbles * n_coeff

        coeff_matrix = (
            1.0 + (diffusion_rate + trapping_rate + decay_rate) * increment,
            -resolution_rate * increment,
            -trapping_rate * increment,
            1.0 + (bubble_diffusion_rate + resolution_rate + decay_rate) * increment,
        )
        rhs = (
            solution_modes[n] + source_rate_solution * increment,
            bubble_modes[n] + source_rate_bubble * increment,
        )
        solution_modes[n], bubble_modes[n] = laplace_2x2(coeff_matrix, rhs)

        weight = _PROJECTION_COEFF * n_coeff / _SPHERE_VOLUME_FACTOR
        gas_solution += weight * solution_modes[n]
        gas_bubble += weight * bubble_modes[n]
    return gas_solution, gas_bubble


def quartic_equation(parameter: Sequence[float]) -> float:
    """Newton iteration for a x^4 + b x^3 + c x^2 + d x + e = 0.

    ``parameter`` holds (initial guess, a, b, c, d, e). Iteration stops after
    five steps or once the function value falls below the tolerance.
    """
    tolerance = 1.0e-3
    max_iterations = 5
    y0, a, b, c, d, e = (parameter[i] for i in range(6))

    y1 = 0.0
    for _ in range(max_iterations):
        function = a * y0**4 + b * y0**3 + c * y0**2 + d * y0 + e
        derivative = 4.0 * a * y0**3 + 3.0 * b * y0**2 + 2.0 * c * y0 + d
        y1 = y0 - function / derivative
        y0 = y1
        if function < tolerance:
            return y1
    return y1


def mode_initialization(
    n_modes: int, mode_initial_condition: float, diffusion_modes: MutableSequence[float]
) -> MutableSequence[float]:
    """Project a uniform initial condition onto the diffusion modes.

    The projection is refined iteratively; ``diffusion_modes`` is updated in
    place and returned.
    """
    iterations = 20
    projection_coeff = -math.sqrt(8.0 / PI)
    coefficients = [_mode_coefficient(n + 1) for n in range(n_modes)]

    remainder = mode_initial_condition
    for _ in range(iterations):
        reconstructed = 0.0
        for n, n_coeff in enumerate(coefficients):
            diffusion_modes[n] += projection_coeff * n_coeff * remainder
            reconstructed += (
                projection_coeff * n_coeff * diffusion_modes[n] * 3.0 / (4.0 * PI)
            )
        remainder = mode_initial_condition - reconstructed
    return diffusion_modes


def newton_blackburn(parameter: Sequence[float]) -> float:
    """Stoichiometry deviation from Blackburn's urania model by Newton iteration.

    Solves log(PO2) = 2 log(x (x + 2) / (1 - x)) + 108 x^2 - 32700 / T + 9.92;
    ``parameter`` holds (initial guess x, temperature T, oxygen partial pressure PO2).
    """
    tolerance = 1.0e-3
    max_iterations = 50

    x, temperature, pressure = parameter[0], parameter[1], parameter[2]
    if pressure <= 0.0:
        raise ValueError(
            f"oxygen partial pressure must be positive, got {pressure!r}"
        )
    log_pressure = math.log(pressure)
    if x == 0.0:
        x = 1.0e-7

    x1 = 0.0
    for _ in range(max_iterations):
        fun = (
            2.0 * math.log(x * (x + 2.0) / (1.0 - x))
            + 108.0 * x**2
            - 32700.0 / temperature
            + 9.92
            - log_pressure
        )
        deriv = 216.0 * x + 2.0 * (x**2 - 2.0 * x - 2.0) / ((x - 1.0) * x * (2.0 + x))
        x1 = x - fun / deriv
        x = x1
        if abs(fun) < tolerance:
            return x1
    return x1


def newton_langmuir_based_model(
    initial_value: float, parameter: Sequence[float], increment: float
) -> float:
    """Backward-Euler step of y' = K (1 - beta exp(alpha y)) solved by Newton.

    ``parameter`` holds (K, beta, alpha).
    """
    tolerance = 1.0e-3
    max_iterations = 50
    rate, beta, alpha = parameter[0], parameter[1], parameter[2]

    x0 = initial_value
    x1 = 0.0
    for _ in range(max_iterations):
        exponential = math.exp(alpha * x0)
        fun = x0 - initial_value - rate * increment + rate * beta * exponential * increment
        deriv = 1.0 + rate * beta * alpha * exponential * increment
        x1 = x0 - fun / deriv
        x0 = x1
        if abs(fun) < tolerance:
            return x1
    return x1


__all__ = [
    "integrator",
    "limited_growth",
    "decay",
    "binary_interaction",
    "spectral_diffusion",
    "dot_product_1d",
    "dot_product_2d",
    "laplace_2x2",
    "spectral_diffusion_non_equilibrium",
    "quartic_equation",
    "mode_initialization",
    "newton_blackburn",
    "newton_langmuir_based_model",
]