"""Numeric constants shared by the models and solvers."""

PI = 3.141592653589793

BOLTZMANN_CONSTANT = 1.380651e-23  # J/K
AVOGADRO_NUMBER = 6.02214076e23  # at/mol

__all__ = ["PI", "BOLTZMANN_CONSTANT", "AVOGADRO_NUMBER"]