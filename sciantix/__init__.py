"""Solvers, constants and material descriptions for inert gas behaviour in a single nuclear fuel grain."""

__version__ = "2.0.0"
__all__ = ["constants", "solver", "materials"]