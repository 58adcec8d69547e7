"""Pseudo-Boolean benchmark problems, seeded random generators, file helpers and ECDF logging."""

__version__ = "0.1.0"

__all__ = ["rng", "files", "problem_utils", "pbo", "ecdf"]