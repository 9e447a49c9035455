"""Solvers for days 1 to 14 of the 2022 advent puzzle calendar, one module per day."""

__version__ = "0.1.0"