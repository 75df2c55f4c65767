"""Least-squares trilateration from UWB ranges, with vector, matrix and DW1000 register helpers."""

__version__ = "0.1.0"