"""Solvers for classic dynamic-programming and graph problems."""

__version__ = "0.1.0"