"""Iterative root-finding algorithms."""

from .newtonraphson import NewtonRaphson, newton_raphson


__all__ = [
    "NewtonRaphson",
    "newton_raphson",
]
