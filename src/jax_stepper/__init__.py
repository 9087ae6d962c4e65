"""
JAX Stepper

Explicit time-stepping methods for first-order ODEs and a Newton-Raphson
root finder, written in JAX.

Main components:
- timesteppers: Euler and classical Runge-Kutta (RK4) methods
- stepper: Generic engines driving any method over a state (and time)
- rootfinders: Newton-Raphson iteration for scalar functions
- solve: Fixed-step drivers over a time interval
"""

# Time-stepping methods
from .timesteppers import (
    euler, runge_kutta_4, state_euler, MethodProtocol, StateMethodProtocol
)

# Engines
from .stepper import Stepper, StateStepper

# Root-finding
from .rootfinders import NewtonRaphson, newton_raphson

# Solver interfaces
from .solve import solve_ivp, solve_with_history

__all__ = [
    # Time-stepping methods
    "MethodProtocol",
    "StateMethodProtocol",
    "euler",
    "runge_kutta_4",
    "state_euler",

    # Engines
    "Stepper",
    "StateStepper",

    # Root-finding
    "NewtonRaphson",
    "newton_raphson",

    # Solver interfaces
    "solve_ivp",
    "solve_with_history",
]
