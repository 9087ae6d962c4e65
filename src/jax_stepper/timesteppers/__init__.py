"""Explicit time-stepping methods for first-order ODEs."""

from .protocol import MethodProtocol, StateMethodProtocol
from .explicit import euler, runge_kutta_4, state_euler

__all__ = [
    # Protocols
    'MethodProtocol',
    'StateMethodProtocol',

    # Explicit methods
    'euler',
    'runge_kutta_4',
    'state_euler',
]
