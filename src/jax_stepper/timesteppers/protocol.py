"""Protocols for time-stepping methods."""

from typing import Protocol, runtime_checkable

from ..custom_types import Derivative, Scalar, State, StateDerivative


@runtime_checkable
class MethodProtocol(Protocol):
    """
    Protocol for time-stepping methods.

    Defines the interface for advancing an ODE one time step. Any callable
    with this signature can be driven by a `Stepper`, which never looks
    inside the method.
    """

    def __call__(
        self,
        state: State,
        time: Scalar,
        dt: Scalar,
        derivative: Derivative,
        args: tuple = ()
    ) -> State:
        """
        Take a single time step.

        Args:
            state: Current solution.
            time: Current time.
            dt: Time step size.
            derivative: Right-hand side of dy/dt = f(y, t, *args).
            args: Additional arguments to pass to derivative.

        Returns:
            Solution at time + dt.
        """
        ...


@runtime_checkable
class StateMethodProtocol(Protocol):
    """Protocol for methods advancing a state by a step variable, without time."""

    def __call__(
        self,
        state: State,
        ds: Scalar,
        derivative: StateDerivative,
        args: tuple = ()
    ) -> State:
        ...
