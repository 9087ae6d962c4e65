"""Explicit time-stepping methods."""

from ..custom_types import Derivative, Scalar, State, StateDerivative
from ..numeric import constant, tree_add, tree_axpy, tree_div, tree_scale


def euler(
    state: State,
    time: Scalar,
    dt: Scalar,
    derivative: Derivative,
    args: tuple = ()
) -> State:
    """
    Perform a single forward Euler step.

    Computes $$ y_{n+1} = y_n + dt f(y_n, t_n, *args). $$

    Args:
        state: Current solution.
        time: Current time.
        dt: Time step size.
        derivative: Right-hand side of system dy/dt = f(y, t, *args).
        args: Additional arguments to pass to derivative.

    Returns:
        Solution at time + dt.
    """
    return tree_axpy(dt, derivative(state, time, *args), state)


def state_euler(
    state: State,
    ds: Scalar,
    derivative: StateDerivative,
    args: tuple = ()
) -> State:
    """Euler recursion without a time axis: s + ds * f(s, ds, *args)."""
    return tree_axpy(ds, derivative(state, ds, *args), state)


def runge_kutta_4(
    state: State,
    time: Scalar,
    dt: Scalar,
    derivative: Derivative,
    args: tuple = ()
) -> State:
    """
    Perform a single step of the classical fourth (4th) order Runge-Kutta method.

    Stages:
        k1 = dt f(y, t)
        k2 = dt f(y + k1/2, t + dt/2)
        k3 = dt f(y + k2/2, t + dt/2)
        k4 = dt f(y + k3, t + dt)

    Update: $$ y_{n+1} = y_n + (k1 + 2 k2 + 2 k3 + k4) / 6 $$

    Args:
        state: Current solution.
        time: Current time.
        dt: Time step size.
        derivative: Right-hand side of system dy/dt = f(y, t, *args).
        args: Additional arguments to pass to derivative.

    Returns:
        Solution at time + dt.
    """
    t_half = time + dt * constant(0.5, time)
    t_next = time + dt

    k1 = tree_scale(derivative(state, time, *args), dt)
    k2 = tree_scale(derivative(tree_axpy(0.5, k1, state), t_half, *args), dt)
    k3 = tree_scale(derivative(tree_axpy(0.5, k2, state), t_half, *args), dt)
    k4 = tree_scale(derivative(tree_add(state, k3), t_next, *args), dt)

    increment = tree_add(
        tree_add(k1, tree_scale(k2, 2)), tree_add(tree_scale(k3, 2), k4)
    )
    return tree_add(state, tree_div(increment, 6))
