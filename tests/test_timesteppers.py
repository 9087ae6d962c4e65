"""Unit tests for the explicit time-stepping methods."""

import pytest
import jax.numpy as jnp

from jax_stepper.timesteppers import (
    MethodProtocol,
    StateMethodProtocol,
    euler,
    runge_kutta_4,
    state_euler,
)


def integrate(method, fun, y0, t0, dt, n):
    """Apply `method` n times, advancing the time by dt after each step."""
    y, t = y0, t0
    for _ in range(n):
        y = method(y, t, dt, fun)
        t = t + dt
    return y


@pytest.fixture
def linear_problem():
    """
    ODE: dy/dx = 2x,    y(0) = 0

    Exact solution: y = x^2.
    """
    fun = lambda y, x: 2.0 * x
    return fun, 0.0, 0.0


@pytest.fixture
def exponential_problem():
    """
    ODE: dy/dt = y,    y(0) = 1

    Exact solution: y = exp(t).
    """
    fun = lambda y, t: y
    return fun, jnp.array(1.0), 0.0


class TestEuler:

    def test_single_step(self):
        y = euler(jnp.array(1.0), 0.0, 0.1, lambda y, t: -y)
        assert jnp.allclose(y, 0.9)

    def test_uses_pre_step_time(self, linear_problem):
        fun, y0, t0 = linear_problem
        # f(y, 0) = 0, so the first step does not move.
        assert jnp.allclose(euler(y0, t0, 1.0, fun), 0.0)

    def test_discrete_sum(self, linear_problem):
        """Euler on dy/dx = 2x sums 2 k dt^2 for k = 0..n-1."""
        fun, y0, t0 = linear_problem
        for dt, n in [(1.0, 10), (0.5, 8)]:
            y = integrate(euler, fun, y0, t0, dt, n)
            assert jnp.allclose(y, dt**2 * n * (n - 1))

    def test_single_derivative_evaluation(self):
        calls = []

        def fun(y, t):
            calls.append(t)
            return -y

        euler(jnp.array(1.0), 0.0, 0.1, fun)
        assert len(calls) == 1

    def test_args(self):
        y = euler(jnp.array(1.0), 0.0, 0.1, lambda y, t, k: -k * y, args=(2.0,))
        assert jnp.allclose(y, 0.8)

    def test_tuple_state(self):
        fun = lambda y, t: (y[1], -y[0])
        y = euler((jnp.array(1.0), jnp.array(0.0)), 0.0, 0.5, fun)
        assert jnp.allclose(y[0], 1.0)
        assert jnp.allclose(y[1], -0.5)


class TestRK4:

    def test_single_step(self, exponential_problem):
        fun, y0, t0 = exponential_problem
        y = runge_kutta_4(y0, t0, 0.1, fun)
        assert jnp.allclose(y, jnp.exp(0.1), atol=1e-6)

    def test_exact_for_quadratic(self, linear_problem):
        """RK4 reduces to Simpson's rule when f depends on x only."""
        fun, y0, t0 = linear_problem
        y = integrate(runge_kutta_4, fun, y0, t0, 1.0, 10)
        assert jnp.allclose(y, 100.0)

    def test_fourth_order_convergence(self, exponential_problem):
        fun, y0, t0 = exponential_problem
        errors = []
        for dt, n in [(0.5, 4), (0.25, 8)]:
            y = integrate(runge_kutta_4, fun, y0, t0, dt, n)
            errors.append(jnp.abs(y - jnp.exp(2.0)))

        # Halving dt should shrink the error by ~2^4
        assert errors[0] / errors[1] > 10.0

    def test_more_accurate_than_euler(self, exponential_problem):
        fun, y0, t0 = exponential_problem
        y_euler = integrate(euler, fun, y0, t0, 0.1, 10)
        y_rk4 = integrate(runge_kutta_4, fun, y0, t0, 0.1, 10)
        exact = jnp.exp(1.0)
        assert jnp.abs(y_rk4 - exact) < jnp.abs(y_euler - exact)

    def test_four_derivative_evaluations(self):
        calls = []

        def fun(y, t):
            calls.append(t)
            return -y

        runge_kutta_4(jnp.array(1.0), 0.0, 0.2, fun)
        assert len(calls) == 4
        assert jnp.allclose(jnp.array(calls), jnp.array([0.0, 0.1, 0.1, 0.2]))

    def test_preserves_dtype(self):
        y0 = jnp.array([1.0, 2.0], dtype=jnp.float16)
        t0 = jnp.array(0.0, dtype=jnp.float16)
        y = runge_kutta_4(y0, t0, 0.125, lambda y, t: -y)
        assert y.dtype == jnp.float16

    def test_harmonic_oscillator(self):
        """y'' = -y written as a first-order system; one period returns to start."""
        fun = lambda y, t: jnp.array([y[1], -y[0]])
        y0 = jnp.array([1.0, 0.0])
        n = 100
        y = integrate(runge_kutta_4, fun, y0, 0.0, 2.0 * jnp.pi / n, n)
        assert jnp.allclose(y, y0, atol=1e-4)


class TestStateEuler:

    def test_single_step(self):
        fun = lambda s, ds: (s[0], -s[1])
        s = state_euler((jnp.array(1.0), jnp.array(2.0)), 0.1, fun)
        assert jnp.allclose(s[0], 1.1)
        assert jnp.allclose(s[1], 1.8)


class TestProtocols:

    @pytest.mark.parametrize("method", [euler, runge_kutta_4])
    def test_methods_are_callable_steppers(self, method):
        assert isinstance(method, MethodProtocol)

    def test_state_method(self):
        assert isinstance(state_euler, StateMethodProtocol)
