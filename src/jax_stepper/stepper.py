"""
Generic stepping engines.

An engine owns the evolving state (and, for ODEs, the time) together with a
method and a derivative function. It only knows the method's call signature:
Euler, RK4 or any user-supplied rule are driven by the same `step`/`solve`
loop.
"""

from flax import nnx

from .custom_types import (
    Derivative, Method, Scalar, State, StateDerivative, StateMethod
)
from .numeric import as_inexact


class StateStepper(nnx.Module):
    """
    Engine advancing a state by a step variable, with no time axis.

    Update: $$ s_{n+1} = method(s_n, ds, f) $$

    Attributes:
        method: Update rule with signature (state, ds, derivative, args) -> state.
        derivative: Rate of change with signature (state, ds, *args) -> state.
            Both may be read or replaced directly.

    Example:
        ```python
        from jax_stepper import StateStepper, state_euler

        stepper = StateStepper(state_euler, (1.0, 2.0), lambda s, ds: (s[0], -s[1]))
        stepper.solve(0.1, 10)
        x, y = stepper.state
        ```
    """

    def __init__(
        self,
        method: StateMethod,
        state: State,
        derivative: StateDerivative,
        args: tuple = ()
    ):
        self.method = method
        self.derivative = derivative
        self._args = nnx.Variable(tuple(args))
        self._state = nnx.Variable(as_inexact(state))

    @property
    def state(self) -> State:
        """Current state."""
        return self._state.get_value()

    @property
    def args(self) -> tuple:
        """Additional arguments passed to the derivative."""
        return self._args.get_value()

    def step(self, ds: Scalar) -> None:
        """
        Advance the state by a single step.

        Args:
            ds: Step size. Zero leaves the state where it is, negative values
                step backwards.
        """
        self._state.set_value(
            self.method(self.state, ds, self.derivative, self.args)
        )

    def solve(self, ds: Scalar, steps: int) -> None:
        """
        Take `steps` consecutive steps of size `ds`.

        Args:
            ds: Step size, the same for every step.
            steps: Number of steps. Zero leaves the engine untouched.
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")

        for _ in range(steps):
            self.step(ds)


class Stepper(StateStepper):
    """
    Engine integrating dy/dt = f(y, t) with an explicit time axis.

    Each step computes the new state from the pre-step time, then advances
    the time:
        y_{n+1} = method(y_n, t_n, dt, f)
        t_{n+1} = t_n + dt

    Attributes:
        method: Time-stepping method with signature
            (state, time, dt, derivative, args) -> state, e.g. `euler` or
            `runge_kutta_4`.
        derivative: Right-hand side with signature (state, time, *args) -> state.

    Example:
        ```python
        from jax_stepper import Stepper, runge_kutta_4

        # dy/dx = 2x, y(0) = 0
        stepper = Stepper(runge_kutta_4, 0.0, 0.0, lambda y, x: 2.0 * x)
        stepper.solve(1.0, 10)
        stepper.time, stepper.state  # 10.0, 100.0
        ```
    """

    def __init__(
        self,
        method: Method,
        state: State,
        time: Scalar,
        derivative: Derivative,
        args: tuple = ()
    ):
        super().__init__(method, state, derivative, args)
        self._time = nnx.Variable(as_inexact(time))

    @property
    def time(self) -> Scalar:
        """Current time."""
        return self._time.get_value()

    def step(self, dt: Scalar) -> None:
        """
        Advance the state from the current time, then the time by `dt`.

        Args:
            dt: Time step size. Zero leaves the engine where it is, negative
                values step backwards in time.
        """
        time = self.time
        self._state.set_value(
            self.method(self.state, time, dt, self.derivative, self.args)
        )
        self._time.set_value(time + dt)
