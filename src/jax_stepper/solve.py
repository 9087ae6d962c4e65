"""Fixed-step integration over a time interval, driven by a `Stepper`."""

import time
from typing import Optional, Sequence, Tuple

import jax
from jax import Array
import jax.numpy as jnp

from .custom_types import Derivative, Method, State
from .stepper import Stepper


def _advance_to(stepper: Stepper, t_target: float, step_size: float) -> int:
    """Step until `t_target`, shortening only the last step. Returns the step count."""
    n = 0
    while stepper.time < t_target:
        stepper.step(jnp.minimum(step_size, t_target - stepper.time))
        n += 1
    return n


def _check_step_size(step_size: float) -> None:
    if not step_size > 0:
        raise ValueError(f"step_size must be positive, got {step_size}")


def solve_ivp(
    fun: Derivative,
    t_span: Tuple[float, float],
    y0: State,
    method: Method,
    step_size: float,
    args: tuple = ()
) -> Tuple[Array, State]:
    """
    Integrate dy/dt = fun(y, t, *args) from t_span[0] to t_span[1].

    Args:
        fun: Right-hand side of the system
        t_span: (t_start, t_end) time interval
        y0: Initial condition
        method: Time-stepping method (e.g., euler, runge_kutta_4)
        step_size: Positive time step size; the last step is cut short to land
            on t_end
        args: Additional arguments to pass to fun

    Returns:
        t_final: Final time
        y_final: Solution at t_final

    Example usage:
    ```python
    from jax_stepper import solve_ivp, runge_kutta_4

    # dy/dt = -k*y
    t, y = solve_ivp(lambda y, t, k: -k * y, (0.0, 2.0), 1.0, runge_kutta_4,
                     step_size=0.01, args=(0.5,))
    ```
    """
    _check_step_size(step_size)
    t_start, t_end = t_span

    stepper = Stepper(method, y0, t_start, fun, args)
    _advance_to(stepper, t_end, step_size)
    return stepper.time, stepper.state


def solve_with_history(
    fun: Derivative,
    t_span: Tuple[float, float],
    y0: State,
    method: Method,
    step_size: float,
    t_eval: Optional[Sequence[float]] = None,
    args: tuple = (),
    verbose: bool = False
) -> Tuple[Array, State]:
    """
    Integrate like `solve_ivp`, recording the solution at the times `t_eval`.

    A single engine is carried through every evaluation time, so a step is
    only shortened where it would overshoot one of them.

    Args:
        fun: Right-hand side of the system
        t_span: (t_start, t_end) time interval
        y0: Initial condition
        method: Time-stepping method (e.g., euler, runge_kutta_4)
        step_size: Positive time step size
        t_eval: Sorted times within t_span at which to record the solution.
            Default: only the initial and final times. t_start is always
            recorded.
        args: Additional arguments to pass to fun
        verbose: Print progress information

    Returns:
        t: Recorded times, shape (n_points,)
        y: Recorded states stacked along a new leading axis (leaf by leaf
            for pytree states)
    """
    _check_step_size(step_size)
    t_start, t_end = t_span

    targets = [t_end] if t_eval is None else [float(t) for t in t_eval]
    if any(t < t_start or t > t_end for t in targets):
        raise ValueError("All values in t_eval must be within t_span")
    if any(b < a for a, b in zip(targets, targets[1:])):
        raise ValueError("t_eval must be sorted in increasing order")
    if targets and targets[0] == t_start:
        targets = targets[1:]

    stepper = Stepper(method, y0, t_start, fun, args)

    if verbose:
        method_name = getattr(method, "__name__", type(method).__name__)
        print(f"Solving with {method_name}")
        print(f"Time: [{t_start}, {t_end}], dt={step_size}")
        print(f"Recording {len(targets) + 1} time points")

    times = [stepper.time]
    states = [stepper.state]
    n_steps = 0
    start_wallclock = time.time()

    for t_target in targets:
        n_steps += _advance_to(stepper, t_target, step_size)
        times.append(stepper.time)
        states.append(stepper.state)

    elapsed = time.time() - start_wallclock
    if verbose:
        print(f"Completed {n_steps} steps in {elapsed:.3f}s")

    t = jnp.stack(times)
    y = jax.tree_util.tree_map(lambda *leaves: jnp.stack(leaves), *states)
    return t, y
