"""Newton-Raphson method for scalar root finding."""

from typing import Optional

from flax import nnx
from jax import Array
import jax.numpy as jnp

from ..custom_types import Scalar, ScalarFunction
from ..numeric import as_inexact


def newton_raphson(x: Array, f: ScalarFunction, df: ScalarFunction) -> Array:
    """
    Single Newton-Raphson update $x - f(x) / f'(x)$.

    A vanishing derivative is not special-cased: the update follows IEEE-754
    division and yields inf or NaN.

    Args:
        x: Current iterate.
        f: Function whose root is sought.
        df: Derivative of f.

    Returns:
        Next iterate.
    """
    return x - f(x) / df(x)


class NewtonRaphson(nnx.Module):
    """
    Newton-Raphson root-finding algorithm for scalar functions.

    Iterative update: $x \\leftarrow x - f(x) / f'(x)$

    Attributes:
        f: Function whose root is sought.
        df: Derivative of f.
        maxiter: Default maximum number of iterations taken by `solve`.

    Example:
        ```python
        from jax_stepper import NewtonRaphson

        solver = NewtonRaphson(0.5, lambda x: x**2 - 2.0, lambda x: 2.0 * x)
        solver.solve(1e-3)
        solver.x  # ~1.41421
        ```
    """

    def __init__(
        self,
        x: Scalar,
        f: ScalarFunction,
        df: ScalarFunction,
        maxiter: int = 50
    ):
        if maxiter < 1:
            raise ValueError(f"maxiter must be positive, got {maxiter}")
        self.f = f
        self.df = df
        self.maxiter = maxiter
        self._x = nnx.Variable(as_inexact(x))

    @property
    def x(self) -> Array:
        """Current iterate."""
        return self._x.get_value()

    def step(self) -> None:
        """Apply a single Newton-Raphson update to the current iterate."""
        self._x.set_value(newton_raphson(self.x, self.f, self.df))

    def solve(self, tol: Scalar, maxiter: Optional[int] = None) -> None:
        """
        Iterate until successive iterates differ by less than `tol`.

        Every candidate is committed, including the one that satisfies the
        tolerance. Iterates that are NaN never satisfy it, so a vanishing
        derivative runs until the iteration cap.

        Args:
            tol: Convergence tolerance on |x_{k+1} - x_k|.
            maxiter: Maximum number of updates. Default: self.maxiter.
        """
        maxiter = self.maxiter if maxiter is None else maxiter
        if maxiter < 1:
            raise ValueError(f"maxiter must be positive, got {maxiter}")

        for _ in range(maxiter):
            x_k = self.x
            self.step()
            last_step = jnp.max(jnp.abs(self.x - x_k))
            if last_step < tol:
                return

        print(
            f"WARNING: Newton-Raphson did not converge within {maxiter} iterations.\n"
            f"Last step size: {float(last_step):.2e}."
        )
