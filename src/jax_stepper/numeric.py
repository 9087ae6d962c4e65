"""
Arithmetic on states.

States are pytrees whose leaves are JAX arrays, so a single method can
advance a scalar, a vector or a tuple of vectors. The helpers below are the
only arithmetic the methods rely on: addition of two states and scaling of a
state by a scalar.
"""

import jax
from jax import Array
import jax.numpy as jnp

from .custom_types import State, Scalar


def _inexact_dtype(x):
    dtype = jnp.result_type(x)
    if not jnp.issubdtype(dtype, jnp.inexact):
        dtype = jnp.result_type(float)
    return dtype


def constant(value: float, like) -> Array:
    """
    Build a numeric constant in the dtype of `like`.

    Integer `like` values fall back to the default floating dtype so that
    constants such as 0.5 are not truncated.

    Args:
        value: Constant to represent, e.g. 0.5.
        like: Array or scalar whose dtype the constant should take.

    Returns:
        0-dimensional array holding `value`.
    """
    return jnp.asarray(value, dtype=_inexact_dtype(like))


def as_inexact(tree: State) -> State:
    """Convert every leaf to a JAX array, promoting integers to floats."""
    return jax.tree_util.tree_map(
        lambda leaf: jnp.asarray(leaf, dtype=_inexact_dtype(leaf)), tree
    )


def _times(c: Scalar, x: Array) -> Array:
    # Python constants take the leaf's dtype before multiplying.
    if isinstance(c, (int, float)):
        c = constant(c, x)
    return c * x


def tree_add(a: State, b: State) -> State:
    return jax.tree_util.tree_map(lambda x, y: x + y, a, b)


def tree_scale(tree: State, c: Scalar) -> State:
    """Multiply every leaf by the scalar `c`."""
    return jax.tree_util.tree_map(lambda x: _times(c, x), tree)


def tree_axpy(a: Scalar, x: State, y: State) -> State:
    """Compute y + a*x leaf by leaf."""
    return jax.tree_util.tree_map(lambda x_, y_: y_ + _times(a, x_), x, y)


def tree_div(tree: State, d: Scalar) -> State:
    """Divide every leaf by `d`, taking Python constants in the leaf's dtype."""

    def divide(x):
        return x / (constant(d, x) if isinstance(d, (int, float)) else d)

    return jax.tree_util.tree_map(divide, tree)
