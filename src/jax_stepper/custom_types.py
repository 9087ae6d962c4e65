"""Type aliases to improve type hint readability."""

from typing import Any, Callable, TypeAlias

from jax import Array

# Any pytree of arrays: a scalar, a vector, a tuple of vectors, ...
State: TypeAlias = Any
Scalar: TypeAlias = Array | float

Derivative: TypeAlias = Callable[..., State]
StateDerivative: TypeAlias = Callable[..., State]
Method: TypeAlias = Callable[[State, Scalar, Scalar, Derivative, tuple], State]
StateMethod: TypeAlias = Callable[[State, Scalar, StateDerivative, tuple], State]
ScalarFunction: TypeAlias = Callable[[Array], Array]
