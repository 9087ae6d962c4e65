import jax.numpy as jnp
from matplotlib import pyplot as plt

from jax_stepper import Stepper, NewtonRaphson, euler, runge_kutta_4


def analytical_decay_solution(t, y0, k):
    """Exact solution of dy/dt = -k y: y(t) = y0 exp(-k t)."""
    return y0 * jnp.exp(-k * t)


def main(y0=1.0, k=2.0, t_end=3.0, n_steps=15):
    """
    Integrate exponential decay with Euler and RK4 and plot both trajectories
    against the analytical solution, then find the half-life with
    Newton-Raphson.

    Arguments:
        y0 - Initial value (default 1.0)
        k - Decay rate (default 2.0)
        t_end - Final time (default 3.0)
        n_steps - Number of steps (default 15)
    """
    dt = t_end / n_steps
    fun = lambda y, t: -k * y

    # Same engine, two methods
    steppers = {
        "Euler": Stepper(euler, y0, 0.0, fun),
        "RK4": Stepper(runge_kutta_4, y0, 0.0, fun),
    }

    history = {name: ([0.0], [y0]) for name in steppers}
    print("Solving...")
    for _ in range(n_steps):
        for name, stepper in steppers.items():
            stepper.step(dt)
            history[name][0].append(float(stepper.time))
            history[name][1].append(float(stepper.state))
    print("Solve finished.")

    for name, stepper in steppers.items():
        exact = analytical_decay_solution(stepper.time, y0, k)
        error = jnp.abs(stepper.state - exact) / exact
        print(f"{name}: y({float(stepper.time):.2f}) relative error = {float(error):.3e}")

    # Half-life: root of y0 exp(-k t) - y0/2
    solver = NewtonRaphson(
        0.1,
        lambda t: analytical_decay_solution(t, y0, k) - 0.5 * y0,
        lambda t: -k * analytical_decay_solution(t, y0, k),
    )
    solver.solve(1e-6)
    print(f"Half-life: {float(solver.x):.6f} (exact {float(jnp.log(2.0) / k):.6f})")

    # Plot results
    t = jnp.linspace(0.0, t_end, 200)
    fig, ax = plt.subplots()
    for name, (ts, ys) in history.items():
        ax.plot(ts, ys, '-', marker='.', label=name)
    ax.plot(t, analytical_decay_solution(t, y0, k), '--', label="Analytical")
    ax.axvline(float(solver.x), color='k', linestyle=':', label="Half-life")
    ax.legend()
    ax.set_xlabel('t')
    ax.set_ylabel('y')
    plt.show()


if __name__ == "__main__":
    main()
