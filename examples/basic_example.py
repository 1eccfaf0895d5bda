"""Basic example of using the sign-gravity simulator."""

from signgrav import simulate, find_cycle_length, get_backend


def main():
    """Run a small four-body simulation."""
    # Get backend (NumPy is always available)
    backend = get_backend("numpy")

    initial_positions = [-7, -1, 4, 10]

    print("Running simulation...")
    positions, velocities, potential, kinetic = simulate(initial_positions, 100, backend=backend)

    for step in range(0, 101, 20):
        print(f"Step {step}: x={positions[step].tolist()}, v={velocities[step].tolist()}, "
              f"PE={potential[step]}, KE={kinetic[step]}")

    cycle_len = find_cycle_length([-3, 0, 3], backend=backend)
    print(f"[-3, 0, 3] returns to its initial state after {cycle_len} steps")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
