"""Basic example of using the three-body simulator."""

from three_body import Simulator
from three_body.physics.diagnostics import Diagnostics
from three_body.presets import FigureEightPreset
from three_body.io.console import format_snapshot


def main():
    """Run the figure-eight preset and report energy along the way."""
    # Generate initial conditions
    universe = FigureEightPreset(grav_const=1.0).generate()

    sim = Simulator(universe, dt=0.001)
    diagnostics = Diagnostics(universe.grav_const)

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")

    for index, snapshot in enumerate(sim.iter_snapshots(2000)):
        if index % 500 == 0:
            K, U, E = diagnostics.compute_energies(sim.universe)
            print(f"Step {index}: Time={snapshot.time:.2f}, Energy={E:.6f}")
            print("  " + format_snapshot(snapshot, precision=4))

    print(f"Final energy: {sim.get_energy():.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
