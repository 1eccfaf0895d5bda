"""CLI main entry point."""

import argparse
import sys
import yaml
from typing import List, Optional
from signgrav.backends.factory import get_backend, list_available_backends
from signgrav.errors import CycleNotFoundError
from signgrav.physics.simulator import Simulator
from signgrav.physics.diagnostics import find_cycle_length, summarize
from signgrav.render.energy_plot import plot_trajectory
from signgrav.utils.config import Config, load_config


def build_config(args) -> Config:
    """Merge an optional config file with command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    
    if args.positions is not None:
        config.initial_positions = args.positions
    if args.backend is not None:
        config.backend = args.backend
    if getattr(args, 'steps', None) is not None:
        config.steps = args.steps
    if getattr(args, 'report_every', None) is not None:
        config.report_every = args.report_every
    if getattr(args, 'plot', None) is not None:
        config.plot_path = args.plot
    if getattr(args, 'max_steps', None) is not None:
        config.max_cycle_steps = args.max_steps
    
    config.validate()
    return config


def _format_row(step: int, positions, velocities, pe: int, ke: int, te: int) -> str:
    pos = " ".join(str(int(x)) for x in positions)
    vel = " ".join(str(int(v)) for v in velocities)
    return f"{step:<8} {pe:<10} {ke:<10} {te:<10} [{pos}]  [{vel}]"


def run_simulation(config: Config, backend=None):
    """Run a simulation and print the report table."""
    backend = backend or get_backend(config.backend)
    sim = Simulator(backend)
    
    print(f"Running simulation: {len(config.initial_positions)} bodies, {config.steps} steps")
    print(f"Backend: {backend.name} ({backend.device})")
    
    trajectory = sim.run(config.initial_positions, config.steps)
    total_energies = trajectory.total_energies
    
    print(f"{'Step':<8} {'PE':<10} {'KE':<10} {'TE':<10} {'Positions / Velocities'}")
    print("-" * 70)
    for step in range(trajectory.n_steps + 1):
        if step % config.report_every == 0 or step == trajectory.n_steps:
            print(_format_row(
                step,
                trajectory.positions[step],
                trajectory.velocities[step],
                int(trajectory.potential_energies[step]),
                int(trajectory.kinetic_energies[step]),
                int(total_energies[step]),
            ))
    
    summary = summarize(trajectory)
    print(f"Final: PE={summary['final_potential_energy']}, KE={summary['final_kinetic_energy']}, "
          f"TE={summary['final_total_energy']}, center={summary['final_center_position']:.2f}")
    
    if config.plot_path:
        path = plot_trajectory(trajectory, config.plot_path)
        print(f"Plot saved to {path}")
    
    print("Simulation complete!")
    return trajectory


def run_cycle_search(config: Config, backend=None) -> int:
    """Find and print the cycle length of the configured bodies."""
    backend = backend or get_backend(config.backend)
    cycle_len = find_cycle_length(
        config.initial_positions,
        max_steps=config.max_cycle_steps,
        backend=backend
    )
    print(f"After {cycle_len} step(s), initial state of bodies repeats.")
    return cycle_len


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signgrav",
        description="Sign Gravity - one-dimensional N-body simulation with a sign-only force"
    )
    parser.add_argument('--list-backends', action='store_true',
                        help='List available backends and exit')
    
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--positions', type=int, nargs='+', default=None,
                        help='Initial body positions (bodies start at rest)')
    common.add_argument('--backend', type=str, default=None,
                        choices=['numpy', 'jax', 'pytorch'],
                        help='Compute backend (default: numpy)')
    common.add_argument('--config', type=str, default=None,
                        help='JSON or YAML config file; command-line values override it')
    
    subparsers = parser.add_subparsers(dest='command')
    
    run_parser = subparsers.add_parser('run', parents=[common],
                                       help='Simulate and print per-step state and energies')
    run_parser.add_argument('--steps', type=int, default=None,
                            help='Number of simulation steps')
    run_parser.add_argument('--report-every', type=int, default=None,
                            help='Print state every N steps (the final step is always printed)')
    run_parser.add_argument('--plot', type=str, default=None,
                            help='Save a position/energy plot to this image file')
    
    cycle_parser = subparsers.add_parser('cycle', parents=[common],
                                         help='Count steps until the initial state repeats')
    cycle_parser.add_argument('--max-steps', type=int, default=None,
                              help='Give up after this many steps')
    
    return parser


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if args.list_backends:
        backends = list_available_backends()
        print("Available backends:")
        for backend in backends:
            print(f"  - {backend}")
        return
    
    if args.command is None:
        parser.error("a command is required: run or cycle")
    
    try:
        config = build_config(args)
        backend = get_backend(config.backend)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        # SimulationInputError, bad config contents and backend lookup failures are ValueErrors
        parser.error(str(exc))
    
    if args.command == "run":
        run_simulation(config, backend)
    else:
        try:
            run_cycle_search(config, backend)
        except CycleNotFoundError as exc:
            print(exc)
            sys.exit(1)


if __name__ == '__main__':
    main()
