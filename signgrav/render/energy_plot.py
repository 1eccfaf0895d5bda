"""Static trajectory plot using matplotlib."""

from pathlib import Path
from typing import Tuple
import numpy as np
from matplotlib.figure import Figure
from matplotlib.backends.backend_agg import FigureCanvasAgg
from signgrav.physics.trajectory import Trajectory


def plot_trajectory(
    trajectory: Trajectory,
    output_path: str,
    figsize: Tuple[int, int] = (10, 8),
    dpi: int = 100
) -> Path:
    """Draw body positions and energies against step and save the image.
    
    Uses an Agg canvas directly, so no display or pyplot state is involved.
    
    Args:
        trajectory: Simulation result
        output_path: Image path; the format follows the suffix (.png, .svg, ...)
        figsize: Figure size (width, height)
        dpi: Dots per inch
        
    Returns:
        Path of the written image
    """
    output_path = Path(output_path)
    steps = np.arange(trajectory.n_steps + 1)
    
    fig = Figure(figsize=figsize, dpi=dpi)
    FigureCanvasAgg(fig)
    ax_pos, ax_energy = fig.subplots(2, 1, sharex=True)
    
    for body in range(trajectory.n_bodies):
        ax_pos.step(steps, trajectory.positions[:, body], where='post', label=f"body {body}")
    ax_pos.set_ylabel("position")
    if trajectory.n_bodies <= 10:
        ax_pos.legend(loc='upper right', fontsize='small')
    
    ax_energy.plot(steps, trajectory.potential_energies, label="potential Σ|x|")
    ax_energy.plot(steps, trajectory.kinetic_energies, label="kinetic Σ|v|")
    ax_energy.set_xlabel("step")
    ax_energy.set_ylabel("energy")
    ax_energy.legend(loc='upper right', fontsize='small')
    
    fig.suptitle(f"{trajectory.n_bodies} bodies, {trajectory.n_steps} steps")
    fig.savefig(output_path)
    return output_path
