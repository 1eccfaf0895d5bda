"""Trajectory plotting."""

from signgrav.render.energy_plot import plot_trajectory

__all__ = ["plot_trajectory"]
