"""Frontend interfaces for the simulation."""

from .cli import SimulationConfig, TerminalRunner

__all__ = ["SimulationConfig", "TerminalRunner"]
