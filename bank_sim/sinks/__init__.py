"""Output sinks for command results."""

from bank_sim.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
