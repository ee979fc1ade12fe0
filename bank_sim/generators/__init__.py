"""Synthetic data generators."""

from bank_sim.generators.base import BaseGenerator
from bank_sim.generators.script import CommandScriptGenerator

__all__ = ["BaseGenerator", "CommandScriptGenerator"]
